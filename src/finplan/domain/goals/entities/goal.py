"""Savings goal entity."""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from finplan.domain.goals.exceptions import GoalInvalidTargetAmountError
from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.exceptions import CurrencyMismatchError, RequiredFieldError
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Currency, Money


class GoalProps(EntityProps):
    title: str
    description: str = ""
    target_amount: Optional[Money] = None
    current_amount: Optional[Money] = None
    due_date: Optional[date] = None


class Goal(Entity[GoalProps]):
    """Something the user is saving towards.

    ``current_amount`` mirrors the net contributions held by the goal
    aggregate; it is refreshed through ``update_progress``.
    """

    @classmethod
    def new(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        title: str,
        description: str = "",
        target_amount: Optional[Money] = None,
        current_amount: Optional[Money] = None,
        due_date: Optional[date] = None,
    ) -> Goal:
        return cls(
            GoalProps(
                user_id=user_id,
                title=title,
                description=description,
                target_amount=target_amount,
                current_amount=current_amount,
                due_date=due_date,
            ),
        )

    @property
    def title(self) -> str:
        return self._props.title

    @property
    def description(self) -> str:
        return self._props.description

    @property
    def target_amount(self) -> Optional[Money]:
        return self._props.target_amount

    @property
    def current_amount(self) -> Optional[Money]:
        return self._props.current_amount

    @property
    def due_date(self) -> Optional[date]:
        return self._props.due_date

    @property
    def currency(self) -> Currency:
        """Target currency, else current-amount currency, else the default."""
        if self.target_amount is not None:
            return self.target_amount.currency
        if self.current_amount is not None:
            return self.current_amount.currency
        return Currency.default()

    def update(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: Optional[Money] = None,
        due_date: Optional[date] = None,
    ) -> None:
        self._apply(
            title=title,
            description=description,
            target_amount=target_amount,
            due_date=due_date,
        )

    def update_progress(self, amount: Money) -> None:
        if amount != self.current_amount:
            self._apply(current_amount=amount)

    def is_completed(self) -> bool:
        if self.target_amount is None or self.current_amount is None:
            return False
        return self.current_amount >= self.target_amount

    def is_overdue(self, today: Optional[date] = None) -> bool:
        if self.due_date is None or self.is_completed():
            return False
        return (today or today_utc()) > self.due_date

    def validate(self) -> None:
        if not self.title or not self.title.strip():
            raise RequiredFieldError("Goal", "title")
        if self.target_amount is not None and not self.target_amount.is_positive():
            raise GoalInvalidTargetAmountError(self.target_amount.amount)
        if (
            self.target_amount is not None
            and self.current_amount is not None
            and self.target_amount.currency != self.current_amount.currency
        ):
            raise CurrencyMismatchError(
                self.target_amount.currency,
                self.current_amount.currency,
            )
