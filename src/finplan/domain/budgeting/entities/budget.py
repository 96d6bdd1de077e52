"""Monthly budget entity."""

from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import UUID

from finplan.domain.budgeting.exceptions import (
    InvalidBudgetAmountError,
    InvalidBudgetPeriodError,
)
from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.exceptions import RequiredFieldError
from finplan.domain.shared.value_objects import Money

MIN_MONTH = 1
MAX_MONTH = 12


class BudgetCategory(str, Enum):
    FIXED = "fixed"
    FLEXIBLE = "flexible"


class BudgetProps(EntityProps):
    name: str
    amount: Money
    category: BudgetCategory = BudgetCategory.FLEXIBLE
    color: Optional[str] = None
    icon: Optional[str] = None
    month: int
    year: int


class Budget(Entity[BudgetProps]):
    """Spending limit for one category in one calendar month."""

    @classmethod
    def new(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        name: str,
        amount: Money,
        month: int,
        year: int,
        category: BudgetCategory = BudgetCategory.FLEXIBLE,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> Budget:
        return cls(
            BudgetProps(
                user_id=user_id,
                name=name,
                amount=amount,
                category=category,
                color=color,
                icon=icon,
                month=month,
                year=year,
            ),
        )

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def amount(self) -> Money:
        return self._props.amount

    @property
    def category(self) -> BudgetCategory:
        return self._props.category

    @property
    def color(self) -> Optional[str]:
        return self._props.color

    @property
    def icon(self) -> Optional[str]:
        return self._props.icon

    @property
    def month(self) -> int:
        return self._props.month

    @property
    def year(self) -> int:
        return self._props.year

    def update(  # NOQA: PLR0913
        self,
        name: Optional[str] = None,
        amount: Optional[Money] = None,
        category: Optional[BudgetCategory] = None,
        color: Optional[str] = None,
        icon: Optional[str] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> None:
        self._apply(
            name=name,
            amount=amount,
            category=category,
            color=color,
            icon=icon,
            month=month,
            year=year,
        )

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise RequiredFieldError("Budget", "name")
        if not self.amount.is_positive():
            raise InvalidBudgetAmountError(self.amount.amount)
        if not MIN_MONTH <= self.month <= MAX_MONTH or self.year <= 0:
            raise InvalidBudgetPeriodError(self.month, self.year)
