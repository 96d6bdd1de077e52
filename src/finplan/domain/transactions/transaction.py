"""Money movement recorded under a budget, debt or goal."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.exceptions import (
    InvalidAmountError,
    RequiredFieldError,
    ValidationError,
)
from finplan.domain.shared.value_objects import Money


class TransactionType(str, Enum):
    INCOME = "income"
    OUTCOME = "outcome"
    GOAL_CONTRIBUTION = "goal_contribution"
    GOAL_WITHDRAWAL = "goal_withdrawal"
    DEBT_PAYMENT = "debt_payment"


class TransactionProps(EntityProps):
    amount: Money
    type: TransactionType
    name: str
    description: str = ""
    # number of months the movement repeats, 0 for one-off
    recurring: int = 0


class Transaction(Entity[TransactionProps]):
    """A single money movement.

    Amounts are always positive; the direction is carried by ``type``.
    """

    entity_name = "Transaction"

    def __init__(
        self,
        props: TransactionProps,
        entity_id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        super().__init__(props, entity_id, created_at, updated_at)

    @classmethod
    def new(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        amount: Money,
        transaction_type: TransactionType,
        name: str,
        description: str = "",
        recurring: int = 0,
    ) -> Transaction:
        return cls(
            TransactionProps(
                user_id=user_id,
                amount=amount,
                type=transaction_type,
                name=name,
                description=description,
                recurring=recurring,
            ),
        )

    @property
    def amount(self) -> Money:
        return self._props.amount

    @property
    def type(self) -> TransactionType:
        return self._props.type

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def description(self) -> str:
        return self._props.description

    @property
    def recurring(self) -> int:
        return self._props.recurring

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        amount: Optional[Money] = None,
        recurring: Optional[int] = None,
    ) -> None:
        self._apply(
            name=name,
            description=description,
            amount=amount,
            recurring=recurring,
        )

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise RequiredFieldError(self.entity_name, "name")
        if not self.amount.is_positive():
            raise InvalidAmountError(self.amount.amount)
        if self.recurring < 0:
            msg = f"{self.entity_name} recurring must not be negative"
            raise ValidationError(msg, details={"recurring": self.recurring})

    def __str__(self) -> str:
        return f"{self.type.value} {self.name}: {self.amount}"
