"""Debt root entity."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from finplan.domain.debt.exceptions import InvalidDebtRateError
from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.exceptions import InvalidAmountError, RequiredFieldError
from finplan.domain.shared.value_objects import Money


class DebtType(str, Enum):
    BAD_DEBT = "bad_debt"
    GOOD_DEBT = "good_debt"


class DebtProps(EntityProps):
    lender: str
    purpose: str = ""
    amount: Money
    # monthly interest rate in percent
    rate: Decimal = Decimal(0)
    due_date: date
    type: DebtType = DebtType.BAD_DEBT


class Debt(Entity[DebtProps]):
    """Money owed to a lender.

    The principal is fixed at creation; ``update`` only touches lender,
    purpose, rate, due date and type.
    """

    @classmethod
    def new(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        lender: str,
        amount: Money,
        due_date: date,
        purpose: str = "",
        rate: Decimal | int | str = Decimal(0),
        debt_type: DebtType = DebtType.BAD_DEBT,
    ) -> Debt:
        return cls(
            DebtProps(
                user_id=user_id,
                lender=lender,
                purpose=purpose,
                amount=amount,
                rate=Decimal(str(rate)),
                due_date=due_date,
                type=debt_type,
            ),
        )

    @property
    def lender(self) -> str:
        return self._props.lender

    @property
    def purpose(self) -> str:
        return self._props.purpose

    @property
    def amount(self) -> Money:
        return self._props.amount

    @property
    def rate(self) -> Decimal:
        return self._props.rate

    @property
    def due_date(self) -> date:
        return self._props.due_date

    @property
    def type(self) -> DebtType:
        return self._props.type

    def update(
        self,
        lender: Optional[str] = None,
        purpose: Optional[str] = None,
        rate: Optional[Decimal] = None,
        due_date: Optional[date] = None,
        debt_type: Optional[DebtType] = None,
    ) -> None:
        self._apply(
            lender=lender,
            purpose=purpose,
            rate=Decimal(str(rate)) if rate is not None else None,
            due_date=due_date,
            type=debt_type,
        )

    def validate(self) -> None:
        if not self.lender or not self.lender.strip():
            raise RequiredFieldError("Debt", "lender")
        if not self.amount.is_positive():
            msg = "Debt amount must be greater than 0"
            raise InvalidAmountError(self.amount.amount, msg)
        if self.rate < 0:
            raise InvalidDebtRateError(self.rate)
