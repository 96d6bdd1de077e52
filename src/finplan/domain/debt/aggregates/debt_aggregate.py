"""Debt aggregate: a debt and the payments made against it."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from finplan.domain.debt.entities.debt import Debt, DebtType
from finplan.domain.debt.entities.debt_payment import DebtPayment
from finplan.domain.debt.exceptions import DebtPaymentNotFoundError
from finplan.domain.debt.services.monthly_payment import calculate_monthly_payment
from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.exceptions import CurrencyMismatchError
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Money

ALREADY_PAID_NAME = "Already paid"
DEFAULT_PAYMENT_NAME = "Debt payment"


class DebtAggregate(Aggregate[Debt, DebtPayment]):
    """Debt root with its payments.

    ``pay`` records payments without validating them; callers run
    ``validate`` before saving, which rejects non-positive amounts and
    payments in a foreign currency.
    """

    @classmethod
    def new_debt(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        *,
        lender: str,
        amount: Money,
        due_date: date,
        purpose: str = "",
        rate: Decimal | int | str = Decimal(0),
        current_paid_amount: Optional[Money] = None,
        debt_type: DebtType = DebtType.BAD_DEBT,
    ) -> DebtAggregate:
        """Create a debt, recording any amount repaid before it was tracked."""
        debt = Debt.new(
            user_id=user_id,
            lender=lender,
            amount=amount,
            due_date=due_date,
            purpose=purpose,
            rate=rate,
            debt_type=debt_type,
        )
        payments = []
        if current_paid_amount is not None and current_paid_amount.is_positive():
            payments.append(
                DebtPayment.new_payment(
                    user_id=user_id,
                    amount=current_paid_amount,
                    name=ALREADY_PAID_NAME,
                    description=f"Paid to {lender} before tracking started",
                ),
            )
        return cls.create(debt, payments)

    @property
    def debt(self) -> Debt:
        return self._root

    @property
    def payments(self) -> list[DebtPayment]:
        return self._children.items

    @property
    def amount(self) -> Money:
        return self.debt.amount

    @property
    def rate(self) -> Decimal:
        return self.debt.rate

    @property
    def due_date(self) -> date:
        return self.debt.due_date

    @property
    def current_paid_amount(self) -> Money:
        total = Money.zero(self.debt.amount.currency)
        for payment in self._children.items:
            total = total.add(payment.amount)
        return total

    @property
    def remaining_amount(self) -> Money:
        remaining = self.debt.amount.subtract(self.current_paid_amount)
        if remaining.is_negative():
            return Money.zero(remaining.currency)
        return remaining

    @property
    def is_paid_off(self) -> bool:
        return self.remaining_amount.is_zero()

    def monthly_payment(self, today: Optional[date] = None) -> Money:
        return calculate_monthly_payment(
            remaining=self.remaining_amount,
            rate=self.debt.rate,
            due_date=self.debt.due_date,
            today=today or today_utc(),
        )

    def pay(
        self,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> DebtPayment:
        payment = DebtPayment.new_payment(
            user_id=self.user_id,
            amount=amount,
            name=name or DEFAULT_PAYMENT_NAME,
            description=description or f"Payment to {self.debt.lender}",
        )
        self._children.add(payment)
        return payment

    def remove_payment(self, payment_id: UUID) -> DebtPayment:
        payment = self._children.find(payment_id)
        if payment is None:
            raise DebtPaymentNotFoundError(self.id, payment_id)
        self._children.remove(payment)
        return payment

    def update_details(
        self,
        lender: Optional[str] = None,
        purpose: Optional[str] = None,
        rate: Optional[Decimal] = None,
        due_date: Optional[date] = None,
        debt_type: Optional[DebtType] = None,
    ) -> None:
        self.debt.update(
            lender=lender,
            purpose=purpose,
            rate=rate,
            due_date=due_date,
            debt_type=debt_type,
        )
        self.validate()

    def validate(self) -> None:
        super().validate()
        currency = self.debt.amount.currency
        for payment in self._children.items:
            if payment.amount.currency != currency:
                raise CurrencyMismatchError(currency, payment.amount.currency, "pay")
