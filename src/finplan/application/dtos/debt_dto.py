"""DTOs for debt queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from finplan.application.dtos.transaction_dto import TransactionDTO
from finplan.domain.debt import DebtAggregate


@dataclass(frozen=True)
class DebtSummaryDTO:
    id: UUID
    lender: str
    purpose: str
    type: str
    currency: str
    rate: Decimal
    due_date: date

    amount: Decimal
    paid: Decimal
    remaining: Decimal
    monthly_payment: Decimal
    is_paid_off: bool

    payments: tuple[TransactionDTO, ...] = ()

    @classmethod
    def from_aggregate(
        cls,
        aggregate: DebtAggregate,
        today: date,
        include_payments: bool = False,
    ) -> DebtSummaryDTO:
        debt = aggregate.debt
        payments: tuple[TransactionDTO, ...] = ()
        if include_payments:
            payments = tuple(
                TransactionDTO.from_entity(p) for p in aggregate.payments
            )
        return cls(
            id=aggregate.id,
            lender=debt.lender,
            purpose=debt.purpose,
            type=debt.type.value,
            currency=debt.amount.currency.code,
            rate=debt.rate,
            due_date=debt.due_date,
            amount=debt.amount.amount,
            paid=aggregate.current_paid_amount.amount,
            remaining=aggregate.remaining_amount.amount,
            monthly_payment=aggregate.monthly_payment(today).amount,
            is_paid_off=aggregate.is_paid_off,
            payments=payments,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "lender": self.lender,
            "purpose": self.purpose,
            "type": self.type,
            "currency": self.currency,
            "rate": str(self.rate),
            "due_date": self.due_date.isoformat(),
            "amount": str(self.amount),
            "paid": str(self.paid),
            "remaining": str(self.remaining),
            "monthly_payment": str(self.monthly_payment),
            "is_paid_off": self.is_paid_off,
            "payments": [p.to_dict() for p in self.payments],
        }


@dataclass(frozen=True)
class MonthlyPaymentDTO:
    """Sum of the monthly instalments over all open debts of one currency."""

    currency: str
    total: Decimal
    debt_count: int
    per_debt: dict[UUID, Decimal]

    def to_dict(self) -> dict:
        return {
            "currency": self.currency,
            "total": str(self.total),
            "debt_count": self.debt_count,
            "per_debt": {str(k): str(v) for k, v in self.per_debt.items()},
        }
