"""DTO for transactions attached to budgets, debts and goals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from finplan.domain.transactions import Transaction


@dataclass(frozen=True)
class TransactionDTO:
    id: UUID
    name: str
    description: str
    amount: Decimal
    currency: str
    type: str
    recurring: int
    created_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> TransactionDTO:
        return cls(
            id=transaction.id,
            name=transaction.name,
            description=transaction.description,
            amount=transaction.amount.amount,
            currency=transaction.amount.currency.code,
            type=transaction.type.value,
            recurring=transaction.recurring,
            created_at=transaction.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "amount": str(self.amount),
            "currency": self.currency,
            "type": self.type,
            "recurring": self.recurring,
            "created_at": self.created_at.isoformat(),
        }
