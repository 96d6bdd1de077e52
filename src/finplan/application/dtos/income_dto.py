"""DTO for monthly income."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from finplan.application.dtos.transaction_dto import TransactionDTO
from finplan.domain.income import IncomeAggregate


@dataclass(frozen=True)
class IncomeSummaryDTO:
    id: UUID
    month: int
    year: int
    currency: str
    total: Decimal
    entries: tuple[TransactionDTO, ...]

    @classmethod
    def from_aggregate(cls, aggregate: IncomeAggregate) -> IncomeSummaryDTO:
        income = aggregate.income
        return cls(
            id=aggregate.id,
            month=income.month,
            year=income.year,
            currency=income.currency.code,
            total=aggregate.total.amount,
            entries=tuple(TransactionDTO.from_entity(t) for t in aggregate.entries),
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "month": self.month,
            "year": self.year,
            "currency": self.currency,
            "total": str(self.total),
            "entries": [t.to_dict() for t in self.entries],
        }
