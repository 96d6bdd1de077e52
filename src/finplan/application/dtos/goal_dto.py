"""DTOs for goal queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from finplan.application.dtos.transaction_dto import TransactionDTO
from finplan.domain.goals import GoalAggregate


@dataclass(frozen=True)
class GoalSummaryDTO:
    id: UUID
    title: str
    description: str
    currency: str
    target_amount: Optional[Decimal]
    current_amount: Decimal
    remaining: Decimal
    progress: Decimal  # 0..1, may exceed 1 once the target is overshot
    due_date: Optional[date]
    is_completed: bool
    is_overdue: bool

    transactions: tuple[TransactionDTO, ...] = ()

    @classmethod
    def from_aggregate(
        cls,
        aggregate: GoalAggregate,
        today: date,
        include_transactions: bool = False,
    ) -> GoalSummaryDTO:
        goal = aggregate.goal
        transactions: tuple[TransactionDTO, ...] = ()
        if include_transactions:
            transactions = tuple(
                TransactionDTO.from_entity(t) for t in aggregate.transactions
            )
        return cls(
            id=aggregate.id,
            title=goal.title,
            description=goal.description,
            currency=goal.currency.code,
            target_amount=goal.target_amount.amount if goal.target_amount else None,
            current_amount=aggregate.total_contributed.amount,
            remaining=aggregate.remaining_amount.amount,
            progress=aggregate.progress_ratio,
            due_date=goal.due_date,
            is_completed=goal.is_completed(),
            is_overdue=goal.is_overdue(today),
            transactions=transactions,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "currency": self.currency,
            "target_amount": (
                str(self.target_amount) if self.target_amount is not None else None
            ),
            "current_amount": str(self.current_amount),
            "remaining": str(self.remaining),
            "progress": str(self.progress),
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "is_completed": self.is_completed,
            "is_overdue": self.is_overdue,
            "transactions": [t.to_dict() for t in self.transactions],
        }
