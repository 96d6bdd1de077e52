"""DTOs for budget queries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from finplan.application.dtos.transaction_dto import TransactionDTO
from finplan.domain.budgeting import BudgetAggregate


@dataclass(frozen=True)
class BudgetSummaryDTO:
    """Budget with its spending totals for one month."""

    id: UUID
    name: str
    category: str
    color: Optional[str]
    icon: Optional[str]
    month: int
    year: int
    currency: str

    amount: Decimal
    spent: Decimal
    remaining: Decimal  # negative when over budget
    is_over_budget: bool

    spending: tuple[TransactionDTO, ...] = ()

    @classmethod
    def from_aggregate(
        cls,
        aggregate: BudgetAggregate,
        include_spending: bool = False,
    ) -> BudgetSummaryDTO:
        budget = aggregate.budget
        spending: tuple[TransactionDTO, ...] = ()
        if include_spending:
            spending = tuple(
                TransactionDTO.from_entity(t) for t in aggregate.spending
            )
        return cls(
            id=aggregate.id,
            name=budget.name,
            category=budget.category.value,
            color=budget.color,
            icon=budget.icon,
            month=budget.month,
            year=budget.year,
            currency=budget.amount.currency.code,
            amount=budget.amount.amount,
            spent=aggregate.spent.amount,
            remaining=aggregate.remaining_budget.amount,
            is_over_budget=aggregate.is_over_budget,
            spending=spending,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "icon": self.icon,
            "month": self.month,
            "year": self.year,
            "currency": self.currency,
            "amount": str(self.amount),
            "spent": str(self.spent),
            "remaining": str(self.remaining),
            "is_over_budget": self.is_over_budget,
            "spending": [t.to_dict() for t in self.spending],
        }


@dataclass(frozen=True)
class BudgetSpendingDTO:
    """One spending transaction together with the budget it was booked on."""

    budget_id: UUID
    budget_name: str
    transaction: TransactionDTO

    def to_dict(self) -> dict:
        return {
            "budget_id": str(self.budget_id),
            "budget_name": self.budget_name,
            **self.transaction.to_dict(),
        }


@dataclass(frozen=True)
class MonthlySpendingDTO:
    month: int
    year: int
    items: tuple[BudgetSpendingDTO, ...]
    totals: dict[str, Decimal]  # currency code -> amount spent

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "items": [item.to_dict() for item in self.items],
            "totals": {code: str(total) for code, total in self.totals.items()},
        }
