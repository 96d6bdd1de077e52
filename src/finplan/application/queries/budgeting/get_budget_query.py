"""Budget queries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.dtos import (
    BudgetSpendingDTO,
    BudgetSummaryDTO,
    MonthlySpendingDTO,
    TransactionDTO,
)
from finplan.application.ownership import load_owned
from finplan.domain.budgeting import BudgetAggregateRepository, BudgetNotFoundError
from finplan.domain.shared.query import FindManyOptions, Pagination, SortField

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class GetBudgetDetailQuery:
    """Load one budget with all of its spending."""

    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBudgetDetailQuery:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, budget_id: UUID) -> BudgetSummaryDTO:
        aggregate = await load_owned(
            self._budget_repo,
            budget_id,
            self._current_user,
            BudgetNotFoundError,
        )
        return BudgetSummaryDTO.from_aggregate(aggregate, include_spending=True)


@dataclass
class BudgetListResult:
    budgets: list[BudgetSummaryDTO]
    total_amount: Decimal
    total_spent: Decimal
    page: int
    limit: int


class ListBudgetsQuery:
    """List the current user's budgets, optionally restricted to one month."""

    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListBudgetsQuery:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
        page: int = 1,
        limit: int = 20,
    ) -> BudgetListResult:
        filters: dict = {"user_id": self._current_user.user_id}
        if month is not None:
            filters["month"] = month
        if year is not None:
            filters["year"] = year

        options = FindManyOptions(
            pagination=Pagination(page=page, limit=limit),
            sort=(
                SortField("year", "desc"),
                SortField("month", "desc"),
                SortField("name"),
            ),
        )
        aggregates = await self._budget_repo.find_many(filters, options)
        dtos = [BudgetSummaryDTO.from_aggregate(a) for a in aggregates]

        return BudgetListResult(
            budgets=dtos,
            total_amount=sum((d.amount for d in dtos), Decimal(0)),
            total_spent=sum((d.spent for d in dtos), Decimal(0)),
            page=page,
            limit=limit,
        )


class GetMonthlySpendingQuery:
    """All spending booked on the current user's budgets for one month.

    Items are ordered by budget name, then in the order they were recorded.
    Totals are kept per currency.
    """

    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetMonthlySpendingQuery:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, month: int, year: int) -> MonthlySpendingDTO:
        aggregates = await self._budget_repo.find_by_period(
            self._current_user.user_id,
            month,
            year,
        )

        items = []
        totals: dict[str, Decimal] = {}
        for aggregate in aggregates:
            for transaction in aggregate.spending:
                items.append(
                    BudgetSpendingDTO(
                        budget_id=aggregate.id,
                        budget_name=aggregate.budget.name,
                        transaction=TransactionDTO.from_entity(transaction),
                    ),
                )
                code = transaction.amount.currency.code
                totals[code] = totals.get(code, Decimal(0)) + transaction.amount.amount

        return MonthlySpendingDTO(
            month=month,
            year=year,
            items=tuple(items),
            totals=dict(sorted(totals.items())),
        )
