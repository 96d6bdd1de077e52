"""Budget aggregate repository interface."""

from abc import abstractmethod
from uuid import UUID

from finplan.domain.budgeting.aggregates.budget_aggregate import BudgetAggregate
from finplan.domain.shared.repository import AggregateRepository


class BudgetAggregateRepository(AggregateRepository[BudgetAggregate]):
    """Persistence contract for budgets and their spending."""

    @abstractmethod
    async def find_by_period(
        self,
        user_id: UUID,
        month: int,
        year: int,
    ) -> list[BudgetAggregate]:
        """Find a user's budgets for one calendar month."""
