"""Income aggregate repository interface."""

from abc import abstractmethod
from uuid import UUID

from finplan.domain.income.aggregates.income_aggregate import IncomeAggregate
from finplan.domain.shared.repository import AggregateRepository


class IncomeAggregateRepository(AggregateRepository[IncomeAggregate]):
    """Persistence contract for monthly income and its entries."""

    @abstractmethod
    async def find_by_month(
        self,
        user_id: UUID,
        month: int,
        year: int,
    ) -> IncomeAggregate | None:
        """Find a user's income for one calendar month."""
