"""Debt aggregate repository interface."""

from abc import abstractmethod
from uuid import UUID

from finplan.domain.debt.aggregates.debt_aggregate import DebtAggregate
from finplan.domain.shared.repository import AggregateRepository


class DebtAggregateRepository(AggregateRepository[DebtAggregate]):
    """Persistence contract for debts and their payments."""

    @abstractmethod
    async def find_by_user(self, user_id: UUID) -> list[DebtAggregate]:
        """Find all live debts of a user, nearest due date first."""
