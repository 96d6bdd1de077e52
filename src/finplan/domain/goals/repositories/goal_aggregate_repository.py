"""Goal aggregate repository interface."""

from abc import abstractmethod
from uuid import UUID

from finplan.domain.goals.aggregates.goal_aggregate import GoalAggregate
from finplan.domain.shared.repository import AggregateRepository


class GoalAggregateRepository(AggregateRepository[GoalAggregate]):
    """Persistence contract for goals and their transactions."""

    @abstractmethod
    async def find_by_title(self, user_id: UUID, title: str) -> GoalAggregate | None:
        """Find a user's live goal by exact title."""
