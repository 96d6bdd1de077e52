"""Delete a goal together with its transactions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.goals import GoalAggregateRepository, GoalNotFoundError

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class DeleteGoalCommand:
    """Soft-delete a goal, or remove it for good with ``permanent=True``."""

    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteGoalCommand:
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, goal_id: UUID, permanent: bool = False) -> None:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )
        if permanent:
            await self._goal_repo.delete(aggregate)
        else:
            await self._goal_repo.soft_delete(aggregate)
        logger.info("Goal %s deleted (permanent=%s)", goal_id, permanent)
