"""Goal queries."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.dtos import GoalSummaryDTO
from finplan.application.ownership import load_owned
from finplan.domain.goals import GoalAggregateRepository, GoalNotFoundError
from finplan.domain.shared.query import FindManyOptions, Pagination, SortField
from finplan.domain.shared.time import today_utc

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class GetGoalQuery:
    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetGoalQuery:
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        goal_id: UUID,
        today: Optional[date] = None,
    ) -> GoalSummaryDTO:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )
        return GoalSummaryDTO.from_aggregate(
            aggregate,
            today=today or today_utc(),
            include_transactions=True,
        )


class ListGoalsQuery:
    """List goals newest first, optionally hiding completed ones."""

    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListGoalsQuery:
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        include_completed: bool = True,
        page: int = 1,
        limit: int = 20,
        today: Optional[date] = None,
    ) -> list[GoalSummaryDTO]:
        today = today or today_utc()
        options = FindManyOptions(
            pagination=Pagination(page=page, limit=limit),
            sort=(SortField("created_at", "desc"),),
        )
        aggregates = await self._goal_repo.find_many(
            {"user_id": self._current_user.user_id},
            options,
        )
        return [
            GoalSummaryDTO.from_aggregate(a, today=today)
            for a in aggregates
            if include_completed or not a.goal.is_completed()
        ]
