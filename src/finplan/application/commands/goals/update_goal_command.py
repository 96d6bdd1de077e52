"""Update goal details."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.goals import (
    GoalAggregate,
    GoalAggregateRepository,
    GoalInvalidDueDateError,
    GoalNotFoundError,
    GoalTitleAlreadyExistsError,
)
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class UpdateGoalCommand:
    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateGoalCommand:
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        goal_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: Optional[Money] = None,
        due_date: Optional[date] = None,
    ) -> GoalAggregate:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )

        if title is not None and title != aggregate.goal.title:
            clash = await self._goal_repo.find_by_title(
                self._current_user.user_id,
                title,
            )
            if clash is not None:
                raise GoalTitleAlreadyExistsError(title)
        if due_date is not None and due_date <= today_utc():
            raise GoalInvalidDueDateError(due_date)

        aggregate.update_goal_details(
            title=title,
            description=description,
            target_amount=target_amount,
            due_date=due_date,
        )
        await self._goal_repo.save(aggregate)
        return aggregate
