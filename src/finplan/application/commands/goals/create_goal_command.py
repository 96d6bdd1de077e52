"""Create a savings goal."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from finplan.domain.goals import (
    Goal,
    GoalAggregate,
    GoalAggregateRepository,
    GoalInvalidDueDateError,
    GoalInvalidTargetAmountError,
    GoalTitleAlreadyExistsError,
)
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateGoalCommand:
    """Create a goal with a unique title and a due date in the future."""

    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateGoalCommand:
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        title: str,
        description: str = "",
        target_amount: Optional[Money] = None,
        due_date: Optional[date] = None,
    ) -> GoalAggregate:
        if target_amount is not None and not target_amount.is_positive():
            raise GoalInvalidTargetAmountError(target_amount.amount)
        if due_date is not None and due_date <= today_utc():
            raise GoalInvalidDueDateError(due_date)

        existing = await self._goal_repo.find_by_title(
            self._current_user.user_id,
            title,
        )
        if existing is not None:
            raise GoalTitleAlreadyExistsError(title)

        goal = Goal.new(
            user_id=self._current_user.user_id,
            title=title,
            description=description,
            target_amount=target_amount,
            current_amount=Money.zero(
                target_amount.currency if target_amount is not None else None,
            ),
            due_date=due_date,
        )
        aggregate = GoalAggregate.create(goal)
        aggregate.validate()

        await self._goal_repo.save(aggregate)
        logger.info("Goal created: %s", title)
        return aggregate
