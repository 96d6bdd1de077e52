"""Move money in and out of a savings goal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.goals import GoalAggregateRepository, GoalNotFoundError
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class _GoalCommand:
    def __init__(
        self,
        goal_repository: GoalAggregateRepository,
        current_user: CurrentUser,
    ):
        self._goal_repo = goal_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory):
        return cls(
            goal_repository=factory.goal_repository(),
            current_user=factory.current_user,
        )


class ContributeGoalCommand(_GoalCommand):
    async def execute(  # NOQA: PLR0913
        self,
        goal_id: UUID,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )

        transaction = aggregate.contribute(
            amount,
            name=name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()

        await self._goal_repo.save(aggregate)
        logger.info(
            "Contributed %s to goal %s (total %s)",
            amount,
            goal_id,
            aggregate.total_contributed,
        )
        return transaction


class WithdrawGoalCommand(_GoalCommand):
    """Withdraw from a goal; fails when the amount exceeds the saved balance."""

    async def execute(  # NOQA: PLR0913
        self,
        goal_id: UUID,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )

        transaction = aggregate.withdraw(
            amount,
            name=name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()

        await self._goal_repo.save(aggregate)
        logger.info(
            "Withdrew %s from goal %s (total %s)",
            amount,
            goal_id,
            aggregate.total_contributed,
        )
        return transaction


class RemoveGoalTransactionCommand(_GoalCommand):
    async def execute(self, goal_id: UUID, transaction_id: UUID) -> None:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )
        aggregate.remove_transaction(transaction_id)
        aggregate.validate()
        await self._goal_repo.save(aggregate)


class UpdateGoalTransactionCommand(_GoalCommand):
    async def execute(  # NOQA: PLR0913
        self,
        goal_id: UUID,
        transaction_id: UUID,
        amount: Optional[Money] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: Optional[int] = None,
    ) -> Transaction:
        aggregate = await load_owned(
            self._goal_repo,
            goal_id,
            self._current_user,
            GoalNotFoundError,
        )

        transaction = aggregate.update_transaction(
            transaction_id,
            amount=amount,
            name=name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()

        await self._goal_repo.save(aggregate)
        logger.info(
            "Updated transaction %s of goal %s (total %s)",
            transaction_id,
            goal_id,
            aggregate.total_contributed,
        )
        return transaction
