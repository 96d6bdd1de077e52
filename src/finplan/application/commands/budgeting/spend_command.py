"""Record spending against a budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.budgeting import BudgetAggregateRepository, BudgetNotFoundError
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class SpendCommand:
    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SpendCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        budget_id: UUID,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        aggregate = await load_owned(
            self._budget_repo,
            budget_id,
            self._current_user,
            BudgetNotFoundError,
        )

        transaction = aggregate.spend(
            amount,
            name=name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()

        await self._budget_repo.save(aggregate)
        logger.info(
            "Spent %s from budget %s (remaining %s)",
            amount,
            budget_id,
            aggregate.remaining_budget,
        )
        return transaction


class RemoveSpendingCommand:
    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RemoveSpendingCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, budget_id: UUID, transaction_id: UUID) -> None:
        aggregate = await load_owned(
            self._budget_repo,
            budget_id,
            self._current_user,
            BudgetNotFoundError,
        )
        aggregate.remove_spending(transaction_id)
        aggregate.validate()
        await self._budget_repo.save(aggregate)
