"""Delete a budget together with its spending."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.budgeting import BudgetAggregateRepository, BudgetNotFoundError

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class DeleteBudgetCommand:
    """Soft-delete a budget, or remove it for good with ``permanent=True``."""

    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteBudgetCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, budget_id: UUID, permanent: bool = False) -> None:
        aggregate = await load_owned(
            self._budget_repo,
            budget_id,
            self._current_user,
            BudgetNotFoundError,
        )
        if permanent:
            await self._budget_repo.delete(aggregate)
        else:
            await self._budget_repo.soft_delete(aggregate)
        logger.info("Budget %s deleted (permanent=%s)", budget_id, permanent)
