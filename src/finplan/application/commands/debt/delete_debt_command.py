"""Delete a debt together with its payments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.debt import DebtAggregateRepository, DebtNotFoundError

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class DeleteDebtCommand:
    """Soft-delete a debt, or remove it for good with ``permanent=True``."""

    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteDebtCommand:
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, debt_id: UUID, permanent: bool = False) -> None:
        aggregate = await load_owned(
            self._debt_repo,
            debt_id,
            self._current_user,
            DebtNotFoundError,
        )
        if permanent:
            await self._debt_repo.delete(aggregate)
        else:
            await self._debt_repo.soft_delete(aggregate)
        logger.info("Debt %s deleted (permanent=%s)", debt_id, permanent)
