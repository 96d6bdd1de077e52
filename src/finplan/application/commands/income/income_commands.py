"""Record, correct and remove income entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.income import (
    IncomeAggregate,
    IncomeAggregateRepository,
    IncomeNotFoundError,
)
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class _IncomeCommand:
    def __init__(
        self,
        income_repository: IncomeAggregateRepository,
        current_user: CurrentUser,
    ):
        self._income_repo = income_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory):
        return cls(
            income_repository=factory.income_repository(),
            current_user=factory.current_user,
        )

    async def _load(self, income_id: UUID) -> IncomeAggregate:
        return await load_owned(
            self._income_repo,
            income_id,
            self._current_user,
            IncomeNotFoundError,
        )


class AddIncomeCommand(_IncomeCommand):
    """Add an income entry to a month, opening the month on first use.

    The month defaults to the current one. A new month takes the currency of
    its first entry.
    """

    async def execute(  # NOQA: PLR0913
        self,
        amount: Money,
        name: str,
        recurring: int = 0,
        description: Optional[str] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Transaction:
        today = today_utc()
        month = today.month if month is None else month
        year = today.year if year is None else year
        user_id = self._current_user.user_id

        aggregate = await self._income_repo.find_by_month(user_id, month, year)
        if aggregate is None:
            aggregate = IncomeAggregate.for_month(
                user_id,
                month,
                year,
                amount.currency,
            )

        transaction = aggregate.add_income(
            amount,
            name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()

        await self._income_repo.save(aggregate)
        logger.info(
            "Income %s added for %02d/%d (total %s)",
            amount,
            month,
            year,
            aggregate.total,
        )
        return transaction


class UpdateIncomeCommand(_IncomeCommand):
    async def execute(  # NOQA: PLR0913
        self,
        income_id: UUID,
        transaction_id: UUID,
        amount: Optional[Money] = None,
        name: Optional[str] = None,
        recurring: Optional[int] = None,
        description: Optional[str] = None,
    ) -> Transaction:
        aggregate = await self._load(income_id)
        transaction = aggregate.update_income(
            transaction_id,
            amount=amount,
            name=name,
            description=description,
            recurring=recurring,
        )
        aggregate.validate()
        await self._income_repo.save(aggregate)
        return transaction


class RemoveIncomeCommand(_IncomeCommand):
    async def execute(self, income_id: UUID, transaction_id: UUID) -> None:
        aggregate = await self._load(income_id)
        aggregate.remove_income(transaction_id)
        await self._income_repo.save(aggregate)
        logger.info("Income entry %s removed from %s", transaction_id, income_id)
