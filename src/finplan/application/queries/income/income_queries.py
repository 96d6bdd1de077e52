"""Income queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from finplan.application.dtos import IncomeSummaryDTO
from finplan.domain.income import IncomeAggregateRepository

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class GetIncomeByMonthQuery:
    """Income entries of the current user for one month, or None if there are none."""

    def __init__(
        self,
        income_repository: IncomeAggregateRepository,
        current_user: CurrentUser,
    ):
        self._income_repo = income_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetIncomeByMonthQuery:
        return cls(
            income_repository=factory.income_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, month: int, year: int) -> Optional[IncomeSummaryDTO]:
        aggregate = await self._income_repo.find_by_month(
            self._current_user.user_id,
            month,
            year,
        )
        if aggregate is None:
            return None
        return IncomeSummaryDTO.from_aggregate(aggregate)
