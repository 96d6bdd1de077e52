"""Update the descriptive terms of a debt."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.debt import (
    DebtAggregate,
    DebtAggregateRepository,
    DebtNotFoundError,
    DebtType,
)

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class UpdateDebtCommand:
    """Change lender, purpose, rate, due date or type.

    The principal cannot be changed after creation.
    """

    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateDebtCommand:
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        debt_id: UUID,
        lender: Optional[str] = None,
        purpose: Optional[str] = None,
        rate: Optional[Decimal] = None,
        due_date: Optional[date] = None,
        debt_type: Optional[DebtType] = None,
    ) -> DebtAggregate:
        aggregate = await load_owned(
            self._debt_repo,
            debt_id,
            self._current_user,
            DebtNotFoundError,
        )
        aggregate.update_details(
            lender=lender,
            purpose=purpose,
            rate=rate,
            due_date=due_date,
            debt_type=debt_type,
        )
        await self._debt_repo.save(aggregate)
        return aggregate
