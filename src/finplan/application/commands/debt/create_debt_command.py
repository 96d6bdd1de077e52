"""Start tracking a debt."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from finplan.domain.debt import DebtAggregate, DebtAggregateRepository, DebtType
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateDebtCommand:
    """Create a debt, optionally with an amount already repaid."""

    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateDebtCommand:
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        lender: str,
        amount: Money,
        due_date: date,
        purpose: str = "",
        rate: Decimal = Decimal(0),
        current_paid_amount: Optional[Money] = None,
        debt_type: DebtType = DebtType.BAD_DEBT,
    ) -> DebtAggregate:
        aggregate = DebtAggregate.new_debt(
            self._current_user.user_id,
            lender=lender,
            amount=amount,
            due_date=due_date,
            purpose=purpose,
            rate=rate,
            current_paid_amount=current_paid_amount,
            debt_type=debt_type,
        )
        aggregate.validate()

        await self._debt_repo.save(aggregate)
        logger.info("Debt created: %s to %s", amount, lender)
        return aggregate
