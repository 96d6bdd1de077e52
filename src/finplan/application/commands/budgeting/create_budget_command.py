"""Create a monthly budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from finplan.domain.budgeting import (
    Budget,
    BudgetAggregate,
    BudgetAggregateRepository,
    BudgetAlreadyExistsError,
    BudgetCategory,
)
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateBudgetCommand:
    """Create a budget; names are unique per user and month."""

    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateBudgetCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        amount: Money,
        month: int,
        year: int,
        category: BudgetCategory = BudgetCategory.FLEXIBLE,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> BudgetAggregate:
        existing = await self._budget_repo.find_one(
            user_id=self._current_user.user_id,
            name=name,
            month=month,
            year=year,
        )
        if existing is not None:
            raise BudgetAlreadyExistsError(name, month, year)

        budget = Budget.new(
            user_id=self._current_user.user_id,
            name=name,
            amount=amount,
            month=month,
            year=year,
            category=category,
            color=color,
            icon=icon,
        )
        aggregate = BudgetAggregate.create(budget)
        aggregate.validate()

        await self._budget_repo.save(aggregate)
        logger.info("Budget created: %s (%02d/%d)", name, month, year)
        return aggregate
