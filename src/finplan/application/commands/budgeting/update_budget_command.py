"""Update budget details."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.budgeting import (
    BudgetAggregate,
    BudgetAggregateRepository,
    BudgetAlreadyExistsError,
    BudgetCategory,
    BudgetNotFoundError,
)
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class UpdateBudgetCommand:
    def __init__(
        self,
        budget_repository: BudgetAggregateRepository,
        current_user: CurrentUser,
    ):
        self._budget_repo = budget_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateBudgetCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        budget_id: UUID,
        name: Optional[str] = None,
        amount: Optional[Money] = None,
        category: Optional[BudgetCategory] = None,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> BudgetAggregate:
        aggregate = await load_owned(
            self._budget_repo,
            budget_id,
            self._current_user,
            BudgetNotFoundError,
        )

        budget = aggregate.budget
        if name is not None and name != budget.name:
            clash = await self._budget_repo.find_one(
                user_id=self._current_user.user_id,
                name=name,
                month=budget.month,
                year=budget.year,
            )
            if clash is not None:
                raise BudgetAlreadyExistsError(name, budget.month, budget.year)

        aggregate.update_budget(
            name=name,
            amount=amount,
            category=category,
            color=color,
            icon=icon,
        )
        await self._budget_repo.save(aggregate)
        return aggregate
