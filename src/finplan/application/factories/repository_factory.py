"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from finplan.domain.budgeting import BudgetAggregateRepository
from finplan.domain.debt import DebtAggregateRepository
from finplan.domain.goals import GoalAggregateRepository
from finplan.domain.income import IncomeAggregateRepository

if TYPE_CHECKING:
    from finplan.application.ports.identity import CurrentUser


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one session."""

    @property
    def current_user(self) -> CurrentUser:
        """Caller the commands and queries act for."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        """
        ...

    def budget_repository(self) -> BudgetAggregateRepository:
        ...

    def debt_repository(self) -> DebtAggregateRepository:
        ...

    def goal_repository(self) -> GoalAggregateRepository:
        ...

    def income_repository(self) -> IncomeAggregateRepository:
        ...
