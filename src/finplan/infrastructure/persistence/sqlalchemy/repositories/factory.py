"""SQLAlchemy repository factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from finplan.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (  # NOQA: E501
    BudgetAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.debt_repository import (  # NOQA: E501
    DebtAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.goal_repository import (  # NOQA: E501
    GoalAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.income_repository import (  # NOQA: E501
    IncomeAggregateRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from finplan.application.ports.identity import CurrentUser


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share the session handed in; ``autocommit`` is passed
    through to each of them.
    """

    def __init__(
        self,
        session: AsyncSession,
        current_user: CurrentUser,
        autocommit: bool = True,
    ):
        self._session = session
        self._current_user = current_user
        self._autocommit = autocommit

        # Cached instances (created on demand)
        self._budget_repo: Optional[BudgetAggregateRepositorySQLAlchemy] = None
        self._debt_repo: Optional[DebtAggregateRepositorySQLAlchemy] = None
        self._goal_repo: Optional[GoalAggregateRepositorySQLAlchemy] = None
        self._income_repo: Optional[IncomeAggregateRepositorySQLAlchemy] = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def budget_repository(self) -> BudgetAggregateRepositorySQLAlchemy:
        if self._budget_repo is None:
            self._budget_repo = BudgetAggregateRepositorySQLAlchemy(
                self._session,
                autocommit=self._autocommit,
            )
        return self._budget_repo

    def debt_repository(self) -> DebtAggregateRepositorySQLAlchemy:
        if self._debt_repo is None:
            self._debt_repo = DebtAggregateRepositorySQLAlchemy(
                self._session,
                autocommit=self._autocommit,
            )
        return self._debt_repo

    def goal_repository(self) -> GoalAggregateRepositorySQLAlchemy:
        if self._goal_repo is None:
            self._goal_repo = GoalAggregateRepositorySQLAlchemy(
                self._session,
                autocommit=self._autocommit,
            )
        return self._goal_repo

    def income_repository(self) -> IncomeAggregateRepositorySQLAlchemy:
        if self._income_repo is None:
            self._income_repo = IncomeAggregateRepositorySQLAlchemy(
                self._session,
                autocommit=self._autocommit,
            )
        return self._income_repo
