"""SQLAlchemy aggregate repositories."""

from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    AggregateMapping,
    SQLAlchemyAggregateRepository,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (  # NOQA: E501
    BudgetAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.debt_repository import (  # NOQA: E501
    DebtAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.goal_repository import (  # NOQA: E501
    GoalAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.income_repository import (  # NOQA: E501
    IncomeAggregateRepositorySQLAlchemy,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.mappings import (
    BUDGET_MAPPING,
    DEBT_MAPPING,
    GOAL_MAPPING,
    INCOME_MAPPING,
)

__all__ = [
    "BUDGET_MAPPING",
    "DEBT_MAPPING",
    "GOAL_MAPPING",
    "INCOME_MAPPING",
    "AggregateMapping",
    "BudgetAggregateRepositorySQLAlchemy",
    "DebtAggregateRepositorySQLAlchemy",
    "GoalAggregateRepositorySQLAlchemy",
    "IncomeAggregateRepositorySQLAlchemy",
    "SQLAlchemyAggregateRepository",
    "SQLAlchemyRepositoryFactory",
]
