"""Entity <-> row mappers injected into the generic aggregate repository."""

from finplan.infrastructure.persistence.sqlalchemy.mappers.base import Row, RowMapper
from finplan.infrastructure.persistence.sqlalchemy.mappers.budget_mapper import (
    BudgetRowMapper,
)
from finplan.infrastructure.persistence.sqlalchemy.mappers.debt_mapper import (
    DebtRowMapper,
)
from finplan.infrastructure.persistence.sqlalchemy.mappers.goal_mapper import (
    GoalRowMapper,
)
from finplan.infrastructure.persistence.sqlalchemy.mappers.income_mapper import (
    IncomeRowMapper,
)
from finplan.infrastructure.persistence.sqlalchemy.mappers.transaction_mapper import (
    TransactionRowMapper,
)

__all__ = [
    "BudgetRowMapper",
    "DebtRowMapper",
    "GoalRowMapper",
    "IncomeRowMapper",
    "Row",
    "RowMapper",
    "TransactionRowMapper",
]
