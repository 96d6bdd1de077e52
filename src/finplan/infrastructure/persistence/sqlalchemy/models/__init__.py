"""SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
"""

from finplan.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)
from finplan.infrastructure.persistence.sqlalchemy.models.budget_model import (
    BudgetModel,
    BudgetTransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.models.debt_model import (
    DebtModel,
    DebtTransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.models.goal_model import (
    GoalModel,
    GoalTransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.models.income_model import (
    IncomeModel,
    IncomeTransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = [
    "Base",
    "BudgetModel",
    "BudgetTransactionModel",
    "DebtModel",
    "DebtTransactionModel",
    "GoalModel",
    "GoalTransactionModel",
    "IncomeModel",
    "IncomeTransactionModel",
    "SoftDeleteMixin",
    "TimestampMixin",
    "TransactionModel",
]
