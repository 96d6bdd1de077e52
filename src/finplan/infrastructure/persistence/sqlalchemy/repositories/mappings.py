"""Storage layouts of the budget, debt, goal and income aggregate families."""

from finplan.domain.budgeting import BudgetAggregate
from finplan.domain.debt import DebtAggregate, DebtPayment
from finplan.domain.goals import GoalAggregate
from finplan.domain.income import IncomeAggregate
from finplan.domain.transactions import Transaction
from finplan.infrastructure.persistence.sqlalchemy.mappers import (
    BudgetRowMapper,
    DebtRowMapper,
    GoalRowMapper,
    IncomeRowMapper,
    TransactionRowMapper,
)
from finplan.infrastructure.persistence.sqlalchemy.models import (
    BudgetModel,
    BudgetTransactionModel,
    DebtModel,
    DebtTransactionModel,
    GoalModel,
    GoalTransactionModel,
    IncomeModel,
    IncomeTransactionModel,
    TransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    AggregateMapping,
)

BUDGET_MAPPING: AggregateMapping[BudgetAggregate] = AggregateMapping(
    name="Budget",
    root_table=BudgetModel.__table__,
    child_table=TransactionModel.__table__,
    link_table=BudgetTransactionModel.__table__,
    link_root_column="budget_id",
    root_mapper=BudgetRowMapper(),
    child_mapper=TransactionRowMapper(Transaction),
    assemble=BudgetAggregate.reconstitute,
)

DEBT_MAPPING: AggregateMapping[DebtAggregate] = AggregateMapping(
    name="Debt",
    root_table=DebtModel.__table__,
    child_table=TransactionModel.__table__,
    link_table=DebtTransactionModel.__table__,
    link_root_column="debt_id",
    root_mapper=DebtRowMapper(),
    child_mapper=TransactionRowMapper(DebtPayment),
    assemble=DebtAggregate.reconstitute,
)

GOAL_MAPPING: AggregateMapping[GoalAggregate] = AggregateMapping(
    name="Goal",
    root_table=GoalModel.__table__,
    child_table=TransactionModel.__table__,
    link_table=GoalTransactionModel.__table__,
    link_root_column="goal_id",
    root_mapper=GoalRowMapper(),
    child_mapper=TransactionRowMapper(Transaction),
    assemble=GoalAggregate.reconstitute,
)

INCOME_MAPPING: AggregateMapping[IncomeAggregate] = AggregateMapping(
    name="Income",
    root_table=IncomeModel.__table__,
    child_table=TransactionModel.__table__,
    link_table=IncomeTransactionModel.__table__,
    link_root_column="income_id",
    root_mapper=IncomeRowMapper(),
    child_mapper=TransactionRowMapper(Transaction),
    assemble=IncomeAggregate.reconstitute,
)
