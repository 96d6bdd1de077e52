"""Data transfer objects returned by queries."""

from finplan.application.dtos.budget_dto import (
    BudgetSpendingDTO,
    BudgetSummaryDTO,
    MonthlySpendingDTO,
)
from finplan.application.dtos.debt_dto import DebtSummaryDTO, MonthlyPaymentDTO
from finplan.application.dtos.goal_dto import GoalSummaryDTO
from finplan.application.dtos.income_dto import IncomeSummaryDTO
from finplan.application.dtos.transaction_dto import TransactionDTO

__all__ = [
    "BudgetSpendingDTO",
    "BudgetSummaryDTO",
    "DebtSummaryDTO",
    "GoalSummaryDTO",
    "IncomeSummaryDTO",
    "MonthlyPaymentDTO",
    "MonthlySpendingDTO",
    "TransactionDTO",
]
