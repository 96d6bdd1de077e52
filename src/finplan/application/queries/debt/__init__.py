"""Debt queries."""

from finplan.application.queries.debt.debt_queries import (
    GetDebtQuery,
    GetMonthlyPaymentQuery,
    ListDebtsQuery,
)

__all__ = ["GetDebtQuery", "GetMonthlyPaymentQuery", "ListDebtsQuery"]
