"""Debt domain layer exports."""

from finplan.domain.debt.aggregates import DebtAggregate
from finplan.domain.debt.entities import Debt, DebtPayment, DebtProps, DebtType
from finplan.domain.debt.exceptions import (
    DebtNotFoundError,
    DebtPaymentNotFoundError,
    InvalidDebtRateError,
)
from finplan.domain.debt.repositories import DebtAggregateRepository
from finplan.domain.debt.services import calculate_monthly_payment

__all__ = [
    # Entities
    "Debt",
    "DebtPayment",
    "DebtProps",
    "DebtType",
    # Aggregates
    "DebtAggregate",
    # Repository Interfaces
    "DebtAggregateRepository",
    # Domain Services
    "calculate_monthly_payment",
    # Exceptions
    "DebtNotFoundError",
    "DebtPaymentNotFoundError",
    "InvalidDebtRateError",
]
