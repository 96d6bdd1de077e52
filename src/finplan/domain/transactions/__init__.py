"""Transactions shared by budget, debt and goal aggregates."""

from finplan.domain.transactions.transaction import (
    Transaction,
    TransactionProps,
    TransactionType,
)

__all__ = ["Transaction", "TransactionProps", "TransactionType"]
