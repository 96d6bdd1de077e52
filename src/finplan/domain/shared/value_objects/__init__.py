"""Shared value objects."""

from finplan.domain.shared.value_objects.currency import (
    DEFAULT_CURRENCY,
    SUPPORTED_CURRENCIES,
    Currency,
)
from finplan.domain.shared.value_objects.money import Money

__all__ = [
    "DEFAULT_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "Currency",
    "Money",
]
