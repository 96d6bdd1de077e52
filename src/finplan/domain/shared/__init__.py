"""Shared domain components.

This module exports shared value objects, exceptions, and base classes
used across the budgeting, debt and goal contexts.
"""

from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.change_tracking import ChangeSet, ChangeTrackingCollection
from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    CurrencyMismatchError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InsufficientBalanceError,
    InvalidAmountError,
    RequiredFieldError,
    ValidationError,
)
from finplan.domain.shared.query import FindManyOptions, Pagination, SortField
from finplan.domain.shared.repository import AggregateRepository
from finplan.domain.shared.time import ensure_tz_aware, today_utc, utc_now
from finplan.domain.shared.value_objects import Currency, Money

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    # Shared errors
    "CurrencyMismatchError",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "RequiredFieldError",
    # Building blocks
    "Aggregate",
    "AggregateRepository",
    "ChangeSet",
    "ChangeTrackingCollection",
    "Entity",
    "EntityProps",
    # Value objects
    "Currency",
    "Money",
    # Query options
    "FindManyOptions",
    "Pagination",
    "SortField",
    # Utilities
    "ensure_tz_aware",
    "today_utc",
    "utc_now",
]
