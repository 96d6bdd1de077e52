"""Row mapping for transaction children."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from finplan.domain.shared.time import ensure_tz_aware
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction, TransactionProps, TransactionType
from finplan.infrastructure.persistence.sqlalchemy.mappers.base import (
    Row,
    timestamp_columns,
)

T = TypeVar("T", bound=Transaction)


class TransactionRowMapper(Generic[T]):
    """Maps the ``transactions`` table onto ``entity_cls``.

    Debt payments share the table with plain transactions, so the same
    mapper rebuilds either class.
    """

    def __init__(self, entity_cls: type[T]):
        self._entity_cls = entity_cls

    def to_row(self, entity: T) -> dict[str, Any]:
        return {
            **timestamp_columns(entity),
            "amount": entity.amount.amount,
            "currency": entity.amount.currency.code,
            "type": entity.type.value,
            "name": entity.name,
            "description": entity.description,
            "recurring": entity.recurring,
        }

    def from_row(self, row: Row) -> T:
        props = TransactionProps(
            user_id=row["user_id"],
            amount=Money(row["amount"], row["currency"]),
            type=TransactionType(row["type"]),
            name=row["name"],
            description=row["description"] or "",
            recurring=row["recurring"],
        )
        return self._entity_cls(
            props,
            entity_id=row["id"],
            created_at=ensure_tz_aware(row["created_at"]),
            updated_at=ensure_tz_aware(row["updated_at"]),
        )
