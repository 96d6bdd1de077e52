"""Row mapping for debt roots."""

from decimal import Decimal
from typing import Any

from finplan.domain.debt import Debt, DebtProps, DebtType
from finplan.domain.shared.time import ensure_tz_aware
from finplan.domain.shared.value_objects import Money
from finplan.infrastructure.persistence.sqlalchemy.mappers.base import (
    Row,
    timestamp_columns,
)


class DebtRowMapper:
    def to_row(self, entity: Debt) -> dict[str, Any]:
        return {
            **timestamp_columns(entity),
            "lender": entity.lender,
            "purpose": entity.purpose,
            "amount": entity.amount.amount,
            "currency": entity.amount.currency.code,
            "rate": entity.rate,
            "due_date": entity.due_date,
            "type": entity.type.value,
        }

    def from_row(self, row: Row) -> Debt:
        props = DebtProps(
            user_id=row["user_id"],
            lender=row["lender"],
            purpose=row["purpose"] or "",
            amount=Money(row["amount"], row["currency"]),
            rate=Decimal(row["rate"]),
            due_date=row["due_date"],
            type=DebtType(row["type"]),
        )
        return Debt(
            props,
            entity_id=row["id"],
            created_at=ensure_tz_aware(row["created_at"]),
            updated_at=ensure_tz_aware(row["updated_at"]),
        )
