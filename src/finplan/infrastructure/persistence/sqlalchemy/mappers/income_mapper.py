"""Row mapping for income roots."""

from typing import Any

from finplan.domain.income import Income, IncomeProps
from finplan.domain.shared.time import ensure_tz_aware
from finplan.domain.shared.value_objects import Currency
from finplan.infrastructure.persistence.sqlalchemy.mappers.base import (
    Row,
    timestamp_columns,
)


class IncomeRowMapper:
    def to_row(self, entity: Income) -> dict[str, Any]:
        return {
            **timestamp_columns(entity),
            "month": entity.month,
            "year": entity.year,
            "currency": entity.currency.code,
        }

    def from_row(self, row: Row) -> Income:
        props = IncomeProps(
            user_id=row["user_id"],
            month=row["month"],
            year=row["year"],
            currency=Currency(row["currency"]),
        )
        return Income(
            props,
            entity_id=row["id"],
            created_at=ensure_tz_aware(row["created_at"]),
            updated_at=ensure_tz_aware(row["updated_at"]),
        )
