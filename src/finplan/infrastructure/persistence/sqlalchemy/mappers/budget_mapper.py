"""Row mapping for budget roots."""

from typing import Any

from finplan.domain.budgeting import Budget, BudgetCategory, BudgetProps
from finplan.domain.shared.time import ensure_tz_aware
from finplan.domain.shared.value_objects import Money
from finplan.infrastructure.persistence.sqlalchemy.mappers.base import (
    Row,
    timestamp_columns,
)


class BudgetRowMapper:
    def to_row(self, entity: Budget) -> dict[str, Any]:
        return {
            **timestamp_columns(entity),
            "name": entity.name,
            "amount": entity.amount.amount,
            "currency": entity.amount.currency.code,
            "category": entity.category.value,
            "color": entity.color,
            "icon": entity.icon,
            "month": entity.month,
            "year": entity.year,
        }

    def from_row(self, row: Row) -> Budget:
        props = BudgetProps(
            user_id=row["user_id"],
            name=row["name"],
            amount=Money(row["amount"], row["currency"]),
            category=BudgetCategory(row["category"]),
            color=row["color"],
            icon=row["icon"],
            month=row["month"],
            year=row["year"],
        )
        return Budget(
            props,
            entity_id=row["id"],
            created_at=ensure_tz_aware(row["created_at"]),
            updated_at=ensure_tz_aware(row["updated_at"]),
        )
