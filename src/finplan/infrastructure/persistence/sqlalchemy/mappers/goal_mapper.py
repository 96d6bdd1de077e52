"""Row mapping for goal roots."""

from typing import Any

from finplan.domain.goals import Goal, GoalProps
from finplan.domain.shared.time import ensure_tz_aware
from finplan.domain.shared.value_objects import Money
from finplan.infrastructure.persistence.sqlalchemy.mappers.base import (
    Row,
    timestamp_columns,
)


class GoalRowMapper:
    def to_row(self, entity: Goal) -> dict[str, Any]:
        target = entity.target_amount
        current = entity.current_amount
        return {
            **timestamp_columns(entity),
            "title": entity.title,
            "description": entity.description,
            "target_amount": target.amount if target is not None else None,
            "current_amount": current.amount if current is not None else None,
            "currency": entity.currency.code,
            "due_date": entity.due_date,
        }

    def from_row(self, row: Row) -> Goal:
        currency = row["currency"]
        target = row["target_amount"]
        current = row["current_amount"]
        props = GoalProps(
            user_id=row["user_id"],
            title=row["title"],
            description=row["description"] or "",
            target_amount=Money(target, currency) if target is not None else None,
            current_amount=Money(current, currency) if current is not None else None,
            due_date=row["due_date"],
        )
        return Goal(
            props,
            entity_id=row["id"],
            created_at=ensure_tz_aware(row["created_at"]),
            updated_at=ensure_tz_aware(row["updated_at"]),
        )
