"""Row mapper protocol used by the generic aggregate repository."""

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from finplan.domain.shared.entity import Entity

E = TypeVar("E", bound=Entity)

Row = Mapping[str, Any]


class RowMapper(Protocol[E]):
    """Translate between a domain entity and a flat table row."""

    def to_row(self, entity: E) -> dict[str, Any]:
        """Column values for ``entity``, including its id and timestamps."""
        ...

    def from_row(self, row: Row) -> E:
        """Rebuild an entity from a row; extra keys are ignored."""
        ...


def timestamp_columns(entity: Entity) -> dict[str, Any]:
    return {
        "id": entity.id,
        "user_id": entity.user_id,
        "created_at": entity.created_at,
        "updated_at": entity.updated_at,
    }
