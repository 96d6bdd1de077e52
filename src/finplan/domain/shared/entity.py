"""Base class for identity-bearing domain entities.

An entity owns an immutable snapshot of its properties. Mutating methods
replace the snapshot through ``_apply`` and bump ``updated_at``; the snapshot
itself can never be modified in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict

from finplan.domain.shared.time import utc_now


class EntityProps(BaseModel):
    """Frozen property snapshot shared by all user-owned entities."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID


PropsT = TypeVar("PropsT", bound=EntityProps)


class Entity(ABC, Generic[PropsT]):
    """Identity, timestamps and a frozen property snapshot."""

    def __init__(
        self,
        props: PropsT,
        entity_id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = entity_id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self._props = props

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._props.user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def props(self) -> PropsT:
        return self._props

    def touch(self) -> None:
        self._updated_at = utc_now()

    def _apply(self, **changes: Any) -> None:
        """Replace the snapshot with ``changes`` merged in; skips None values."""
        update = {key: value for key, value in changes.items() if value is not None}
        if not update:
            return
        self._props = self._props.model_copy(update=update)
        self.touch()

    @abstractmethod
    def validate(self) -> None:
        """Raise a DomainException subclass when an invariant is violated."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
