"""Repository contract shared by all aggregate families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar
from uuid import UUID

from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.query import FindManyOptions

A = TypeVar("A", bound=Aggregate)


class AggregateRepository(ABC, Generic[A]):
    """
    Persistence contract for one aggregate family.

    Reads never return soft-deleted roots or children. ``save`` persists the
    root and the pending changes of the child collection as one atomic unit.
    Storage errors propagate unmodified.
    """

    @abstractmethod
    async def find_by_id(self, aggregate_id: UUID) -> A | None:
        """Load the aggregate with its live children, or None."""

    @abstractmethod
    async def find_one(self, **filters: Any) -> A | None:
        """Return the first aggregate whose root matches all ``filters``."""

    @abstractmethod
    async def find_many(
        self,
        filters: dict[str, Any] | None = None,
        options: FindManyOptions | None = None,
    ) -> list[A]:
        """Return matching aggregates, sorted and paginated per ``options``."""

    @abstractmethod
    async def save(self, aggregate: A) -> None:
        """Upsert the root and write the child delta atomically."""

    @abstractmethod
    async def delete(self, aggregate: A) -> None:
        """Remove root, link rows and child rows atomically."""

    @abstractmethod
    async def soft_delete(self, aggregate: A) -> None:
        """Mark root and children deleted so reads skip them."""
