"""Change-tracking collection for aggregate children.

Aggregates keep their owned child entities in a ``ChangeTrackingCollection``.
The collection behaves like an ordered list of live items while remembering
which ids were added, updated or removed since it was built, so the
repository can persist only the delta.

Per-id state machine::

    unmarked -> added            (add)
    unmarked/added -> updated    (update)
    any -> removed               (remove; terminal)

Removed entities stay in the backing list so ``removed_items`` can still
report them. ``pending_changes`` resolves ids that sit in several sets:

- added then removed: neither inserted nor deleted
- added then updated: inserted once with the latest state
- updated then removed: deleted only

When a write is undone by a rollback, ``restore_changes`` puts its change
set back.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from finplan.domain.shared.entity import Entity

T = TypeVar("T", bound=Entity)


@dataclass(frozen=True)
class ChangeSet(Generic[T]):
    """Net writes required to persist a collection."""

    inserts: tuple[T, ...] = ()
    updates: tuple[T, ...] = ()
    deletes: tuple[T, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.inserts or self.updates or self.deletes)


class ChangeTrackingCollection(Generic[T]):
    """Ordered entity collection that records adds, updates and removals."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = []
        self._added: set[UUID] = set()
        self._updated: set[UUID] = set()
        self._removed: set[UUID] = set()
        for item in items:
            if self._index_of(item.id) is not None:
                msg = f"Duplicate item id in collection: {item.id}"
                raise ValueError(msg)
            self._items.append(item)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def items(self) -> list[T]:
        return [item for item in self._items if item.id not in self._removed]

    @property
    def added_items(self) -> list[T]:
        return [item for item in self._items if item.id in self._added]

    @property
    def updated_items(self) -> list[T]:
        return [item for item in self._items if item.id in self._updated]

    @property
    def removed_items(self) -> list[T]:
        return [item for item in self._items if item.id in self._removed]

    @property
    def has_changes(self) -> bool:
        return bool(self._added or self._updated or self._removed)

    def find(self, item_id: UUID) -> T | None:
        """Return the live item with ``item_id`` or None."""
        if item_id in self._removed:
            return None
        index = self._index_of(item_id)
        return None if index is None else self._items[index]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, item: T) -> None:
        if self._index_of(item.id) is not None:
            msg = f"Item {item.id} is already tracked by this collection"
            raise ValueError(msg)
        self._items.append(item)
        self._added.add(item.id)

    def update(self, item: T) -> bool:
        """Replace the live entry with the same id.

        Returns False, without recording anything, when the id is unknown
        or already removed.
        """
        if item.id in self._removed:
            return False
        index = self._index_of(item.id)
        if index is None:
            return False
        self._items[index] = item
        self._updated.add(item.id)
        return True

    def remove(self, item: T) -> bool:
        """Mark ``item`` removed. Returns False when it is not a live item."""
        if item.id in self._removed or self._index_of(item.id) is None:
            return False
        self._removed.add(item.id)
        return True

    # -------------------------------------------------------------------------
    # Persistence bookkeeping
    # -------------------------------------------------------------------------

    def pending_changes(self) -> ChangeSet[T]:
        inserts = tuple(
            item
            for item in self._items
            if item.id in self._added and item.id not in self._removed
        )
        updates = tuple(
            item
            for item in self._items
            if item.id in self._updated
            and item.id not in self._added
            and item.id not in self._removed
        )
        deletes = tuple(
            item
            for item in self._items
            if item.id in self._removed and item.id not in self._added
        )
        return ChangeSet(inserts=inserts, updates=updates, deletes=deletes)

    def mark_persisted(self) -> None:
        """Forget recorded changes once they have been written."""
        self._items = [item for item in self._items if item.id not in self._removed]
        self._added.clear()
        self._updated.clear()
        self._removed.clear()

    def restore_changes(self, changes: ChangeSet[T]) -> None:
        """Record ``changes`` again after the write that stored them was undone.

        Merges with whatever happened to the collection since, so a later
        ``pending_changes`` covers both. Restore several change sets newest
        first.
        """
        for item in changes.inserts:
            if self._index_of(item.id) is not None:
                self._added.add(item.id)
                self._updated.discard(item.id)
        for item in changes.updates:
            if self.find(item.id) is not None and item.id not in self._added:
                self._updated.add(item.id)
        for item in changes.deletes:
            if self._index_of(item.id) is None:
                self._items.append(item)
                self._removed.add(item.id)
            elif item.id in self._added and item.id not in self._removed:
                # Same id added again while the old row is back in storage
                self._added.discard(item.id)
                self._updated.add(item.id)

    # -------------------------------------------------------------------------
    # Container protocol (live items only)
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Entity):
            return False
        return self.find(item.id) is not None

    def __repr__(self) -> str:
        return (
            f"ChangeTrackingCollection(items={len(self)}, "
            f"added={len(self._added)}, updated={len(self._updated)}, "
            f"removed={len(self._removed)})"
        )

    def _index_of(self, item_id: UUID) -> int | None:
        for index, existing in enumerate(self._items):
            if existing.id == item_id:
                return index
        return None
