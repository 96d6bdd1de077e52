"""Aggregate base: one root entity plus a tracked collection of children."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from finplan.domain.shared.change_tracking import ChangeTrackingCollection
from finplan.domain.shared.entity import Entity

RootT = TypeVar("RootT", bound=Entity)
ChildT = TypeVar("ChildT", bound=Entity)


class Aggregate(Generic[RootT, ChildT]):
    """Consistency unit of a root entity and its owned children.

    Identity, ownership and timestamps are those of the root. Computed
    totals are folded from ``children.items`` on every access, so they
    reflect in-memory changes that are not saved yet.

    Use ``create`` for aggregates built by a business operation (children
    are recorded as added) and ``reconstitute`` when loading from storage.
    """

    def __init__(self, root: RootT, children: ChangeTrackingCollection[ChildT]):
        self._root = root
        self._children = children

    @classmethod
    def create(cls, root: RootT, children: Iterable[ChildT] = ()):
        aggregate = cls(root, ChangeTrackingCollection())
        for child in children:
            aggregate.children.add(child)
        return aggregate

    @classmethod
    def reconstitute(cls, root: RootT, children: Iterable[ChildT] = ()):
        return cls(root, ChangeTrackingCollection(children))

    @property
    def root(self) -> RootT:
        return self._root

    @property
    def children(self) -> ChangeTrackingCollection[ChildT]:
        return self._children

    @property
    def id(self) -> UUID:
        return self._root.id

    @property
    def user_id(self) -> UUID:
        return self._root.user_id

    @property
    def created_at(self) -> datetime:
        return self._root.created_at

    @property
    def updated_at(self) -> datetime:
        return self._root.updated_at

    def validate(self) -> None:
        """Validate the root and every live child."""
        self._root.validate()
        for child in self._children.items:
            child.validate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aggregate):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, children={len(self._children)})"
