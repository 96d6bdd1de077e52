"""Generic SQLAlchemy repository for root + children aggregates.

Every aggregate family is stored the same way: a root table, the shared
``transactions`` child table, and a link table carrying
``(<root>_id, transaction_id, user_id)``. The family-specific parts (which
tables, which row mappers, how to assemble the aggregate) are described by
an ``AggregateMapping`` handed to ``SQLAlchemyAggregateRepository``.

Writes are planned from the child collection's ``pending_changes()``:

1. upsert the root row (UPDATE, INSERT when no row matched)
2. per insert: child row, then link row
3. per update: child row only
4. per delete: link row, then child row

All statements of one ``save`` run in one transaction. On failure the
transaction is rolled back and the storage error re-raised unchanged; the
collection keeps its recorded changes so the caller may retry.

With ``autocommit=False`` a successful save clears the recorded changes
once its SAVEPOINT is released, but the written change sets are kept in
``session.info`` until the outermost transaction ends. If it ends without
committing they are restored on their collections, newest first.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Column, Select, Table, delete, event, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, SessionTransaction

from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.change_tracking import ChangeSet, ChangeTrackingCollection
from finplan.domain.shared.query import FindManyOptions
from finplan.domain.shared.repository import AggregateRepository
from finplan.domain.shared.time import utc_now
from finplan.domain.shared.value_objects import Money
from finplan.infrastructure.persistence.sqlalchemy.mappers import Row, RowMapper

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Aggregate)

OWNER_KEY = "owner_id"
UNCOMMITTED_KEY = "finplan.uncommitted_changes"


def _forget_uncommitted(session: Session) -> None:
    # after_commit also fires when a SAVEPOINT is released
    if not session.in_nested_transaction():
        session.info.pop(UNCOMMITTED_KEY, None)


def _restore_uncommitted(session: Session, transaction: SessionTransaction) -> None:
    if transaction.parent is not None:
        return
    written = session.info.pop(UNCOMMITTED_KEY, None)
    if not written:
        return
    logger.warning(
        "Transaction ended without commit; restoring %d unsaved change set(s)",
        len(written),
    )
    for children, changes in reversed(written):
        children.restore_changes(changes)


@dataclass(frozen=True)
class AggregateMapping(Generic[A]):
    """Storage layout of one aggregate family."""

    name: str
    root_table: Table
    child_table: Table
    link_table: Table
    link_root_column: str
    root_mapper: RowMapper[Any]
    child_mapper: RowMapper[Any]
    assemble: Callable[[Any, list[Any]], A]
    link_child_column: str = "transaction_id"


class SQLAlchemyAggregateRepository(AggregateRepository[A]):
    """Aggregate repository driven by an ``AggregateMapping``.

    Parameters
    ----------
    session
        Session the repository reads and writes through.
    mapping
        Tables, mappers and assembler of the aggregate family.
    autocommit
        When True (default) every write commits on success and rolls back
        on failure. When False writes run inside a SAVEPOINT and committing
        is left to the caller's unit of work.
    """

    def __init__(
        self,
        session: AsyncSession,
        mapping: AggregateMapping[A],
        autocommit: bool = True,
    ):
        self._session = session
        self._mapping = mapping
        self._autocommit = autocommit

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def find_by_id(self, aggregate_id: UUID) -> Optional[A]:
        stmt = self._base_root_query().where(self._root.c.id == aggregate_id)
        aggregates = await self._load(stmt)
        return aggregates[0] if aggregates else None

    async def find_one(self, **filters: Any) -> Optional[A]:
        stmt = self._apply_filters(self._base_root_query(), filters)
        stmt = self._apply_sort(stmt, FindManyOptions()).limit(1)
        aggregates = await self._load(stmt)
        return aggregates[0] if aggregates else None

    async def find_many(
        self,
        filters: Optional[dict[str, Any]] = None,
        options: Optional[FindManyOptions] = None,
    ) -> list[A]:
        options = options or FindManyOptions()
        stmt = self._apply_filters(self._base_root_query(), filters or {})
        stmt = self._apply_sort(stmt, options)
        if options.pagination is not None:
            stmt = stmt.offset(options.pagination.offset).limit(
                options.pagination.limit,
            )
        return await self._load(stmt)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def save(self, aggregate: A) -> None:
        changes = aggregate.children.pending_changes()
        logger.debug(
            "Saving %s %s: %d insert(s), %d update(s), %d delete(s)",
            self._mapping.name,
            aggregate.id,
            len(changes.inserts),
            len(changes.updates),
            len(changes.deletes),
        )

        async with self._write_scope():
            await self._upsert_root(aggregate)
            for child in changes.inserts:
                await self._insert_child(aggregate, child)
            for child in changes.updates:
                await self._update_child(child)
            for child in changes.deletes:
                await self._delete_child(aggregate, child)

        aggregate.children.mark_persisted()
        if not self._autocommit and not changes.is_empty:
            self._hold_until_commit(aggregate.children, changes)
        logger.info("%s saved: %s", self._mapping.name, aggregate.id)

    async def delete(self, aggregate: A) -> None:
        link = self._mapping.link_table
        owner_column = self._owner_column()
        child_column = link.c[self._mapping.link_child_column]

        async with self._write_scope():
            result = await self._session.execute(
                select(child_column).where(owner_column == aggregate.id),
            )
            child_ids = list(result.scalars().all())
            await self._session.execute(delete(link).where(owner_column == aggregate.id))
            if child_ids:
                await self._session.execute(
                    delete(self._child).where(self._child.c.id.in_(child_ids)),
                )
            await self._session.execute(
                delete(self._root).where(self._root.c.id == aggregate.id),
            )

        logger.info(
            "%s deleted: %s (%d child row(s))",
            self._mapping.name,
            aggregate.id,
            len(child_ids),
        )

    async def soft_delete(self, aggregate: A) -> None:
        now = utc_now()
        linked_children = select(
            self._mapping.link_table.c[self._mapping.link_child_column],
        ).where(self._owner_column() == aggregate.id)

        async with self._write_scope():
            await self._session.execute(
                update(self._root)
                .where(self._root.c.id == aggregate.id)
                .values(deleted_at=now, updated_at=now),
            )
            await self._session.execute(
                update(self._child)
                .where(self._child.c.id.in_(linked_children))
                .values(deleted_at=now, updated_at=now),
            )

        logger.info("%s soft-deleted: %s", self._mapping.name, aggregate.id)

    # -------------------------------------------------------------------------
    # Write helpers
    # -------------------------------------------------------------------------

    @asynccontextmanager
    async def _write_scope(self) -> AsyncIterator[None]:
        if not self._autocommit:
            async with self._session.begin_nested():
                yield
            return

        try:
            yield
        except Exception:
            await self._session.rollback()
            raise
        await self._session.commit()

    def _hold_until_commit(
        self,
        children: ChangeTrackingCollection[Any],
        changes: ChangeSet[Any],
    ) -> None:
        session = self._session.sync_session
        if not event.contains(session, "after_commit", _forget_uncommitted):
            event.listen(session, "after_commit", _forget_uncommitted)
            event.listen(session, "after_transaction_end", _restore_uncommitted)
        session.info.setdefault(UNCOMMITTED_KEY, []).append((children, changes))

    async def _upsert_root(self, aggregate: A) -> None:
        row = self._mapping.root_mapper.to_row(aggregate.root)
        values = {k: v for k, v in row.items() if k not in ("id", "created_at")}
        result = await self._session.execute(
            update(self._root).where(self._root.c.id == aggregate.id).values(values),
        )
        if result.rowcount == 0:
            await self._session.execute(insert(self._root).values(row))

    async def _insert_child(self, aggregate: A, child: Any) -> None:
        await self._session.execute(
            insert(self._child).values(self._mapping.child_mapper.to_row(child)),
        )
        await self._session.execute(
            insert(self._mapping.link_table).values(
                {
                    self._mapping.link_root_column: aggregate.id,
                    self._mapping.link_child_column: child.id,
                    "user_id": aggregate.user_id,
                    "created_at": utc_now(),
                },
            ),
        )

    async def _update_child(self, child: Any) -> None:
        row = self._mapping.child_mapper.to_row(child)
        values = {k: v for k, v in row.items() if k not in ("id", "created_at")}
        await self._session.execute(
            update(self._child).where(self._child.c.id == child.id).values(values),
        )

    async def _delete_child(self, aggregate: A, child: Any) -> None:
        link = self._mapping.link_table
        await self._session.execute(
            delete(link).where(
                self._owner_column() == aggregate.id,
                link.c[self._mapping.link_child_column] == child.id,
            ),
        )
        await self._session.execute(
            delete(self._child).where(self._child.c.id == child.id),
        )

    # -------------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------------

    @property
    def _root(self) -> Table:
        return self._mapping.root_table

    @property
    def _child(self) -> Table:
        return self._mapping.child_table

    def _owner_column(self) -> Column:
        return self._mapping.link_table.c[self._mapping.link_root_column]

    def _base_root_query(self) -> Select:
        return select(self._root).where(self._root.c.deleted_at.is_(None))

    def _column(self, field: str) -> Column:
        if field not in self._root.c:
            msg = f"Unknown {self._mapping.name} field: {field}"
            raise ValueError(msg)
        return self._root.c[field]

    def _apply_filters(self, stmt: Select, filters: dict[str, Any]) -> Select:
        for field, value in filters.items():
            column = self._column(field)
            if isinstance(value, Money):
                stmt = stmt.where(
                    column == value.amount,
                    self._root.c.currency == value.currency.code,
                )
            elif isinstance(value, Enum):
                stmt = stmt.where(column == value.value)
            elif value is None:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column == value)
        return stmt

    def _apply_sort(self, stmt: Select, options: FindManyOptions) -> Select:
        if not options.sort:
            return stmt.order_by(self._root.c.created_at, self._root.c.id)
        for sort in options.sort:
            column = self._column(sort.field)
            stmt = stmt.order_by(column.desc() if sort.direction == "desc" else column)
        return stmt.order_by(self._root.c.id)

    async def _load(self, stmt: Select) -> list[A]:
        result = await self._session.execute(stmt)
        root_rows = result.mappings().all()
        if not root_rows:
            return []

        children = await self._load_children([row["id"] for row in root_rows])
        return [
            self._mapping.assemble(
                self._mapping.root_mapper.from_row(row),
                children.get(row["id"], []),
            )
            for row in root_rows
        ]

    async def _load_children(self, root_ids: Sequence[UUID]) -> dict[UUID, list[Any]]:
        """Load live children of all ``root_ids`` in one query, in link order."""
        link = self._mapping.link_table
        owner_column = self._owner_column()
        stmt = (
            select(self._child, owner_column.label(OWNER_KEY))
            .join(link, link.c[self._mapping.link_child_column] == self._child.c.id)
            .where(owner_column.in_(root_ids), self._child.c.deleted_at.is_(None))
            .order_by(link.c.id)
        )
        result = await self._session.execute(stmt)

        children: dict[UUID, list[Any]] = defaultdict(list)
        for row in result.mappings().all():
            children[row[OWNER_KEY]].append(self._map_child(row))
        return children

    def _map_child(self, row: Row) -> Any:
        return self._mapping.child_mapper.from_row(row)
