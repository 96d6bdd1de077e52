"""Loading aggregates on behalf of the current user."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID

from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.exceptions import EntityNotFoundError
from finplan.domain.shared.repository import AggregateRepository

if TYPE_CHECKING:
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Aggregate)


async def load_owned(
    repository: AggregateRepository[A],
    aggregate_id: UUID,
    current_user: CurrentUser,
    not_found: Callable[[UUID], EntityNotFoundError],
) -> A:
    """Load an aggregate the caller owns.

    A foreign aggregate raises the same not-found error as a missing one so
    callers cannot discover ids belonging to other users.
    """
    aggregate = await repository.find_by_id(aggregate_id)
    if aggregate is None:
        raise not_found(aggregate_id)
    if not current_user.owns(aggregate.user_id):
        logger.warning(
            "User %s requested %s %s owned by another user",
            current_user.user_id,
            type(aggregate).__name__,
            aggregate_id,
        )
        raise not_found(aggregate_id)
    return aggregate
