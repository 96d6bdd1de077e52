"""Query options accepted by aggregate repositories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

SortDirection = Literal["asc", "desc"]

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class Pagination:
    """1-based page window."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            msg = f"Page must be >= 1, got {self.page}"
            raise ValueError(msg)
        if self.limit < 1:
            msg = f"Limit must be >= 1, got {self.limit}"
            raise ValueError(msg)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class SortField:
    field: str
    direction: SortDirection = "asc"


@dataclass(frozen=True)
class FindManyOptions:
    pagination: Pagination | None = None
    sort: tuple[SortField, ...] = field(default_factory=tuple)
