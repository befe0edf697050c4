"""Paging envelope returned by list endpoints."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from aas_api_client.query.modifiers import PagingInfo

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PagingMetadata:
    """The ``paging_metadata`` object of a paged response."""

    cursor: str | None = None
    """Opaque continuation token; None on the last page."""


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of results plus the cursor to continue from."""

    result: tuple[T, ...] = ()
    metadata: PagingMetadata = field(default_factory=PagingMetadata)

    def __iter__(self) -> Iterator[T]:
        return iter(self.result)

    def __len__(self) -> int:
        return len(self.result)

    @property
    def cursor(self) -> str | None:
        return self.metadata.cursor

    @property
    def has_more(self) -> bool:
        """True when the server announced a further page."""
        return self.metadata.cursor is not None

    def next_paging(self, limit: int | None = None) -> PagingInfo | None:
        """PagingInfo requesting the page after this one, or None on the last page."""
        if self.metadata.cursor is None:
            return None
        return PagingInfo(limit=limit, cursor=self.metadata.cursor)
