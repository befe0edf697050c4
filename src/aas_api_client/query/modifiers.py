"""Request modifiers controlling server-side serialization and paging."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Level(str, Enum):
    """Depth of the returned structure (``level`` query parameter)."""

    DEFAULT = "default"
    CORE = "core"
    DEEP = "deep"


class Extent(str, Enum):
    """Whether BLOB values are inlined (``extent`` query parameter)."""

    DEFAULT = "default"
    WITHOUT_BLOB_VALUE = "withoutBlobValue"
    WITH_BLOB_VALUE = "withBlobValue"


class Content(str, Enum):
    """Serialization flavour, rendered as a ``/$<content>`` path suffix."""

    DEFAULT = "default"
    NORMAL = "normal"
    METADATA = "metadata"
    VALUE = "value"
    REFERENCE = "reference"
    PATH = "path"

    @property
    def path_suffix(self) -> str:
        """Suffix appended to a resource path, empty for plain content."""
        if self in (Content.DEFAULT, Content.NORMAL):
            return ""
        return f"/${self.value}"


@dataclass(frozen=True, slots=True)
class QueryModifier:
    """Combination of ``level`` and ``extent`` for a request."""

    level: Level = Level.DEFAULT
    extent: Extent = Extent.DEFAULT

    DEFAULT: ClassVar[QueryModifier]
    MINIMAL: ClassVar[QueryModifier]
    MAXIMAL: ClassVar[QueryModifier]

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.level is not Level.DEFAULT:
            params.append(("level", self.level.value))
        if self.extent is not Extent.DEFAULT:
            params.append(("extent", self.extent.value))
        return params


QueryModifier.DEFAULT = QueryModifier()
QueryModifier.MINIMAL = QueryModifier(level=Level.CORE)
QueryModifier.MAXIMAL = QueryModifier(level=Level.DEEP, extent=Extent.WITH_BLOB_VALUE)


@dataclass(frozen=True, slots=True)
class PagingInfo:
    """Client-side paging request: page size and continuation cursor."""

    limit: int | None = None
    """Maximum number of results; None lets the server decide."""

    cursor: str | None = None
    """Opaque cursor from a previous page's paging metadata."""

    ALL: ClassVar[PagingInfo]

    def __post_init__(self) -> None:
        if self.limit is not None and (isinstance(self.limit, bool) or self.limit < 1):
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")


PagingInfo.ALL = PagingInfo()
