"""In-memory files exchanged with attachment, thumbnail and package endpoints."""

from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class InMemoryFile:
    """Raw file content as downloaded from the server."""

    content: bytes
    path: str | None = None
    content_type: str = DEFAULT_CONTENT_TYPE
