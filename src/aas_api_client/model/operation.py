"""Request and result shapes for synchronous operation invocation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any

from basyx.aas import model


class ExecutionState(str, Enum):
    """Execution state reported in an OperationResult."""

    INITIATED = "Initiated"
    RUNNING = "Running"
    COMPLETED = "Completed"
    CANCELED = "Canceled"
    FAILED = "Failed"
    TIMEOUT = "Timeout"


def format_duration(duration: timedelta) -> str:
    """Format a timedelta as an ISO 8601 duration (``PT1M30S``)."""
    total = duration.total_seconds()
    if total < 0:
        raise ValueError("duration must not be negative")
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = "PT"
    if hours:
        parts += f"{int(hours)}H"
    if minutes:
        parts += f"{int(minutes)}M"
    if seconds or parts == "PT":
        parts += f"{seconds:g}S"
    return parts


@dataclass(frozen=True, slots=True)
class OperationRequest:
    """Body of ``POST .../invoke``."""

    input_arguments: Sequence[model.SubmodelElement] = ()
    inoutput_arguments: Sequence[model.SubmodelElement] = ()
    client_timeout: timedelta = timedelta(seconds=60)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Decoded response of a synchronous invocation."""

    execution_state: ExecutionState | None = None
    success: bool | None = None
    messages: tuple[dict[str, Any], ...] = ()
    output_arguments: tuple[model.SubmodelElement, ...] = ()
    inoutput_arguments: tuple[model.SubmodelElement, ...] = ()
