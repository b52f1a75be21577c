"""Observability – Severity, LogRecord and the Sink protocol."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, NamedTuple, Protocol, runtime_checkable


class Severity(str, Enum):
    """Severity tags a sink write can carry."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """One sink write: a severity tag plus the ordered payload values."""

    severity: Severity
    payload: tuple[Any, ...] = ()


class Classification(NamedTuple):
    """Result of :func:`~logbridge.observability.logging.classifier.classify`."""

    severity: Severity
    representation: Any
    context: Any


@runtime_checkable
class Sink(Protocol):
    """Anything that persists or prints a severity-tagged list of values.

    Implementations must accept arbitrary values without validation.
    """

    def log(self, severity: Severity, *values: Any) -> None: ...


__all__ = ["Classification", "LogRecord", "Severity", "Sink"]
