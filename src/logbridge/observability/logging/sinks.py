"""Observability – structlog-backed Sink."""
from __future__ import annotations

from typing import Any

import structlog

from logbridge.observability.logging.protocol import Severity

# structlog spells the warn level "warning"
_METHODS: dict[Severity, str] = {
    Severity.INFO: "info",
    Severity.WARN: "warning",
    Severity.ERROR: "error",
}


class StructlogSink:
    """Write severity-tagged values to a structlog logger.

    The first value becomes the structlog event; any remaining values are
    attached verbatim, in order, under the ``payload`` key.  Values are
    never inspected or validated.

    Parameters
    ----------
    logger:
        A structlog bound logger.  Defaults to
        ``structlog.get_logger("logbridge")``.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("logbridge")

    def log(self, severity: Severity, *values: Any) -> None:
        method = getattr(self._logger, _METHODS[Severity(severity)])
        if not values:
            method("")
            return
        event, *rest = values
        if rest:
            method(event, payload=tuple(rest))
        else:
            method(event)


__all__ = ["StructlogSink"]
