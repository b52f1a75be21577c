"""Observability – ErrorLogger, the public info/error entry points."""
from __future__ import annotations

import logging
from typing import Any

from logbridge.observability.logging.classifier import MISSING, classify
from logbridge.observability.logging.protocol import Severity, Sink

_log = logging.getLogger(__name__)


class ErrorLogger:
    """Front door between application code and a :class:`Sink`.

    ``info`` forwards its arguments untouched.  ``error`` runs the first
    argument through :func:`classify` so error objects are logged by their
    trace, handled client errors drop to ``warn`` and the error itself
    travels in the context under ``fullError``.

    Every call performs exactly one sink write.

    Usage::

        log = ErrorLogger(StructlogSink())
        log.info("user signed in", {"user_id": 42})
        try:
            ...
        except NotFound as exc:
            log.error(exc, {"isHandledError": True, "httpCode": 404})

    Parameters
    ----------
    sink:
        Destination of every write.  Injected so tests can substitute a
        :class:`~logbridge.testing.fakes.RecordingSink`.
    """

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink

    def info(self, *args: Any) -> None:
        self._sink.log(Severity.INFO, *args)

    def error(self, err: Any, context: Any = MISSING, *rest: Any) -> None:
        """Log *err* at a severity derived from *err* and *context*.

        Non error-like *err* values are forwarded exactly as passed.
        """
        severity, representation, merged = classify(err, context)
        if severity is Severity.WARN:
            _log.debug("handled error below 500 logged as warning")
        if merged is MISSING:
            self._sink.log(severity, representation, *rest)
        else:
            self._sink.log(severity, representation, merged, *rest)


__all__ = ["ErrorLogger"]
