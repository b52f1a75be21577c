"""Observability – structlog configuration and ErrorLogger factory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from logbridge.config.settings import LoggingSettings
from logbridge.observability.logging.emitter import ErrorLogger
from logbridge.observability.logging.protocol import Sink
from logbridge.observability.logging.sinks import StructlogSink


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root handler."""

    @staticmethod
    def configure(settings: LoggingSettings | None = None) -> None:
        settings = settings or LoggingSettings()

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer: Any
        if settings.renderer == "console":
            renderer = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(settings.level_no)


def create_logger(
    settings: LoggingSettings | None = None,
    sink: Sink | None = None,
) -> ErrorLogger:
    """Return a ready :class:`ErrorLogger`.

    Parameters
    ----------
    settings:
        When given, structlog is (re)configured from it and the default
        sink writes to ``settings.logger_name``.
    sink:
        Explicit sink; takes precedence over the structlog default.
    """
    if settings is not None:
        JsonLoggerFactory.configure(settings)
    if sink is None:
        name = settings.logger_name if settings is not None else "logbridge"
        sink = StructlogSink(structlog.get_logger(name))
    return ErrorLogger(sink)


__all__ = ["JsonLoggerFactory", "create_logger"]
