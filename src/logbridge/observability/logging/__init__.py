"""Observability – error-aware structured logging."""
from logbridge.observability.logging.classifier import (
    MISSING,
    classify,
    extra_fields,
    get_trace,
    has_trace,
)
from logbridge.observability.logging.emitter import ErrorLogger
from logbridge.observability.logging.factory import JsonLoggerFactory, create_logger
from logbridge.observability.logging.protocol import Classification, LogRecord, Severity, Sink
from logbridge.observability.logging.sinks import StructlogSink

__all__ = [
    "MISSING",
    "Classification",
    "ErrorLogger",
    "JsonLoggerFactory",
    "LogRecord",
    "Severity",
    "Sink",
    "StructlogSink",
    "classify",
    "create_logger",
    "extra_fields",
    "get_trace",
    "has_trace",
]
