"""Observability – structured logging."""

from logbridge.observability.logging import ErrorLogger, Severity, Sink, StructlogSink, create_logger

__all__ = ["ErrorLogger", "Severity", "Sink", "StructlogSink", "create_logger"]
