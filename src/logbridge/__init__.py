"""
logbridge – error-aware structured logging adapter.

Import path convention::

    from logbridge import ErrorLogger, StructlogSink, create_logger
    from logbridge.kernel.errors import NotFound
    from logbridge.config import LoggingSettings, EnvSettingsLoader
    from logbridge.testing import RecordingSink
"""

from logbridge.observability.logging import (
    Classification,
    ErrorLogger,
    LogRecord,
    Severity,
    Sink,
    StructlogSink,
    classify,
    create_logger,
    has_trace,
)

__version__ = "0.1.0"
__all__ = [
    "Classification",
    "ErrorLogger",
    "LogRecord",
    "Severity",
    "Sink",
    "StructlogSink",
    "__version__",
    "classify",
    "create_logger",
    "has_trace",
]
