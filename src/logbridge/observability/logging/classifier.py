"""Observability – error classification.

Turns an error-like value plus optional caller context into the severity,
representation and merged context that :class:`ErrorLogger` writes.

Error-likeness is a capability, not a type: a value qualifies when it
exposes a non-empty trace.  See :func:`get_trace`.

Recognised context keys:

* ``httpCode`` – numeric status; ``< 500`` allows a downgrade to warn.
* ``isHandledError`` – ``True`` when application logic anticipated the error.
* ``fullError`` – kept verbatim when the caller supplies it, otherwise
  filled in from the error.
"""
from __future__ import annotations

import traceback
from collections.abc import Mapping
from numbers import Real
from types import TracebackType
from typing import Any, Final

from logbridge.observability.logging.protocol import Classification, Severity

HTTP_CODE: Final = "httpCode"
IS_HANDLED_ERROR: Final = "isHandledError"
FULL_ERROR: Final = "fullError"

# Standard error fields never surfaced as extra diagnostic data.
EXCLUDED_FIELDS: Final[frozenset[str]] = frozenset({"message", "stack"})

SERVER_ERROR_THRESHOLD: Final = 500


class _Missing:
    """Sentinel for an omitted context argument."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def get_trace(value: Any) -> str | None:
    """Return the trace text of *value*, or ``None`` if it is not error-like.

    Checked in order:

    1. a non-empty ``str`` attribute named ``stack``;
    2. a mapping holding a non-empty ``str`` under ``"stack"``;
    3. an exception-shaped value (its ``__traceback__`` is a traceback or
       ``None``), rendered with :func:`traceback.format_exception`.
    """
    stack = getattr(value, "stack", None)
    if isinstance(stack, str) and stack:
        return stack
    if isinstance(value, Mapping):
        stack = value.get("stack")
        return stack if isinstance(stack, str) and stack else None
    tb = getattr(value, "__traceback__", MISSING)
    if tb is None or isinstance(tb, TracebackType):
        try:
            text = "".join(
                traceback.format_exception(type(value), value, tb)
            )
        except (TypeError, AttributeError):
            return None
        return text or None
    return None


def has_trace(value: Any) -> bool:
    return get_trace(value) is not None


def extra_fields(error: Any) -> dict[str, Any]:
    """Own fields of *error* beyond ``message``/``stack``.

    Private (underscore-prefixed) attributes are skipped.  Returns a new
    dict; *error* is never touched.
    """
    if isinstance(error, Mapping):
        fields = error
    else:
        try:
            fields = vars(error)
        except TypeError:
            return {}
    return {
        key: value
        for key, value in fields.items()
        if isinstance(key, str)
        and key not in EXCLUDED_FIELDS
        and not key.startswith("_")
    }


def _is_downgradable(context: Mapping[str, Any]) -> bool:
    if context.get(IS_HANDLED_ERROR) is not True:
        return False
    code = context.get(HTTP_CODE)
    # bool is a Real subclass; True/False are not status codes
    if isinstance(code, bool) or not isinstance(code, Real):
        return False
    return code < SERVER_ERROR_THRESHOLD


def classify(error: Any, context: Any = MISSING) -> Classification:
    """Decide severity, representation and merged context for *error*.

    Never raises.  Non error-like values and non-mapping contexts pass
    through unchanged at ``error`` severity.  An omitted context counts as
    an empty mapping once *error* is error-like.  A mapping context is
    shallow-copied; ``fullError`` is set on the copy unless the caller
    already supplied one.  Severity drops to ``warn`` only for handled
    errors whose ``httpCode`` is below 500.
    """
    trace = get_trace(error)
    if trace is None:
        return Classification(Severity.ERROR, error, context)

    if context is MISSING:
        context = {}
    elif not isinstance(context, Mapping):
        return Classification(Severity.ERROR, trace, context)

    merged = dict(context)
    if FULL_ERROR not in merged:
        extras = extra_fields(error)
        merged[FULL_ERROR] = extras if extras else error

    severity = Severity.WARN if _is_downgradable(context) else Severity.ERROR
    return Classification(severity, trace, merged)


__all__ = [
    "EXCLUDED_FIELDS",
    "FULL_ERROR",
    "HTTP_CODE",
    "IS_HANDLED_ERROR",
    "MISSING",
    "classify",
    "extra_fields",
    "get_trace",
    "has_trace",
]
