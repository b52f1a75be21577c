"""Application errors that map onto HTTP status codes.

These are the errors application code raises and later hands to
:meth:`ErrorLogger.error <logbridge.observability.logging.ErrorLogger.error>`.
The status code lives on the class and only ``message`` is stored on the
instance, so an instance exposes extra fields only when application code
attaches them (``err.user_id = ...``).  Those extra fields are what the
classifier surfaces under ``fullError``.
"""

from __future__ import annotations

from typing import Any, ClassVar


class CustomError(Exception):
    """Base class for application errors carrying an HTTP status code."""

    http_code: ClassVar[int] = 500
    default_message: ClassVar[str] = "An error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "httpCode": self.http_code,
            "message": self.message,
        }


class BadRequest(CustomError):
    """The request was malformed or failed validation."""

    http_code = 400
    default_message = "Bad request."


class NotAuthorized(CustomError):
    """Missing or invalid credentials."""

    http_code = 401
    default_message = "Not authorized."


class Forbidden(CustomError):
    """Authenticated caller lacks permission."""

    http_code = 403
    default_message = "Access forbidden."


class NotFound(CustomError):
    http_code = 404
    default_message = "Not found."


class InternalServerError(CustomError):
    http_code = 500
    default_message = "An unexpected error occurred."


__all__ = [
    "BadRequest",
    "CustomError",
    "Forbidden",
    "InternalServerError",
    "NotAuthorized",
    "NotFound",
]
