"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError                (base.py)   library failures
    └── ConfigError          (config.validation)
    CustomError              (http.py)   application errors
    ├── BadRequest           400
    ├── NotAuthorized        401
    ├── Forbidden            403
    ├── NotFound             404
    └── InternalServerError  500
"""

from logbridge.kernel.errors.base import BaseError
from logbridge.kernel.errors.http import (
    BadRequest,
    CustomError,
    Forbidden,
    InternalServerError,
    NotAuthorized,
    NotFound,
)

__all__ = [
    "BadRequest",
    "BaseError",
    "CustomError",
    "Forbidden",
    "InternalServerError",
    "NotAuthorized",
    "NotFound",
]
