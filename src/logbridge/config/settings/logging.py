"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from logbridge.config.settings.base import Settings
from logbridge.config.validation import InvalidSettingValueError

LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
RENDERERS: frozenset[str] = frozenset({"json", "console"})


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Process-level logging configuration, read from ``LOG_*`` variables.

    ``LOG_LEVEL`` is a stdlib level name, ``LOG_RENDERER`` is ``json`` for
    aggregators or ``console`` for humans, ``LOG_LOGGER_NAME`` names the
    structlog logger the default sink writes to.
    """

    _prefix: ClassVar[str] = "LOG"

    level: str = "INFO"
    renderer: str = "json"
    logger_name: str = "logbridge"

    def _validate(self) -> None:
        self.level = self.level.upper()
        self.renderer = self.renderer.lower()
        if self.level not in LEVELS:
            raise InvalidSettingValueError(
                "level", self.level, f"expected one of {sorted(LEVELS)}"
            )
        if self.renderer not in RENDERERS:
            raise InvalidSettingValueError(
                "renderer", self.renderer, f"expected one of {sorted(RENDERERS)}"
            )

    @property
    def level_no(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings"]
