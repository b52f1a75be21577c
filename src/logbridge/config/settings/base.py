"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from logbridge.config.settings.loaders import SettingsLoader

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare fields with defaults and a ``_prefix`` naming the
    environment variable namespace (``LOG`` -> ``LOG_LEVEL``).
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to normalise fields or reject bad values."""

    @classmethod
    def load(cls: type[S], loader: SettingsLoader | None = None) -> S:
        """Build an instance from *loader* (environment variables by default)."""
        if loader is None:
            from logbridge.config.settings.loaders import EnvSettingsLoader

            loader = EnvSettingsLoader()
        return loader.load(cls)


__all__ = ["Settings"]
