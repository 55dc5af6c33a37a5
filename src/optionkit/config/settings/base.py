"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from optionkit.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses are dataclasses; ``_prefix`` names the environment variable
    prefix (``APP`` reads ``APP_HOST`` for a ``host`` field).
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class OptionkitSettings(Settings):
    """Runtime switches read from ``OPTIONKIT_*`` environment variables."""

    _prefix: ClassVar[str] = "OPTIONKIT"

    log_swallowed_exceptions: bool = True
    swallowed_log_level: str = "debug"

    def _validate(self) -> None:
        level = self.swallowed_log_level.lower()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "swallowed_log_level", self.swallowed_log_level, "unknown log level"
            )
        self.swallowed_log_level = level


__all__ = ["OptionkitSettings", "Settings"]
