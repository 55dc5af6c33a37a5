"""Config settings – SettingsFactory and the cached library settings."""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Sequence, TypeVar

from optionkit.config.settings.base import OptionkitSettings, Settings
from optionkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from optionkit.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields. *overrides* (if provided) take the highest priority.
    A loader that fails with :class:`ConfigError` is skipped so the remaining
    loaders may still contribute values. :class:`InvalidSettingValueError`
    is never skipped: a value that is present but wrong always propagates.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~optionkit.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of loaders. Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders.

        Raises
        ------
        InvalidSettingValueError
            When a loader finds a value that cannot be coerced or validated.
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except InvalidSettingValueError:
                raise
            except ConfigError:
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


@functools.lru_cache(maxsize=1)
def get_settings() -> OptionkitSettings:
    """Load :class:`OptionkitSettings` from the environment once.

    Call ``get_settings.cache_clear()`` after changing ``OPTIONKIT_*``
    variables.
    """
    return SettingsFactory.create(OptionkitSettings, loaders=[EnvSettingsLoader()])


__all__ = ["SettingsFactory", "get_settings"]
