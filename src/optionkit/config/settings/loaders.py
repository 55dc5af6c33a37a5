"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from optionkit.config.settings.base import Settings
from optionkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from optionkit.kernel.types.option import NONE, Option, Some

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Fields annotated ``Option[X]`` are never required: an unset variable
    loads as ``NONE`` and a set one as ``Some(<coerced X>)``.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = _resolve_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            type_hint = hints.get(field.name, field.type)
            option_of = _option_argument(type_hint)

            if raw is None:
                if option_of is not None:
                    kwargs[field.name] = NONE
                    continue
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                if option_of is not None:
                    kwargs[field.name] = Some(self._coerce(raw, option_of))
                else:
                    kwargs[field.name] = self._coerce(raw, type_hint)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = typing.get_origin(type_hint)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def _resolve_hints(settings_class: type[Settings]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(settings_class)
    except (NameError, TypeError):
        return {}


def _option_argument(type_hint: Any) -> Any | None:
    """Return ``X`` for an ``Option[X]`` hint (``Any`` for bare ``Option``), else ``None``."""
    if type_hint is Option:
        return Any
    if typing.get_origin(type_hint) is Option:
        args = typing.get_args(type_hint)
        return args[0] if args else Any
    return None


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
