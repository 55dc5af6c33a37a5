"""Unit tests for config settings and the env loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from optionkit import NONE, Option, Some
from optionkit.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    OptionkitSettings,
    Settings,
    get_settings,
)


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    api_key: str


@dataclass
class OptionalSettings(Settings):
    _prefix: ClassVar[str] = "OPT"

    timeout: Option[int]
    region: Option[str]
    verbose: Option[bool] = NONE


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,,")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["a.com", "b.com"]

    def test_invalid_int_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"
        assert isinstance(exc_info.value, ConfigError)


class TestOptionFields:
    def test_unset_option_fields_load_as_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("OPT_TIMEOUT", "OPT_REGION", "OPT_VERBOSE"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(OptionalSettings)
        assert settings.timeout is NONE
        assert settings.region is NONE
        assert settings.verbose is NONE

    def test_set_option_fields_are_coerced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPT_TIMEOUT", "30")
        monkeypatch.setenv("OPT_REGION", "eu-west-1")
        monkeypatch.setenv("OPT_VERBOSE", "yes")
        settings = EnvSettingsLoader().load(OptionalSettings)
        assert settings.timeout == Some(30)
        assert settings.region == Some("eu-west-1")
        assert settings.verbose == Some(True)

    def test_invalid_option_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPT_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(OptionalSettings)


# ---------------------------------------------------------------------------
# OptionkitSettings
# ---------------------------------------------------------------------------


class TestOptionkitSettings:
    def test_defaults(self) -> None:
        settings = OptionkitSettings()
        assert settings.log_swallowed_exceptions is True
        assert settings.swallowed_log_level == "debug"

    def test_level_is_normalised(self) -> None:
        assert OptionkitSettings(swallowed_log_level="INFO").swallowed_log_level == "info"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            OptionkitSettings(swallowed_log_level="loud")

    def test_get_settings_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_LOG_SWALLOWED_EXCEPTIONS", "0")
        monkeypatch.setenv("OPTIONKIT_SWALLOWED_LOG_LEVEL", "error")
        settings = get_settings()
        assert settings.log_swallowed_exceptions is False
        assert settings.swallowed_log_level == "error"

    def test_get_settings_rejects_unknown_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OPTIONKIT_SWALLOWED_LOG_LEVEL", "verbose")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            get_settings()
        assert exc_info.value.value == "verbose"

    def test_get_settings_rejects_empty_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_SWALLOWED_LOG_LEVEL", "")
        with pytest.raises(InvalidSettingValueError):
            get_settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
