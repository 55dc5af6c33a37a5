"""Config – 12-factor settings and loaders."""

from optionkit.config.settings import (
    EnvSettingsLoader,
    OptionkitSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    get_settings,
)
from optionkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OptionkitSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "get_settings",
]
