"""Config settings – 12-factor env-based configuration."""
from optionkit.config.settings.base import OptionkitSettings, Settings
from optionkit.config.settings.factory import SettingsFactory, get_settings
from optionkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EnvSettingsLoader",
    "OptionkitSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "get_settings",
]
