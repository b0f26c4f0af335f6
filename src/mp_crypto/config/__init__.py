"""Config – 12-factor settings for peppers and encryption keys."""

from mp_crypto.config.settings import CryptoSettings, EnvSettingsLoader, Settings, SettingsLoader
from mp_crypto.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "CryptoSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
