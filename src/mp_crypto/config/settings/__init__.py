"""Config settings – 12-factor env-based configuration."""
from mp_crypto.config.settings.base import Settings
from mp_crypto.config.settings.crypto import CryptoSettings
from mp_crypto.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CryptoSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
