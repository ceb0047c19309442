"""Settings manifest management."""

from .settings_loader import CONFIG_ENV_VAR, SarifSettings, Settings, SettingsError, SettingsLoader

__all__ = [
    "CONFIG_ENV_VAR",
    "SarifSettings",
    "Settings",
    "SettingsError",
    "SettingsLoader",
]
