"""Config – env-based settings and validation errors."""
from mp_mediator.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MediatorSettings,
    Settings,
    SettingsLoader,
)
from mp_mediator.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MediatorSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
