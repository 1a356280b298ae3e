"""Config – 12-factor settings and loaders."""

from csv_export.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from csv_export.config.validation import InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
