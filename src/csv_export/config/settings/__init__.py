"""Config settings – 12-factor env-based configuration."""
from csv_export.config.settings.base import Settings
from csv_export.config.settings.export import ExportSettings
from csv_export.config.settings.factory import SettingsFactory
from csv_export.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
