"""Config settings – ExportSettings."""
from __future__ import annotations

import dataclasses
import logging
import tempfile
from typing import ClassVar

from csv_export.config.settings.base import Settings
from csv_export.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ExportSettings(Settings):
    """Process-wide export settings, read from ``CSV_EXPORT_*`` variables.

    Per-source tuning (batch size, row cap, BOM) lives on the sources
    themselves; these settings cover what is shared by every export: the CSV
    dialect, where temporary files go and which storage disk is the default.
    """

    _prefix: ClassVar[str] = "CSV_EXPORT"
    _escaped_fields: ClassVar[frozenset[str]] = frozenset(
        {"delimiter", "enclosure", "escape", "line_terminator"}
    )

    delimiter: str = ","
    enclosure: str = '"'
    escape: str = "\\"
    line_terminator: str = "\n"
    encoding: str = "utf-8"
    temp_dir: str = ""
    storage_root: str = "storage"
    default_disk: str = "local"
    log_level: str = "INFO"

    def _validate(self) -> None:
        for name in ("delimiter", "enclosure"):
            value = getattr(self, name)
            if len(value) != 1:
                raise InvalidSettingValueError(name, value, "must be a single character")
        if len(self.escape) > 1:
            raise InvalidSettingValueError("escape", self.escape, "must be empty or a single character")
        if self.delimiter == self.enclosure:
            raise InvalidSettingValueError("delimiter", self.delimiter, "must differ from the enclosure")
        if not self.line_terminator:
            raise InvalidSettingValueError("line_terminator", self.line_terminator, "must not be empty")
        if not self.default_disk:
            raise InvalidSettingValueError("default_disk", self.default_disk, "must not be empty")
        if logging.getLevelName(self.log_level.upper()) not in range(0, 60):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def temp_directory(self) -> str:
        """Directory for scratch files; the system temp dir when unset."""
        return self.temp_dir or tempfile.gettempdir()

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, *, dotenv: bool = False, **overrides: object) -> "ExportSettings":
        """Load from the environment (optionally a ``.env`` file first)."""
        from csv_export.config.settings.factory import SettingsFactory
        from csv_export.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader

        loader = DotenvSettingsLoader() if dotenv else EnvSettingsLoader()
        return SettingsFactory.create(cls, loaders=[loader], overrides=dict(overrides), strict=True)


__all__ = ["ExportSettings"]
