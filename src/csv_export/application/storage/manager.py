"""Application storage – StorageManager (named disks)."""
from __future__ import annotations

from typing import Mapping

from csv_export.application.storage.backend import LocalDiskStorage, StorageBackend
from csv_export.config.settings import ExportSettings
from csv_export.kernel.errors import ConfigurationError

__all__ = ["StorageManager"]


class StorageManager:
    """Looks up storage backends by disk name."""

    def __init__(self, disks: Mapping[str, StorageBackend] | None = None, default: str = "local") -> None:
        self._disks: dict[str, StorageBackend] = dict(disks or {})
        self._default = default

    @classmethod
    def from_settings(cls, settings: ExportSettings) -> "StorageManager":
        """A manager with a single local disk rooted at ``settings.storage_root``."""
        return cls(
            {settings.default_disk: LocalDiskStorage(settings.storage_root)},
            default=settings.default_disk,
        )

    @property
    def default(self) -> str:
        return self._default

    def register(self, name: str, backend: StorageBackend) -> "StorageManager":
        if not isinstance(backend, StorageBackend):
            raise ConfigurationError(f"Disk '{name}' does not implement put(path, data)")
        self._disks[name] = backend
        return self

    def disk(self, name: str | None = None) -> StorageBackend:
        key = name or self._default
        try:
            return self._disks[key]
        except KeyError:
            raise ConfigurationError(
                f"Storage disk '{key}' is not configured", detail={"disk": key}
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._disks
