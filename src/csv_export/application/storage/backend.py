"""Application storage – StorageBackend protocol and LocalDiskStorage."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from csv_export.observability.logging import get_logger

__all__ = ["LocalDiskStorage", "StorageBackend"]

log = get_logger(__name__)


@runtime_checkable
class StorageBackend(Protocol):
    """Port: persists a blob under a relative path."""

    def put(self, path: str, data: bytes) -> bool:
        """Store *data* at *path*; return ``False`` if the backend rejected it."""
        ...


class LocalDiskStorage:
    """Stores blobs as files under a root directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, path: str) -> Path:
        return self._root / path.lstrip("/")

    def put(self, path: str, data: bytes) -> bool:
        target = self.path_for(path).resolve()
        if not target.is_relative_to(self._root):
            log.warning("storage.path_outside_root", root=str(self._root), path=path)
            return False
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            log.warning("storage.put_failed", root=str(self._root), path=path, error=str(exc))
            return False
        return True

    def exists(self, path: str) -> bool:
        return self.path_for(path).is_file()

    def get(self, path: str) -> bytes | None:
        target = self.path_for(path)
        return target.read_bytes() if target.is_file() else None
