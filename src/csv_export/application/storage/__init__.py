"""Application storage – persistent storage ports for finished exports."""
from csv_export.application.storage.backend import LocalDiskStorage, StorageBackend
from csv_export.application.storage.manager import StorageManager

__all__ = [
    "LocalDiskStorage",
    "StorageBackend",
    "StorageManager",
]
