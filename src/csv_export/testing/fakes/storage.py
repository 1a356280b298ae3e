"""Testing fakes – InMemoryStorage."""
from __future__ import annotations


class InMemoryStorage:
    """In-memory :class:`~csv_export.application.storage.StorageBackend`.

    Set ``fail=True`` to make every :meth:`put` report failure, the same way
    a real disk signals a rejected write.

    Usage::

        storage = InMemoryStorage()
        service = CsvExportService(storage=StorageManager({"memory": storage}, default="memory"))
        service.store(exporter, "reports/users.csv")

        assert storage.get("reports/users.csv").startswith(b"ID,")
    """

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.puts: list[str] = []
        self._blobs: dict[str, bytes] = {}

    # ------------------------------------------------------------------
    # StorageBackend protocol
    # ------------------------------------------------------------------

    def put(self, path: str, data: bytes) -> bool:
        self.puts.append(path)
        if self.fail:
            return False
        self._blobs[path] = bytes(data)
        return True

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    def get(self, path: str) -> bytes | None:
        return self._blobs.get(path)

    def exists(self, path: str) -> bool:
        return path in self._blobs

    def paths(self) -> list[str]:
        return sorted(self._blobs)

    def reset(self) -> None:
        self.puts.clear()
        self._blobs.clear()


__all__ = ["InMemoryStorage"]
