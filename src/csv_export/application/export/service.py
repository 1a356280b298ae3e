"""Application export – CsvExportService.

Front door for exports: resolves a source (instance or registered name),
applies per-call overrides and delivers the CSV to a path, a caller-owned
stream, an HTTP response or a storage disk.

Overrides can be given two ways::

    service.to_file("users", "out.csv", config=ExportConfig(row_cap=500))
    service.set_row_cap(500).set_bom_enabled().to_file("users", "out.csv")

The chained setters mutate state held by the service and are consumed by the
next delivery call, then reset. They are convenient for a service owned by
one caller; a service shared between threads or requests must use
``config=`` instead. An explicit config is used as given and leaves the
holder alone.

Named sources are resolved when the delivery call is made, so an unknown
name fails before any response or file is produced, even for the lazy
:meth:`CsvExportService.iter_csv` and :meth:`CsvExportService.stream`.
"""
from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Any, BinaryIO, Iterator

from csv_export.application.export.config import ExportConfig
from csv_export.application.export.pipeline import ExportPipeline, ExportResult
from csv_export.application.export.registry import SourceRegistry
from csv_export.application.export.sinks import open_file_sink
from csv_export.application.export.source import ExportSource
from csv_export.application.storage import StorageManager
from csv_export.config.settings import ExportSettings
from csv_export.kernel.errors import IOFailure
from csv_export.observability.logging import bind_export_context, get_logger

__all__ = ["CsvExportService"]

log = get_logger(__name__)


class CsvExportService:
    """Runs exports and holds chainable one-shot overrides."""

    def __init__(
        self,
        settings: ExportSettings | None = None,
        *,
        registry: SourceRegistry | None = None,
        storage: StorageManager | None = None,
        pipeline: ExportPipeline | None = None,
    ) -> None:
        self._settings = settings or ExportSettings()
        self._registry = registry or SourceRegistry()
        self._storage = storage or StorageManager.from_settings(self._settings)
        self._pipeline = pipeline or ExportPipeline(self._settings)
        self._pending = ExportConfig()

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    @property
    def storage(self) -> StorageManager:
        return self._storage

    @property
    def pipeline(self) -> ExportPipeline:
        return self._pipeline

    # ------------------------------------------------------------------
    # One-shot overrides
    # ------------------------------------------------------------------

    @property
    def pending_config(self) -> ExportConfig:
        return self._pending

    def set_batch_size(self, batch_size: int) -> "CsvExportService":
        return self._override(batch_size=batch_size)

    def set_row_cap(self, row_cap: int | None) -> "CsvExportService":
        """Cap the next export at *row_cap* rows; ``None`` exports everything."""
        return self._override(row_cap=row_cap)

    def set_row_cap_enabled(self, enabled: bool) -> "CsvExportService":
        return self._override(row_cap_enabled=enabled)

    def set_bom_enabled(self, enabled: bool = True) -> "CsvExportService":
        return self._override(bom_enabled=enabled)

    def reset(self) -> None:
        """Drop any pending overrides."""
        self._pending = ExportConfig()

    def _override(self, **values: Any) -> "CsvExportService":
        merged = {**self._pending.overrides(), **values}
        # validate before storing so a bad value leaves the holder untouched
        self._pending = ExportConfig(**merged)
        return self

    @contextlib.contextmanager
    def _consume(self, config: ExportConfig | None) -> Iterator[ExportConfig]:
        """Hand out the config for one call.

        Without an explicit *config* the pending overrides are used and the
        holder is reset whatever happens; an explicit *config* leaves it alone.
        """
        if config is not None:
            yield config
            return
        try:
            yield self._pending
        finally:
            self.reset()

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def source(self, source: ExportSource | str) -> ExportSource:
        """Resolve a registered name to a source; instances pass through."""
        if isinstance(source, str):
            return self._registry.resolve(source)
        return source

    def export_to_handle(
        self,
        source: ExportSource | str,
        sink: BinaryIO,
        config: ExportConfig | None = None,
    ) -> ExportResult:
        """Export into a caller-supplied binary stream. The stream is closed afterwards."""
        with self._consume(config) as cfg:
            return self._pipeline.run(self.source(source), sink, cfg)

    def to_file(
        self,
        source: ExportSource | str,
        path: str | os.PathLike[str],
        config: ExportConfig | None = None,
    ) -> Path:
        """Write the export to *path* (parent directories are created)."""
        with self._consume(config) as cfg:
            return self._write_file(self.source(source), Path(path), cfg)

    def iter_csv(
        self,
        source: ExportSource | str,
        config: ExportConfig | None = None,
    ) -> Iterator[bytes]:
        """Return a lazy byte iterator for a streamed response body.

        Nothing runs until the iterator is consumed. The source is resolved
        and the pending overrides are captured now, and the holder is reset
        straight away.
        """
        with self._consume(config) as cfg:
            return self._pipeline.stream(self.source(source), cfg)

    def stream(
        self,
        source: ExportSource | str,
        filename: str,
        config: ExportConfig | None = None,
    ) -> Any:
        """Return a FastAPI ``StreamingResponse`` that produces the CSV on demand."""
        from csv_export.adapters.fastapi.responses import stream_response  # noqa: PLC0415

        return stream_response(self.iter_csv(source, config), filename)

    def download(
        self,
        source: ExportSource | str,
        filename: str,
        config: ExportConfig | None = None,
    ) -> Any:
        """Return a FastAPI ``FileResponse`` backed by a temp file removed after sending."""
        from csv_export.adapters.fastapi.responses import download_response  # noqa: PLC0415

        with self._consume(config) as cfg:
            exporter = self.source(source)
            temp_path = self._temp_path()
            try:
                self._write_file(exporter, temp_path, cfg)
            except BaseException:
                temp_path.unlink(missing_ok=True)
                raise
        return download_response(temp_path, filename)

    def store(
        self,
        source: ExportSource | str,
        path: str,
        disk: str | None = None,
        config: ExportConfig | None = None,
    ) -> str:
        """Export to a temp file, upload it to *disk* at *path*, return *path*.

        The temp file is removed whether or not the upload succeeds.
        """
        with self._consume(config) as cfg:
            disk_name = disk or self._storage.default
            backend = self._storage.disk(disk_name)
            exporter = self.source(source)
            temp_path = self._temp_path()
            try:
                with bind_export_context(delivery="storage", disk=disk_name, path=path):
                    self._pipeline.run(exporter, open_file_sink(temp_path), cfg)
                    try:
                        contents = temp_path.read_bytes()
                    except OSError as exc:
                        raise IOFailure(
                            "Failed to read temporary CSV contents", path=str(temp_path), cause=exc
                        ) from exc

                    if not backend.put(path, contents):
                        raise IOFailure(
                            f"Failed to store CSV to disk: {disk_name} at path: {path}",
                            path=path,
                            detail={"disk": disk_name},
                        )
                    log.info("csv_export.stored", disk=disk_name, path=path, bytes=len(contents))
            finally:
                temp_path.unlink(missing_ok=True)
        return path

    def _write_file(self, exporter: ExportSource, target: Path, cfg: ExportConfig) -> Path:
        with bind_export_context(delivery="file", path=str(target)):
            self._pipeline.run(exporter, open_file_sink(target), cfg)
        return target

    def _temp_path(self) -> Path:
        directory = Path(self._settings.temp_directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(prefix="csv_", suffix=".csv", dir=directory)
        except OSError as exc:
            raise IOFailure("Unable to create temporary CSV file", path=str(directory), cause=exc) from exc
        os.close(fd)
        return Path(name)
