"""Application export – ExportPipeline.

One run: resolve settings, write the optional BOM and heading row, pull rows
from the source in fixed-size batches, map each row and encode it. The sink
handed to :meth:`ExportPipeline.run` belongs to the pipeline from then on and
is closed exactly once, whatever happens.
"""
from __future__ import annotations

import dataclasses
import time
from typing import BinaryIO, Iterator

from csv_export.application.export.config import ExportConfig, ResolvedExportConfig
from csv_export.application.export.encoder import CsvEncoder
from csv_export.application.export.rows import as_row_provider
from csv_export.application.export.sinks import SpoolSink
from csv_export.application.export.source import ExportSource
from csv_export.config.settings import ExportSettings
from csv_export.observability.logging import get_logger

__all__ = ["ExportPipeline", "ExportResult"]

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ExportResult:
    """What a finished run wrote."""

    rows: int
    batches: int
    bytes_written: int
    config: ResolvedExportConfig


@dataclasses.dataclass
class _Progress:
    rows: int = 0
    batches: int = 0


class ExportPipeline:
    """Streams an :class:`ExportSource` into a CSV sink.

    The pipeline keeps no per-run state: overrides arrive as the ``config``
    argument of each call, so one instance can serve concurrent callers.
    """

    def __init__(self, settings: ExportSettings | None = None) -> None:
        self._settings = settings or ExportSettings()

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    def resolve(self, source: ExportSource, config: ExportConfig | None = None) -> ResolvedExportConfig:
        return (config or ExportConfig()).resolve(source.defaults())

    def encoder(self, sink: BinaryIO) -> CsvEncoder:
        s = self._settings
        return CsvEncoder(
            sink,
            delimiter=s.delimiter,
            enclosure=s.enclosure,
            escape=s.escape,
            line_terminator=s.line_terminator,
            encoding=s.encoding,
        )

    def run(
        self,
        source: ExportSource,
        sink: BinaryIO,
        config: ExportConfig | None = None,
    ) -> ExportResult:
        """Write the whole export into *sink* and close it."""
        encoder = self.encoder(sink)
        source_name = type(source).__name__
        progress = _Progress()
        started = time.monotonic()
        try:
            resolved = self.resolve(source, config)
            log.debug("csv_export.started", source=source_name, **dataclasses.asdict(resolved))
            for _ in self._drive(source, encoder, resolved, progress):
                pass
        except BaseException as exc:
            encoder.abort()
            log.warning(
                "csv_export.failed",
                source=source_name,
                rows=progress.rows,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
        encoder.close()

        result = ExportResult(
            rows=progress.rows,
            batches=progress.batches,
            bytes_written=encoder.bytes_written,
            config=resolved,
        )
        log.info(
            "csv_export.completed",
            source=source_name,
            rows=result.rows,
            batches=result.batches,
            bytes=result.bytes_written,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )
        return result

    def stream(self, source: ExportSource, config: ExportConfig | None = None) -> Iterator[bytes]:
        """Yield the export as byte chunks: one after the header, one per batch.

        Closing the generator early (e.g. the client went away) still closes
        the underlying sink.
        """
        spool = SpoolSink()
        encoder = self.encoder(spool)
        source_name = type(source).__name__
        progress = _Progress()
        try:
            resolved = self.resolve(source, config)
            for _ in self._drive(source, encoder, resolved, progress):
                chunk = spool.drain()
                if chunk:
                    yield chunk
            tail = spool.drain()
            if tail:
                yield tail
        except GeneratorExit:
            encoder.abort()
            log.info("csv_export.stream_abandoned", source=source_name, rows=progress.rows)
            raise
        except BaseException as exc:
            encoder.abort()
            log.warning(
                "csv_export.failed",
                source=source_name,
                rows=progress.rows,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
        encoder.close()
        log.info(
            "csv_export.completed",
            source=source_name,
            rows=progress.rows,
            batches=progress.batches,
            bytes=encoder.bytes_written,
        )

    def _drive(
        self,
        source: ExportSource,
        encoder: CsvEncoder,
        resolved: ResolvedExportConfig,
        progress: _Progress,
    ) -> Iterator[None]:
        """Run the export, pausing after the header and after every batch."""
        if resolved.bom_enabled:
            encoder.write_bom()

        headings = list(source.headings())
        if headings:
            encoder.write_row(headings)
        yield None

        provider = as_row_provider(source.query())
        cap = resolved.effective_row_cap
        if cap is not None:
            provider = provider.limit(cap)

        for batch in provider.batches(resolved.batch_size):
            for row in batch:
                if cap is not None and progress.rows >= cap:
                    return
                encoder.write_row(source.map(row))
                progress.rows += 1
            progress.batches += 1
            yield None
