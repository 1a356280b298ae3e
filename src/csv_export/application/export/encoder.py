"""Application export – CsvEncoder."""
from __future__ import annotations

import csv
import io
from typing import Any, BinaryIO, Sequence

from csv_export.kernel.errors import ConfigurationError, IOFailure
from csv_export.observability.logging import get_logger

__all__ = ["BOM", "CsvEncoder"]

BOM = b"\xef\xbb\xbf"

log = get_logger(__name__)


class CsvEncoder:
    """Writes CSV records as encoded bytes to a binary sink.

    Each record is formatted by the stdlib :mod:`csv` writer into a
    one-record scratch buffer and written straight through to the sink, so
    nothing beyond the current row is held in memory.

    A field is enclosed when it contains the delimiter, the enclosure, the
    escape character or a line break. Embedded enclosures are doubled and the
    escape character is written as-is, never inserted.

    Once :meth:`close` has run every write method is a no-op.
    """

    def __init__(
        self,
        sink: BinaryIO,
        *,
        delimiter: str = ",",
        enclosure: str = '"',
        escape: str = "\\",
        line_terminator: str = "\n",
        encoding: str = "utf-8",
    ) -> None:
        if sink is None or not callable(getattr(sink, "write", None)):
            raise ConfigurationError("CsvEncoder expects a writable binary sink")
        if getattr(sink, "closed", False):
            raise ConfigurationError("CsvEncoder was given a closed sink")

        self._sink: BinaryIO | None = sink
        self._encoding = encoding
        self._line_terminator = line_terminator
        # The writer encloses any field holding a character of its record
        # terminator; it is replaced by the real one after each row.
        self._record_end = "".join(dict.fromkeys("\r\n" + line_terminator + (escape or "")))
        self._buffer = io.StringIO()
        self._writer = csv.writer(
            self._buffer,
            delimiter=delimiter,
            quotechar=enclosure,
            escapechar=None,
            doublequote=True,
            lineterminator=self._record_end,
            quoting=csv.QUOTE_MINIMAL,
        )
        self.rows_written = 0
        self.bytes_written = 0

    @property
    def closed(self) -> bool:
        return self._sink is None

    def write_bom(self) -> None:
        """Write the UTF-8 byte-order mark."""
        if self._sink is None:
            return
        self._write(BOM)

    def write_row(self, values: Sequence[Any]) -> None:
        """Serialise *values* as one CSV record. ``None`` becomes an empty field."""
        if self._sink is None:
            return
        self._writer.writerow(values)
        record = self._buffer.getvalue()[: -len(self._record_end)] + self._line_terminator
        data = record.encode(self._encoding)
        self._buffer.seek(0)
        self._buffer.truncate(0)
        self._write(data)
        self.rows_written += 1

    def close(self) -> None:
        """Flush and release the sink. Safe to call more than once."""
        sink, self._sink = self._sink, None
        if sink is None:
            return
        try:
            try:
                sink.flush()
            finally:
                sink.close()
        except OSError as exc:
            raise IOFailure("Failed to close CSV sink", cause=exc) from exc

    def abort(self) -> None:
        """Close after a failed run without masking the error in flight."""
        try:
            self.close()
        except IOFailure as exc:
            log.warning("csv_encoder.close_failed", error=str(exc))

    def _write(self, data: bytes) -> None:
        assert self._sink is not None
        try:
            self._sink.write(data)
        except OSError as exc:
            raise IOFailure("Failed to write to CSV sink", cause=exc) from exc
        self.bytes_written += len(data)
