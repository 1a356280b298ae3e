"""Application export – sinks the pipeline writes into."""
from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO

from csv_export.kernel.errors import IOFailure

__all__ = ["SpoolSink", "open_file_sink"]


def open_file_sink(path: str | os.PathLike[str]) -> BinaryIO:
    """Open *path* for binary writing, creating missing parent directories.

    Nothing is left on disk when the open fails.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        return open(target, "wb")  # noqa: SIM115 – ownership passes to the caller
    except OSError as exc:
        raise IOFailure(f"Unable to open file for writing: {target}", path=str(target), cause=exc) from exc


class SpoolSink(io.BytesIO):
    """In-memory sink whose contents are handed off with :meth:`drain`."""

    def drain(self) -> bytes:
        """Return everything written since the previous drain and forget it."""
        if self.closed:
            return b""
        data = self.getvalue()
        self.seek(0)
        self.truncate(0)
        return data
