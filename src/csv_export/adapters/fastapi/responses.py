"""FastAPI adapter – CSV response builders."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'csv-export[fastapi]' to use the FastAPI adapter"
        ) from exc


CSV_MEDIA_TYPE = "text/csv; charset=UTF-8"

CSV_HEADERS: dict[str, str] = {
    "Cache-Control": "must-revalidate, post-check=0, pre-check=0",
    "Expires": "0",
    "Pragma": "public",
    "Access-Control-Expose-Headers": "Content-Disposition",
}


def csv_headers(filename: str) -> dict[str, str]:
    """Non-cacheable download headers for *filename*."""
    safe = filename.replace('"', "").replace("\r", "").replace("\n", "")
    return {
        **CSV_HEADERS,
        "Content-Disposition": f'attachment; filename="{safe}"',
    }


def stream_response(body: Iterable[bytes], filename: str) -> Any:
    """Wrap a lazy CSV body in a ``StreamingResponse``.

    A sync iterator is drained in Starlette's threadpool, so blocking row
    fetches do not stall the event loop.
    """
    _require_fastapi()
    from fastapi.responses import StreamingResponse  # type: ignore[import-untyped]

    return StreamingResponse(
        content=body,
        media_type=CSV_MEDIA_TYPE,
        headers=csv_headers(filename),
    )


def download_response(path: str | os.PathLike[str], filename: str, *, delete_after: bool = True) -> Any:
    """Serve a finished CSV file; by default the file is deleted once sent."""
    _require_fastapi()
    from fastapi.responses import FileResponse  # type: ignore[import-untyped]
    from starlette.background import BackgroundTask  # type: ignore[import-untyped]

    target = Path(path)
    background = BackgroundTask(target.unlink, missing_ok=True) if delete_after else None
    return FileResponse(
        target,
        media_type=CSV_MEDIA_TYPE,
        headers=csv_headers(filename),
        background=background,
    )


__all__ = [
    "CSV_HEADERS",
    "CSV_MEDIA_TYPE",
    "csv_headers",
    "download_response",
    "stream_response",
]
