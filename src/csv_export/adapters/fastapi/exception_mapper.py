"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'csv-export[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Register csv-export error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "detail": {...}}

    Mappings
    --------
    ``NotFoundError``       → 404
    ``ConfigurationError``  → 500
    ``IOFailure``           → 503
    ``InfrastructureError`` → 503
    ``DomainError``         → 422
    """

    def __init__(self) -> None:
        _require_fastapi()
        from csv_export.kernel.errors import (
            ConfigurationError,
            DomainError,
            InfrastructureError,
            IOFailure,
            NotFoundError,
        )

        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (NotFoundError, 404),
            (ConfigurationError, 500),
            (IOFailure, 503),
            (InfrastructureError, 503),
            (DomainError, 422),
        ]

    def status_for(self, exc: BaseException) -> int | None:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return None

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        from csv_export.observability.logging import get_logger

        log = get_logger(__name__)

        def make_handler(code: int) -> Callable[[Any, Any], Any]:
            def handler(request: Any, exc: Any) -> Any:
                from csv_export.kernel.errors.base import BaseError

                if isinstance(exc, BaseError):
                    body = exc.to_dict()
                else:
                    body = {"code": "error", "message": str(exc)}
                if code >= 500:
                    log.error("http.export_failed", path=str(request.url.path), **body)
                return JSONResponse(status_code=code, content=body)

            return handler

        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
