"""Infrastructure errors – sink and storage I/O failures."""

from __future__ import annotations

from typing import Any

from csv_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class IOFailure(InfrastructureError):
    """A sink could not be opened or written, or a storage upload was rejected."""

    default_code = "io_failure"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.detail.setdefault("path", path)


__all__ = [
    "IOFailure",
    "InfrastructureError",
]
