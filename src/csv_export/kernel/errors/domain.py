"""Domain errors – failures that belong to the data being exported."""

from __future__ import annotations

from typing import Any

from csv_export.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class SourceError(DomainError):
    """Convenience base for failures raised by an export source.

    The pipeline never wraps errors coming out of ``query()`` or ``map()``;
    sources may raise this (or anything else) and the caller receives it
    unchanged once cleanup has run.
    """

    default_code = "source_error"


__all__ = [
    "DomainError",
    "NotFoundError",
    "SourceError",
]
