"""Kernel – framework-agnostic building blocks."""

from csv_export.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DomainError,
    InfrastructureError,
    IOFailure,
    NotFoundError,
    SourceError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DomainError",
    "IOFailure",
    "InfrastructureError",
    "NotFoundError",
    "SourceError",
]
