"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigurationError
    ├── DomainError          (domain.py)
    │   ├── NotFoundError
    │   └── SourceError
    └── InfrastructureError  (infrastructure.py)
        └── IOFailure
"""

from csv_export.kernel.errors.application import ApplicationError, ConfigurationError
from csv_export.kernel.errors.base import BaseError
from csv_export.kernel.errors.domain import DomainError, NotFoundError, SourceError
from csv_export.kernel.errors.infrastructure import InfrastructureError, IOFailure

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
