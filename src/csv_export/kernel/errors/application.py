"""Application-layer errors – misuse of the export API itself."""

from __future__ import annotations

from csv_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """The export was wired up incorrectly.

    Raised before anything is written: an unusable sink handle, an invalid
    override value, an unknown storage disk or a registry entry that does
    not produce an export source.
    """

    default_code = "configuration_error"


__all__ = ["ApplicationError", "ConfigurationError"]
