"""Observability – structured logging."""

from csv_export.observability.logging import ExportContextProcessor, JsonLoggerFactory, get_logger

__all__ = [
    "ExportContextProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
