"""Observability – structured logging helpers."""
from csv_export.observability.logging.factory import JsonLoggerFactory
from csv_export.observability.logging.processors import (
    ExportContextProcessor,
    bind_export_context,
    get_logger,
)

__all__ = [
    "ExportContextProcessor",
    "JsonLoggerFactory",
    "bind_export_context",
    "get_logger",
]
