"""FastAPI adapter – CSV responses, export router and exception mapper."""
from csv_export.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from csv_export.adapters.fastapi.responses import (
    CSV_HEADERS,
    CSV_MEDIA_TYPE,
    csv_headers,
    download_response,
    stream_response,
)
from csv_export.adapters.fastapi.routers import FastAPIExportRouter, request_config

__all__ = [
    "CSV_HEADERS",
    "CSV_MEDIA_TYPE",
    "FastAPIExceptionMapper",
    "FastAPIExportRouter",
    "csv_headers",
    "download_response",
    "request_config",
    "stream_response",
]
