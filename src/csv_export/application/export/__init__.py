"""Application export – streaming CSV export."""
from csv_export.application.export.config import UNSET, ExportConfig, ResolvedExportConfig
from csv_export.application.export.encoder import BOM, CsvEncoder
from csv_export.application.export.pipeline import ExportPipeline, ExportResult
from csv_export.application.export.registry import SourceFactory, SourceRegistry
from csv_export.application.export.rows import (
    MaterializedRows,
    PaginatedQuery,
    PaginatedRows,
    ProviderKind,
    RowProvider,
    as_row_provider,
)
from csv_export.application.export.service import CsvExportService
from csv_export.application.export.sinks import SpoolSink, open_file_sink
from csv_export.application.export.source import BaseExporter, ExportSource, SourceDefaults

__all__ = [
    "BOM",
    "BaseExporter",
    "CsvEncoder",
    "CsvExportService",
    "ExportConfig",
    "ExportPipeline",
    "ExportResult",
    "ExportSource",
    "MaterializedRows",
    "PaginatedQuery",
    "PaginatedRows",
    "ProviderKind",
    "ResolvedExportConfig",
    "RowProvider",
    "SourceDefaults",
    "SourceFactory",
    "SourceRegistry",
    "SpoolSink",
    "UNSET",
    "as_row_provider",
    "open_file_sink",
]
