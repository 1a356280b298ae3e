"""Application – export pipeline and storage (framework-agnostic)."""

from csv_export.application.export import (
    BaseExporter,
    CsvEncoder,
    CsvExportService,
    ExportConfig,
    ExportPipeline,
    ExportResult,
    ExportSource,
    SourceDefaults,
    SourceRegistry,
)
from csv_export.application.storage import LocalDiskStorage, StorageBackend, StorageManager

__all__ = [
    "BaseExporter",
    "CsvEncoder",
    "CsvExportService",
    "ExportConfig",
    "ExportPipeline",
    "ExportResult",
    "ExportSource",
    "LocalDiskStorage",
    "SourceDefaults",
    "SourceRegistry",
    "StorageBackend",
    "StorageManager",
]
