"""
csv_export – streaming CSV exports for large datasets.

Import path convention::

    from csv_export.application.export import BaseExporter, CsvExportService, ExportConfig
    from csv_export.adapters.sqlalchemy import SqlAlchemyPaginatedQuery
    from csv_export.adapters.fastapi import FastAPIExportRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
