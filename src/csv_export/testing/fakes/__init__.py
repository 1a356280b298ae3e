"""Testing fakes – in-memory doubles for export ports."""
from csv_export.testing.fakes.sources import FakePaginatedQuery, ListExporter
from csv_export.testing.fakes.storage import InMemoryStorage

__all__ = [
    "FakePaginatedQuery",
    "InMemoryStorage",
    "ListExporter",
]
