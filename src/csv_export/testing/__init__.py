"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["csv_export.testing.fixtures"]
"""

from csv_export.testing.fakes import FakePaginatedQuery, InMemoryStorage, ListExporter

__all__ = [
    "FakePaginatedQuery",
    "InMemoryStorage",
    "ListExporter",
]
