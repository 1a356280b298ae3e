"""Testing fixtures – pytest fixtures for export doubles."""
try:
    import pytest  # noqa: F401

    from csv_export.testing.fixtures.storage import (
        export_service,
        export_settings,
        memory_storage,
    )

except ImportError:
    pass

__all__ = [
    "export_service",
    "export_settings",
    "memory_storage",
]
