"""Unit tests for SourceRegistry."""
from __future__ import annotations

import pytest

from csv_export.application.export import BaseExporter, ExportSource, SourceRegistry
from csv_export.kernel.errors import ConfigurationError, NotFoundError
from csv_export.testing.fakes import ListExporter


class TestSourceRegistry:
    def test_register_and_resolve(self) -> None:
        registry = SourceRegistry()
        registry.register("users", ListExporter)
        source = registry.resolve("users")
        assert isinstance(source, ListExporter)
        assert isinstance(source, ExportSource)

    def test_each_resolve_builds_a_new_source(self) -> None:
        registry = SourceRegistry()
        registry.register("users", ListExporter)
        assert registry.resolve("users") is not registry.resolve("users")

    def test_decorator_form(self) -> None:
        registry = SourceRegistry()

        @registry.register("orders")
        class OrderExporter(BaseExporter):
            def query(self):
                return []

        assert isinstance(registry.resolve("orders"), OrderExporter)
        assert OrderExporter.__name__ == "OrderExporter"

    def test_names_sorted(self) -> None:
        registry = SourceRegistry()
        registry.register("b", ListExporter)
        registry.register("a", ListExporter)
        assert registry.names() == ["a", "b"]
        assert "a" in registry

    def test_unregister(self) -> None:
        registry = SourceRegistry()
        registry.register("a", ListExporter)
        registry.unregister("a")
        registry.unregister("a")
        assert "a" not in registry

    def test_unknown_name(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            SourceRegistry().resolve("users")
        assert exc_info.value.identifier == "users"

    def test_factory_must_return_source(self) -> None:
        registry = SourceRegistry()
        registry.register("bad", object)
        with pytest.raises(ConfigurationError):
            registry.resolve("bad")


class TestImportableNames:
    @pytest.mark.parametrize(
        "name",
        ["csv_export.testing.fakes:ListExporter", "csv_export.testing.fakes.ListExporter"],
    )
    def test_import_path(self, name: str) -> None:
        assert isinstance(SourceRegistry(allow_imports=True).resolve(name), ListExporter)

    @pytest.mark.parametrize(
        "name",
        ["no_such_module_xyz:Exporter", "csv_export.testing.fakes:Missing"],
    )
    def test_unresolvable_import_path(self, name: str) -> None:
        with pytest.raises(NotFoundError):
            SourceRegistry(allow_imports=True).resolve(name)

    def test_imports_are_off_by_default(self) -> None:
        with pytest.raises(NotFoundError):
            SourceRegistry().resolve("csv_export.testing.fakes:ListExporter")
