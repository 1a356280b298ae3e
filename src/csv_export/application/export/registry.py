"""Application export – SourceRegistry.

Maps identifiers to export-source factories so that callers (HTTP routes,
jobs) can ask for an export by name::

    registry = SourceRegistry()

    @registry.register("users")
    class UserExporter(BaseExporter):
        ...

    registry.resolve("users")                      # -> UserExporter()
    trusted = SourceRegistry(allow_imports=True)
    trusted.resolve("app.exports:OrderExporter")   # imported on demand
"""
from __future__ import annotations

import importlib
from typing import Any, Callable, TypeVar

from csv_export.application.export.source import ExportSource
from csv_export.kernel.errors import ConfigurationError, NotFoundError

__all__ = ["SourceFactory", "SourceRegistry"]

SourceFactory = Callable[[], ExportSource]
F = TypeVar("F", bound=Callable[..., Any])


class SourceRegistry:
    """Resolves identifiers to fresh :class:`ExportSource` instances.

    Unregistered ``module:attr`` paths are only imported when *allow_imports*
    is set; keep it off wherever names come from untrusted input.
    """

    def __init__(self, *, allow_imports: bool = False) -> None:
        self._factories: dict[str, SourceFactory] = {}
        self._allow_imports = allow_imports

    def register(self, name: str, factory: SourceFactory | None = None) -> Any:
        """Register *factory* under *name*; without *factory*, act as a decorator."""
        if factory is None:
            def decorator(fn: F) -> F:
                self._factories[name] = fn
                return fn
            return decorator
        self._factories[name] = factory
        return factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def resolve(self, name: str) -> ExportSource:
        factory = self._factories.get(name)
        if factory is None:
            if not (self._allow_imports and _looks_importable(name)):
                raise NotFoundError("Export source", name)
            factory = _import_factory(name)
        source = factory()
        if not isinstance(source, ExportSource):
            raise ConfigurationError(
                f"Factory for '{name}' returned {type(source).__name__}, not an export source"
            )
        return source


def _looks_importable(name: str) -> bool:
    return ":" in name or "." in name


def _import_factory(path: str) -> SourceFactory:
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        raise NotFoundError("Export source", path) from None
    factory = getattr(module, attr, None)
    if factory is None or not callable(factory):
        raise NotFoundError("Export source", path)
    return factory
