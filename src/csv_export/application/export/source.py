"""Application export – ExportSource port and BaseExporter.

Concrete exports subclass :class:`BaseExporter`::

    class UserExporter(BaseExporter):
        max_limit = 50_000

        def query(self):
            return SqlAlchemyPaginatedQuery(session, select(User).order_by(User.id))

        def headings(self):
            return ["ID", "Email"]

        def map(self, row):
            return [row.id, row.email]
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Protocol, Sequence, runtime_checkable

from csv_export.kernel.errors import ConfigurationError

__all__ = ["BaseExporter", "ExportSource", "SourceDefaults"]

DEFAULT_BATCH_SIZE = 1000
DEFAULT_ROW_CAP = 10_000


def _check_batch_size(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"batch size must be a positive integer, got {value!r}")
    return value


def _check_row_cap(value: int | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"row cap must be a positive integer or None, got {value!r}")
    return value


@dataclasses.dataclass(frozen=True)
class SourceDefaults:
    """Tuning every source supplies; per-run overrides take precedence."""

    batch_size: int = DEFAULT_BATCH_SIZE
    row_cap: int | None = DEFAULT_ROW_CAP
    row_cap_enabled: bool = True
    bom_enabled: bool = False

    def __post_init__(self) -> None:
        _check_batch_size(self.batch_size)
        _check_row_cap(self.row_cap)


@runtime_checkable
class ExportSource(Protocol):
    """Port: provides headings, rows and the row-to-values mapping."""

    def headings(self) -> Sequence[str]: ...

    def query(self) -> Any: ...

    def map(self, row: Any) -> Sequence[Any]: ...

    def defaults(self) -> SourceDefaults: ...


class BaseExporter(abc.ABC):
    """Base class for export sources.

    Class attributes hold the source's own defaults; the fluent setters
    change them for a single instance.
    """

    chunk_size: int = DEFAULT_BATCH_SIZE
    max_limit: int | None = DEFAULT_ROW_CAP
    use_max_limit: bool = True
    include_bom: bool = False

    @abc.abstractmethod
    def query(self) -> Any:
        """Return a :class:`PaginatedQuery`, a row provider, or an iterable of rows."""

    def headings(self) -> Sequence[str]:
        return []

    def map(self, row: Any) -> Sequence[Any]:
        return []

    def defaults(self) -> SourceDefaults:
        return SourceDefaults(
            batch_size=self.chunk_size,
            row_cap=self.max_limit,
            row_cap_enabled=self.use_max_limit,
            bom_enabled=self.include_bom,
        )

    def set_chunk_size(self, chunk_size: int = DEFAULT_BATCH_SIZE) -> "BaseExporter":
        self.chunk_size = _check_batch_size(chunk_size)
        return self

    def set_max_limit(self, max_limit: int | None = DEFAULT_ROW_CAP) -> "BaseExporter":
        self.max_limit = _check_row_cap(max_limit)
        return self

    def set_use_max_limit(self, use_max_limit: bool) -> "BaseExporter":
        self.use_max_limit = bool(use_max_limit)
        return self

    def include_bom_mark(self, include: bool = True) -> "BaseExporter":
        self.include_bom = bool(include)
        return self
