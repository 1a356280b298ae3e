"""Application export – row providers.

A source's ``query()`` yields one of two shapes, modelled as a tagged
variant with a :class:`ProviderKind`:

* :class:`PaginatedRows` wraps a lazily paginated query; the row cap is
  pushed down into the query before the first fetch.
* :class:`MaterializedRows` wraps rows that are already in memory; the cap
  truncates and batching slices consecutive windows.

Both keep source order.
"""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum
from typing import Any, ClassVar, Iterable, Iterator, Protocol, Sequence, runtime_checkable

from csv_export.kernel.errors import ConfigurationError

__all__ = [
    "MaterializedRows",
    "PaginatedQuery",
    "PaginatedRows",
    "ProviderKind",
    "RowProvider",
    "as_row_provider",
]


class ProviderKind(str, Enum):
    PAGINATED = "paginated"
    MATERIALIZED = "materialized"


@runtime_checkable
class PaginatedQuery(Protocol):
    """Port: a query that can be capped and fetched page by page."""

    def limit(self, count: int) -> "PaginatedQuery":
        """Return a query that yields at most *count* rows in total."""
        ...

    def chunks(self, size: int) -> Iterator[Sequence[Any]]:
        """Fetch successive pages of at most *size* rows, in query order."""
        ...


class RowProvider(abc.ABC):
    kind: ClassVar[ProviderKind]

    @abc.abstractmethod
    def limit(self, count: int) -> "RowProvider": ...

    @abc.abstractmethod
    def batches(self, size: int) -> Iterator[list[Any]]: ...


@dataclasses.dataclass(frozen=True)
class PaginatedRows(RowProvider):
    query: PaginatedQuery

    kind: ClassVar[ProviderKind] = ProviderKind.PAGINATED

    def limit(self, count: int) -> "PaginatedRows":
        return PaginatedRows(self.query.limit(count))

    def batches(self, size: int) -> Iterator[list[Any]]:
        for chunk in self.query.chunks(size):
            if chunk:
                yield list(chunk)


@dataclasses.dataclass(frozen=True)
class MaterializedRows(RowProvider):
    rows: Sequence[Any]

    kind: ClassVar[ProviderKind] = ProviderKind.MATERIALIZED

    def limit(self, count: int) -> "MaterializedRows":
        return MaterializedRows(self.rows[:count])

    def batches(self, size: int) -> Iterator[list[Any]]:
        for start in range(0, len(self.rows), size):
            yield list(self.rows[start:start + size])

    def __len__(self) -> int:
        return len(self.rows)


def as_row_provider(value: Any) -> RowProvider:
    """Normalise whatever ``ExportSource.query()`` returned."""
    if isinstance(value, RowProvider):
        return value
    if isinstance(value, PaginatedQuery):
        return PaginatedRows(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"query() must return rows or a paginated query, got {type(value).__name__}"
        )
    if isinstance(value, Sequence):
        return MaterializedRows(value)
    return MaterializedRows(list(value))
