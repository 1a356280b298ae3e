"""Unit tests for row providers."""
from __future__ import annotations

import pytest

from csv_export.application.export import (
    MaterializedRows,
    PaginatedQuery,
    PaginatedRows,
    ProviderKind,
    as_row_provider,
)
from csv_export.kernel.errors import ConfigurationError
from csv_export.testing.fakes import FakePaginatedQuery


# ---------------------------------------------------------------------------
# MaterializedRows
# ---------------------------------------------------------------------------
class TestMaterializedRows:
    def test_kind(self) -> None:
        assert MaterializedRows([]).kind is ProviderKind.MATERIALIZED

    def test_batches_slice_in_order(self) -> None:
        rows = MaterializedRows(list(range(7)))
        assert list(rows.batches(3)) == [[0, 1, 2], [3, 4, 5], [6]]

    def test_limit_truncates(self) -> None:
        rows = MaterializedRows(list(range(7))).limit(4)
        assert len(rows) == 4
        assert list(rows.batches(10)) == [[0, 1, 2, 3]]

    def test_limit_larger_than_rows(self) -> None:
        assert len(MaterializedRows([1, 2]).limit(10)) == 2

    def test_empty(self) -> None:
        assert list(MaterializedRows([]).batches(5)) == []


# ---------------------------------------------------------------------------
# PaginatedRows
# ---------------------------------------------------------------------------
class TestPaginatedRows:
    def test_kind(self) -> None:
        assert PaginatedRows(FakePaginatedQuery([])).kind is ProviderKind.PAGINATED

    def test_limit_pushed_into_query(self) -> None:
        query = FakePaginatedQuery(list(range(10)))
        rows = PaginatedRows(query).limit(4)
        assert query.limits == [4]
        assert [r for batch in rows.batches(3) for r in batch] == [0, 1, 2, 3]

    def test_pages_requested_with_batch_size(self) -> None:
        query = FakePaginatedQuery(list(range(5)))
        batches = list(PaginatedRows(query).batches(2))
        assert batches == [[0, 1], [2, 3], [4]]
        assert query.pages == [2, 2, 1]

    def test_empty_pages_skipped(self) -> None:
        class _Query:
            def limit(self, count):
                return self

            def chunks(self, size):
                yield []
                yield [1]
                yield ()

        assert list(PaginatedRows(_Query()).batches(10)) == [[1]]


# ---------------------------------------------------------------------------
# as_row_provider
# ---------------------------------------------------------------------------
class TestAsRowProvider:
    def test_list_becomes_materialized(self) -> None:
        provider = as_row_provider([1, 2])
        assert isinstance(provider, MaterializedRows)
        assert provider.rows == [1, 2]

    def test_generator_is_materialized(self) -> None:
        provider = as_row_provider(x for x in range(3))
        assert isinstance(provider, MaterializedRows)
        assert list(provider.rows) == [0, 1, 2]

    def test_paginated_query_is_wrapped(self) -> None:
        query = FakePaginatedQuery([1])
        assert isinstance(query, PaginatedQuery)
        provider = as_row_provider(query)
        assert isinstance(provider, PaginatedRows)
        assert provider.query is query

    def test_provider_passes_through(self) -> None:
        provider = MaterializedRows([1])
        assert as_row_provider(provider) is provider

    @pytest.mark.parametrize("value", [None, 42, "rows", b"rows"])
    def test_unusable_values_rejected(self, value) -> None:
        with pytest.raises(ConfigurationError):
            as_row_provider(value)
