"""SQLAlchemy adapter – SqlAlchemyPaginatedQuery."""
from __future__ import annotations

from typing import Any, Iterator, Sequence


def _require_sqlalchemy() -> None:
    try:
        import sqlalchemy  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'csv-export[sqlalchemy]' to use the SQLAlchemy adapter") from exc


class SqlAlchemyPaginatedQuery:
    """Pages through a 2.0-style ``Select`` with ``LIMIT``/``OFFSET``.

    Give the statement an ``ORDER BY``; without one the database is free to
    return pages in any order and rows may repeat or go missing between
    pages. Any limit/offset already on the statement is replaced.

    Parameters
    ----------
    session:
        A synchronous :class:`sqlalchemy.orm.Session` (or a ``Connection``).
    statement:
        The ``select()`` to page through.
    scalars:
        Yield the first column of each row (ORM entities for
        ``select(Model)``) instead of ``Row`` tuples.
    """

    def __init__(
        self,
        session: Any,
        statement: Any,
        *,
        scalars: bool = True,
        max_rows: int | None = None,
    ) -> None:
        _require_sqlalchemy()
        self._session = session
        self._statement = statement
        self._scalars = scalars
        self._max_rows = max_rows

    @property
    def max_rows(self) -> int | None:
        return self._max_rows

    def limit(self, count: int) -> "SqlAlchemyPaginatedQuery":
        cap = count if self._max_rows is None else min(count, self._max_rows)
        return SqlAlchemyPaginatedQuery(
            self._session, self._statement, scalars=self._scalars, max_rows=cap
        )

    def chunks(self, size: int) -> Iterator[Sequence[Any]]:
        if size < 1:
            raise ValueError("chunk size must be >= 1")
        offset = 0
        while True:
            page_size = size
            if self._max_rows is not None:
                page_size = min(size, self._max_rows - offset)
                if page_size <= 0:
                    return
            rows = self._fetch(offset, page_size)
            if not rows:
                return
            yield rows
            if len(rows) < page_size:
                return
            offset += len(rows)

    def _fetch(self, offset: int, page_size: int) -> list[Any]:
        result = self._session.execute(self._statement.limit(page_size).offset(offset))
        if self._scalars:
            return list(result.scalars().all())
        return list(result.all())


__all__ = ["SqlAlchemyPaginatedQuery"]
