"""SQLAlchemy adapter – paginated queries for export sources."""
from csv_export.adapters.sqlalchemy.query import SqlAlchemyPaginatedQuery

__all__ = ["SqlAlchemyPaginatedQuery"]
