"""Page-based pagination of SQL queries using a window count."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, TypeVar

M = TypeVar("M")
T = TypeVar("T")
Q = TypeVar("Q")

DEFAULT_PER_PAGE = 10


@dataclass
class PageData(Generic[M]):
    """One page of records together with the totals across all pages."""

    records: list[M] = field(default_factory=list)
    total_pages: int = 0
    total_records: int = 0

    def format(self, func: Callable[[M], T]) -> PageData[T]:
        """A page with every record passed through ``func``."""
        return PageData(
            records=[func(record) for record in self.records],
            total_pages=self.total_pages,
            total_records=self.total_records,
        )


@dataclass(frozen=True)
class Paginated(Generic[Q]):
    """A query restricted to one page of results."""

    query: Q
    page: int
    per_page: int = DEFAULT_PER_PAGE

    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.per_page

    def with_per_page(self, per_page: int) -> Paginated[Q]:
        """The same page request with a different page size."""
        return replace(self, per_page=per_page)

    def to_sql(self, inner_sql: str) -> tuple[str, tuple[int, int]]:
        """Wrap ``inner_sql`` so each row carries the total row count.

        Returns the SQL text, with ``%s`` placeholders for the limit and
        offset, and the values for those placeholders.
        """
        sql = f"SELECT *, COUNT(*) OVER () FROM ({inner_sql}) t LIMIT %s OFFSET %s"
        return sql, (self.per_page, self.offset())

    def page_data(self, rows: Iterable[tuple[Any, int]]) -> PageData[Any]:
        """Build a page from ``(record, total_count)`` rows of the wrapped query."""
        rows = list(rows)
        total = rows[0][1] if rows else 0
        return PageData(
            records=[record for record, _ in rows],
            total_pages=math.ceil(total / self.per_page),
            total_records=total,
        )


def paginate(query: Q, page: int) -> Paginated[Q]:
    """Request ``page`` (1-based) of ``query`` with the default page size."""
    return Paginated(query=query, page=page)