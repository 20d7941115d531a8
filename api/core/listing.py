"""
Filtered, paginated, counted listing queries.

A listing starts from a base SELECT that already ends in a WHERE clause
(`WHERE 1=1` when there is nothing to scope by). Optional equality filters are
appended as `AND column = $n`; the COUNT variant is derived from the filtered
text before ORDER BY / LIMIT / OFFSET are added, so the total ignores
pagination but sees exactly the same filter parameters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from fastapi import Query

from core import db

DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# The select list must not contain a nested FROM (no scalar subqueries).
_SELECT_CLAUSE = re.compile(r"^\s*SELECT\s.*?\sFROM\s", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class Page:
    limit: int
    offset: int


def _leading_int(raw: str | None) -> int:
    match = re.match(r"\s*([+-]?\d+)", raw or "")
    return int(match.group(1)) if match else 0


def paginate(page: str | None = None, limit: str | None = None) -> Page:
    """
    Clamp raw `page`/`limit` strings into a LIMIT/OFFSET pair.

    Unparseable or zero values fall back to page 1 and limit 20.
    """
    page_number = max(1, _leading_int(page) or 1)
    page_size = min(MAX_LIMIT, max(1, _leading_int(limit) or DEFAULT_LIMIT))
    return Page(limit=page_size, offset=(page_number - 1) * page_size)


def page_params(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> Page:
    return paginate(page, limit)


def count_sql(sql: str) -> str:
    counted, replaced = _SELECT_CLAUSE.subn("SELECT COUNT(*) FROM ", sql, count=1)
    if not replaced:
        raise ValueError("Listing query must start with a SELECT ... FROM clause.")
    return counted


def envelope(rows: list[dict[str, Any]], total: int, page: Page) -> dict[str, Any]:
    return {
        "data": rows,
        "total": total,
        "limit": page.limit,
        "offset": page.offset,
    }


class ListQuery:
    def __init__(self, base_sql: str, *params: Any) -> None:
        self.sql = base_sql.rstrip()
        self.params: list[Any] = list(params)

    def where(self, column: str, value: Any) -> "ListQuery":
        if value is None or value == "":
            return self
        self.params.append(value)
        self.sql += f" AND {column} = ${len(self.params)}"
        return self

    def count_sql(self) -> str:
        return count_sql(self.sql)

    def page_sql(self, order_by: str) -> str:
        n = len(self.params)
        return f"{self.sql} ORDER BY {order_by} LIMIT ${n + 1} OFFSET ${n + 2}"

    async def fetch_page(self, *, order_by: str, page: Page) -> dict[str, Any]:
        count_row = await db.fetch_one(self.count_sql(), *self.params)
        total = int(count_row["count"]) if count_row is not None else 0
        rows = await db.fetch_all(self.page_sql(order_by), *self.params, page.limit, page.offset)
        return envelope(rows, total, page)
