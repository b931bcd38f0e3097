"""Clause-level SQL builders.

Each class handles exactly one clause.  Builders never raise for bad
request data: whatever cannot be used is reported to the shared
:class:`~pagesql.compile.context.RuntimeContext` and left out.

Classes
-------
ColumnResolver       - request column → safe SQL identifier
SearchClauseBuilder  - per-column ``AND`` group and global ``OR`` group
DateClauseBuilder    - ``BETWEEN`` / ``>=`` / ``<=`` on the date column
WhereClauseBuilder   - ``WHERE (search) AND (where_and_sql) AND (date)``
OrderClauseBuilder   - ``ORDER BY <col> <DIR>, ...``
"""
from __future__ import annotations

import logging
import re

from pagesql.compile.context import CompilationContext, RuntimeContext
from pagesql.compile.sanitize import sanitize
from pagesql.schema.request import ColumnRequest, DataTableRequest
from pagesql.schema.table import iso_timestamp

logger = logging.getLogger(__name__)

# Plain, optionally table-qualified identifier.
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]*(\.[A-Za-z_][A-Za-z0-9_$]*)*$")

_DIRECTIONS = frozenset({"ASC", "DESC"})


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


class ColumnResolver:
    """Turns request-supplied column names into SQL identifiers.

    Column names arrive from the client, so only plain identifiers are
    interpolated.  Anything else is treated as unresolvable.
    """

    def __init__(self, runtime: RuntimeContext) -> None:
        self._runtime = runtime

    def resolve(self, index: int, column: ColumnRequest) -> str | None:
        name = column.column_name
        if not name:
            self._runtime.skip(f"columns[{index}].name", "column has no name")
            return None
        if not is_identifier(name):
            self._runtime.skip(f"columns[{index}].name", "not a plain SQL identifier")
            return None
        return name


class SearchClauseBuilder:
    """Builds the search part of the WHERE clause.

    Two independent groups are produced:

    * column-scoped: every searchable request column with its own search
      value contributes one predicate; predicates are AND-ed.
    * global: the global search value is matched against
      ``config.search_columns`` when configured, otherwise against every
      searchable request column; predicates are OR-ed.

    When both groups exist they are parenthesised and AND-ed.
    """

    def __init__(self, ctx: CompilationContext, runtime: RuntimeContext) -> None:
        self._ctx = ctx
        self._runtime = runtime
        self._columns = ColumnResolver(runtime)

    def build(self, request: DataTableRequest, global_value: str | None) -> str | None:
        scoped = self._column_group(request)
        everywhere = self._global_group(request, global_value)
        if scoped and everywhere:
            return f"({' AND '.join(scoped)}) AND ({' OR '.join(everywhere)})"
        if scoped:
            return " AND ".join(scoped)
        if everywhere:
            return " OR ".join(everywhere)
        return None

    def _column_group(self, request: DataTableRequest) -> list[str]:
        compiler = self._ctx.compiler
        predicates: list[str] = []
        for idx, column in enumerate(request.columns):
            if not column.searchable:
                continue
            raw = column.search.value
            value = sanitize(raw, self._ctx.config.max_search_length)
            if value is None and raw not in (None, ""):
                self._runtime.skip(f"columns[{idx}].search.value", "rejected by sanitizer")
            if not value:
                continue
            name = self._columns.resolve(idx, column)
            if name:
                predicates.append(compiler.search_predicate(name, value))
        return predicates

    def _global_group(self, request: DataTableRequest, value: str | None) -> list[str]:
        if not value:
            return []
        compiler = self._ctx.compiler
        if self._ctx.config.search_columns is not None:
            names = list(self._ctx.config.search_columns)
        else:
            names = [
                self._columns.resolve(idx, column)
                for idx, column in enumerate(request.columns)
                if column.searchable
            ]
        return [compiler.search_predicate(name, value) for name in names if name]


class DateClauseBuilder:
    """Builds the date-range condition from the table configuration."""

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    def build(self) -> str | None:
        config = self._ctx.config
        if not config.has_date_range:
            return None
        logger.debug(
            "Date range on %s: %s to %s",
            config.date_column,
            config.date_from,
            config.date_to,
        )
        if config.date_from and config.date_to:
            return (
                f"{config.date_column} BETWEEN '{iso_timestamp(config.date_from)}' "
                f"AND '{iso_timestamp(config.date_to)}'"
            )
        if config.date_from:
            return f"{config.date_column} >= '{iso_timestamp(config.date_from)}'"
        return f"{config.date_column} <= '{iso_timestamp(config.date_to)}'"  # type: ignore[arg-type]


class WhereClauseBuilder:
    """Builds `` WHERE (search) AND (where_and_sql) AND (date)``.

    Absent parts are dropped; with no parts the clause is empty.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx
        self._date = DateClauseBuilder(ctx)

    def build(self, search_sql: str | None = None) -> str:
        parts = [search_sql, self._ctx.config.where_and_sql, self._date.build()]
        present = [part for part in parts if part]
        if not present:
            return ""
        return " WHERE (" + ") AND (".join(present) + ")"


class OrderClauseBuilder:
    """Builds `` ORDER BY ...`` from the request's ``order`` list.

    Entries are applied in request order (the first is the primary sort
    key).  An entry is used only when it points at an existing, orderable,
    named column and has an ``asc``/``desc`` direction.
    """

    def __init__(self, ctx: CompilationContext, runtime: RuntimeContext) -> None:
        self._ctx = ctx
        self._runtime = runtime

    def build(self, request: DataTableRequest) -> str:
        terms: list[str] = []
        for pos, entry in enumerate(request.order):
            term = self._term(pos, entry.column, entry.direction, request)
            if term:
                terms.append(term)
        if not terms:
            return ""
        return " ORDER BY " + ", ".join(terms)

    def _term(
        self,
        pos: int,
        index: int | None,
        direction: str,
        request: DataTableRequest,
    ) -> str | None:
        if index is None or not 0 <= index < len(request.columns):
            self._runtime.skip(f"order[{pos}].column", "no such column")
            return None
        column = request.columns[index]
        if not column.orderable:
            self._runtime.skip(f"order[{pos}].column", "column is not orderable")
            return None
        expr = self._expression(index, column)
        if expr is None:
            return None
        keyword = direction.strip().upper()
        if keyword not in _DIRECTIONS:
            self._runtime.skip(f"order[{pos}].dir", "unknown sort direction")
            return None
        return f"{expr} {keyword}"

    def _expression(self, index: int, column: ColumnRequest) -> str | None:
        override = self._ctx.config.order_columns.get(column.column_name or "")
        if override:
            return override
        return ColumnResolver(self._runtime).resolve(index, column)
