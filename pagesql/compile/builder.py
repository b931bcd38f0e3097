"""Request parameters → statement map.

``StatementBuilder`` is the top-level orchestrator.  It resolves the
dialect strategy once, then for every request wires together the
clause builders and assembles the statements::

    changeDatabaseOrSchema   USE <db>;                       (database set)
    recordsTotal             SELECT COUNT(<col>) FROM <src> [WHERE static];
    recordsFiltered          SELECT COUNT(<col>) FROM <src> WHERE search...;
                                                             (global search set)
    select                   SELECT <list> FROM <src> [WHERE] [ORDER BY] [page];

"Static" conditions are ``where_and_sql`` and the date range; they apply
to every statement.  The search predicate applies to ``recordsFiltered``
and ``select`` only, so ``recordsTotal`` counts the unsearched universe.

Clause builders
---------------
StatementBuilder
  ├── SearchClauseBuilder  (clause_builders.py)
  ├── WhereClauseBuilder   (clause_builders.py)
  │     └── DateClauseBuilder
  └── OrderClauseBuilder   (clause_builders.py)
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pagesql.compile.base import DialectCompiler
from pagesql.compile.clause_builders import (
    OrderClauseBuilder,
    SearchClauseBuilder,
    WhereClauseBuilder,
)
from pagesql.compile.context import CompilationContext, RuntimeContext
from pagesql.compile.registry import DialectFactory
from pagesql.compile.sanitize import sanitize
from pagesql.schema.request import DataTableRequest
from pagesql.schema.statements import CompiledStatements, RequestContext, StatementKey
from pagesql.schema.table import TableConfig

logger = logging.getLogger(__name__)


class StatementBuilder:
    """Compiles per-request parameters into SQL for one table.

    A builder holds no per-request state and may be shared between
    threads.

    Args:
        config: The table configuration.
        compiler: Optional dialect compiler; defaults to the one registered
            for ``config.dialect``.
    """

    def __init__(
        self,
        config: TableConfig,
        compiler: DialectCompiler | None = None,
    ) -> None:
        self._ctx = CompilationContext(
            config=config,
            compiler=compiler or DialectFactory.create(config.dialect),
        )

    @property
    def dialect_name(self) -> str:
        return self._ctx.compiler.dialect_name

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, params: Any) -> CompiledStatements:
        """Compile ``params`` to a statement map.

        Args:
            params: Decoded request parameters (a mapping or a
                :class:`DataTableRequest`).

        Returns:
            :class:`CompiledStatements`.  When ``params`` cannot be used at
            all the statement map is empty and ``error`` is set; individual
            unusable fields are listed in ``skipped``.
        """
        try:
            request = DataTableRequest.parse(params)
        except ValidationError as exc:
            logger.warning("Unusable request parameters: %s", exc)
            return CompiledStatements(error=f"Invalid request parameters: {exc}")
        if request is None:
            logger.warning("Request parameters are not a mapping: %r", type(params))
            return CompiledStatements(error="Request parameters must be an object.")

        runtime = RuntimeContext()
        statements = self._build_statements(request, runtime)
        logger.debug(
            "Compiled %d statements for %s (%d fields skipped)",
            len(statements),
            self._ctx.config.source,
            len(runtime.skipped),
        )
        return CompiledStatements(
            statements=statements,
            context=RequestContext(
                draw=request.draw, start=request.start, length=request.length
            ),
            skipped=runtime.skipped,
        )

    # ------------------------------------------------------------------
    # Statement assembly
    # ------------------------------------------------------------------

    def _build_statements(
        self, request: DataTableRequest, runtime: RuntimeContext
    ) -> dict[str, str]:
        config = self._ctx.config
        compiler = self._ctx.compiler

        global_value = self._global_search(request, runtime)
        search_sql = SearchClauseBuilder(self._ctx, runtime).build(request, global_value)
        where = WhereClauseBuilder(self._ctx)
        searched_where = where.build(search_sql)

        statements: dict[str, str] = {}
        if config.database:
            statements[StatementKey.CHANGE_DATABASE_OR_SCHEMA] = _terminate(
                compiler.schema_switch(config.database)
            )
        statements[StatementKey.RECORDS_TOTAL] = self._count(where.build())
        if global_value:
            statements[StatementKey.RECORDS_FILTERED] = self._count(searched_where)

        select = f"SELECT {config.select_list} FROM {config.source}{searched_where}"
        select += OrderClauseBuilder(self._ctx, runtime).build(request)
        select = compiler.paginate(
            select, request.start, request.length, config.default_length
        )
        statements[StatementKey.SELECT] = _terminate(select)
        return statements

    def _count(self, where_sql: str) -> str:
        config = self._ctx.config
        return _terminate(f"SELECT COUNT({config.count_target}) FROM {config.source}{where_sql}")

    def _global_search(
        self, request: DataTableRequest, runtime: RuntimeContext
    ) -> str | None:
        raw = request.search.value
        value = sanitize(raw, self._ctx.config.max_search_length)
        if value is None and raw not in (None, ""):
            runtime.skip("search.value", "rejected by sanitizer")
        return value or None


def _terminate(sql: str) -> str:
    return f"{sql};"
