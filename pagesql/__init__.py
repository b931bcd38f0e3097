"""pageSQL – server-side SQL for paginated table UIs.

Turns a table UI's request (search text, per-column filters, sort order,
page offset/length) into count and select statements for one table or
view, and turns the executed results back into the UI's response
envelope.  pageSQL never executes SQL itself.

Public API
----------
``build_statements``
    Compile request parameters to a :class:`CompiledStatements` map.

``map_response``
    Map executed results to a :class:`DataTableResponse`.

Typical use::

    config = TableConfig(table_name="orders", dialect="postgres")
    compiled = pagesql.build_statements(config, request_params)
    results = {key: fetch_all(sql) for key, sql in compiled.statements.items()}
    response = pagesql.map_response(config, compiled, results)
    return response.to_dict()

Extensibility
-------------
New dialects can be registered via::

    from pagesql.compile.registry import DialectFactory

    @DialectFactory.register("mssql")
    class MSSQLCompiler(DialectCompiler):
        ...

After registration, ``TableConfig(dialect="mssql")`` picks it up.
"""

from __future__ import annotations

from typing import Any

from pagesql.compile.base import DialectCompiler
from pagesql.compile.builder import StatementBuilder
from pagesql.compile.default import DefaultCompiler
from pagesql.compile.oracle import OracleCompiler
from pagesql.compile.postgres import PostgresCompiler
from pagesql.compile.registry import DialectFactory
from pagesql.compile.sanitize import sanitize
from pagesql.errors import CompilationError, ConfigError, PageSQLError
from pagesql.respond.mapper import ResponseMapper
from pagesql.schema.request import (
    ColumnRequest,
    DataTableRequest,
    OrderRequest,
    SearchValue,
)
from pagesql.schema.response import DataTableResponse
from pagesql.schema.statements import (
    CompiledStatements,
    RequestContext,
    SkippedField,
    StatementKey,
)
from pagesql.schema.table import TableConfig

# ---------------------------------------------------------------------------
# Register built-in compilers with DialectFactory
# ---------------------------------------------------------------------------

DialectFactory.register_class("default", DefaultCompiler)
DialectFactory.register_class("mysql", DefaultCompiler)
DialectFactory.register_class("postgres", PostgresCompiler)
DialectFactory.register_class("oracle", OracleCompiler)

__all__ = [
    # Core pipeline
    "build_statements",
    "map_response",
    # Configuration
    "TableConfig",
    # Request / response
    "DataTableRequest",
    "ColumnRequest",
    "OrderRequest",
    "SearchValue",
    "DataTableResponse",
    # Statement map
    "CompiledStatements",
    "RequestContext",
    "SkippedField",
    "StatementKey",
    # Compilation
    "StatementBuilder",
    "DialectCompiler",
    "DialectFactory",
    "DefaultCompiler",
    "PostgresCompiler",
    "OracleCompiler",
    "sanitize",
    # Response mapping
    "ResponseMapper",
    # Errors
    "PageSQLError",
    "ConfigError",
    "CompilationError",
]


def build_statements(config: TableConfig, params: Any) -> CompiledStatements:
    """Compile one request's parameters to SQL statements.

    Args:
        config: The table configuration.
        params: Decoded request parameters, normally the parsed query string
            or JSON body sent by the table UI.

    Returns:
        ``CompiledStatements`` whose ``statements`` are keyed
        ``changeDatabaseOrSchema`` (if ``config.database`` is set),
        ``recordsTotal``, ``recordsFiltered`` (if a global search value was
        given) and ``select``, in execution order.  Never raises for bad
        request data; see ``skipped`` and ``error``.
    """
    return StatementBuilder(config).build(params)


def map_response(
    config: TableConfig,
    compiled: CompiledStatements,
    results: Any,
) -> DataTableResponse:
    """Map executed statement results to the UI response.

    Args:
        config: The table configuration used to compile ``compiled``.
        compiled: The return value of :func:`build_statements` for this
            request.
        results: Mapping of statement key to returned rows.

    Returns:
        The ``DataTableResponse``; call ``to_dict()`` for the JSON body.
    """
    return ResponseMapper(config).map(compiled, results)
