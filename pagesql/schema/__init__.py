"""pageSQL schema models: TableConfig, request, response and statement map."""
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
from pagesql.schema.table import DEFAULT_PAGE_LENGTH, TableConfig

__all__ = [
    "ColumnRequest",
    "DataTableRequest",
    "OrderRequest",
    "SearchValue",
    "DataTableResponse",
    "CompiledStatements",
    "RequestContext",
    "SkippedField",
    "StatementKey",
    "DEFAULT_PAGE_LENGTH",
    "TableConfig",
]
