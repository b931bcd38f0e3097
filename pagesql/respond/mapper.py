"""Statement results → the UI's response envelope.

``ResponseMapper`` never raises on unexpected result shapes: missing keys,
empty result sets and rows of unknown type all degrade to zero counts and
empty data, because the UI must always receive a parseable response.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pagesql.schema.request import to_int
from pagesql.schema.response import DataTableResponse
from pagesql.schema.statements import CompiledStatements, StatementKey
from pagesql.schema.table import TableConfig

logger = logging.getLogger(__name__)


class ResponseMapper:
    """Builds a :class:`DataTableResponse` from executed statement results.

    Args:
        config: The table configuration the statements were compiled for.
            Only ``row_formatter`` is consulted.
    """

    def __init__(self, config: TableConfig) -> None:
        self._config = config

    def map(self, compiled: CompiledStatements, results: Any) -> DataTableResponse:
        """Map ``results`` (keyed like ``compiled.statements``) to a response.

        Args:
            compiled: The compilation the results belong to.  Supplies the
                draw token and any compile-time error.
            results: Mapping of statement key to the rows it returned.

        Returns:
            The response.  With fewer than two results (nothing useful was
            executed) only ``draw`` and ``error`` are filled in.
        """
        response = DataTableResponse(draw=compiled.context.draw, error=compiled.error)
        if not isinstance(results, Mapping) or len(results) <= 1:
            logger.debug("No usable results for draw %d", response.draw)
            return response

        total = extract_count(results.get(StatementKey.RECORDS_TOTAL))
        if StatementKey.RECORDS_FILTERED in results:
            filtered = extract_count(results[StatementKey.RECORDS_FILTERED])
        else:
            filtered = total

        response.records_total = total
        response.records_filtered = filtered
        response.data = self._rows(results.get(StatementKey.SELECT))
        return response

    def _rows(self, rows: Any) -> list[Any]:
        # Any iterable of rows, DB-API cursors included.
        if isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
            return []
        formatter = self._config.row_formatter
        if formatter is None:
            return list(rows)
        return [formatter(row, self._config) for row in rows]


def extract_count(rows: Any) -> int:
    """Return the first value of the first row of a COUNT result, or 0.

    Rows may be mappings (first value) or sequences (first item).  ``rows``
    may be any iterable, such as a DB-API cursor.
    """
    if isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
        return 0
    row = next(iter(rows), None)
    if isinstance(row, Mapping):
        values = list(row.values())
    elif isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
        values = list(row)
    else:
        return 0
    if not values:
        return 0
    return to_int(values[0], 0) or 0
