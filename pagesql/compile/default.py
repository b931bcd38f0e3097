"""Default (MySQL-like) dialect compiler."""
from __future__ import annotations

from pagesql.compile.base import DialectCompiler


class DefaultCompiler(DialectCompiler):
    """Compiles statements for MySQL / MariaDB style servers.

    Schema switch: ``USE <name>``.
    Pagination: ``LIMIT <start>, <length>``.
    """

    @property
    def dialect_name(self) -> str:
        return "default"

    def schema_switch(self, name: str) -> str:
        return f"USE {name}"

    def like_operator(self) -> str:
        return "LIKE"

    def limit_clause(self, start: int, length: int) -> str:
        return f"LIMIT {start}, {length}"

    def paginate(
        self,
        select_sql: str,
        start: int | None,
        length: int | None,
        default_length: int,
    ) -> str:
        if start is None or start < 0:
            return select_sql
        if length is None or length <= 0:
            length = default_length
        return f"{select_sql} {self.limit_clause(start, length)}"
