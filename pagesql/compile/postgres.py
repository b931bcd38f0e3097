"""PostgreSQL dialect compiler."""
from __future__ import annotations

from pagesql.compile.default import DefaultCompiler
from pagesql.compile.sanitize import like_escape


class PostgresCompiler(DefaultCompiler):
    """Compiles statements for PostgreSQL.

    Search predicates use ``ILIKE`` on the column cast to ``text`` so that
    numeric and timestamp columns can be matched against free text.
    Patterns are written as ``E''`` literals, which read backslash escapes
    whatever ``standard_conforming_strings`` is set to.
    Pagination is ``OFFSET <start> LIMIT <length>``.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def like_operator(self) -> str:
        return "ILIKE"

    def search_target(self, column: str) -> str:
        return f"{column}::text"

    def pattern_literal(self, value: str) -> str:
        # text cannot hold NUL
        pattern = like_escape(value).replace("\0", "")
        return "E'%" + pattern.replace("\\", "\\\\").replace("'", "''") + "%'"

    def limit_clause(self, start: int, length: int) -> str:
        return f"OFFSET {start} LIMIT {length}"
