"""Oracle dialect compiler."""
from __future__ import annotations

from pagesql.compile.base import DialectCompiler
from pagesql.compile.sanitize import like_escape


class OracleCompiler(DialectCompiler):
    """Compiles statements for Oracle.

    Oracle has no ``USE``; the schema is switched for the session with
    ``ALTER SESSION SET CURRENT_SCHEMA``.

    There is no inline LIMIT either.  The whole SELECT is wrapped in a
    ``ROWNUM`` subquery and the window is selected on the ``rnum`` column::

        SELECT * FROM (SELECT a.*, ROWNUM rnum FROM (<select>) a)
        WHERE rnum BETWEEN <start + 1> AND <start + length>
    """

    @property
    def dialect_name(self) -> str:
        return "oracle"

    def schema_switch(self, name: str) -> str:
        return f"ALTER SESSION SET CURRENT_SCHEMA = {name}"

    def like_operator(self) -> str:
        return "LIKE"

    def search_predicate(self, column: str, value: str) -> str:
        # Oracle literals take no backslash escapes and LIKE has no default
        # escape character, so both are spelled out.
        pattern = like_escape(value).replace("'", "''")
        return f"{column} LIKE '%{pattern}%' ESCAPE '\\'"

    def paginate(
        self,
        select_sql: str,
        start: int | None,
        length: int | None,
        default_length: int,
    ) -> str:
        # Both bounds are required; the configured fallback length is not used.
        if start is None or start < 0 or length is None or length < 0:
            return select_sql
        return (
            f"SELECT * FROM (SELECT a.*, ROWNUM rnum FROM ({select_sql}) a) "
            f"WHERE rnum BETWEEN {start + 1} AND {start + length}"
        )
