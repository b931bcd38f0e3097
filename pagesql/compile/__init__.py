"""pageSQL compilation layer: request parameters → SQL statements."""
from pagesql.compile.base import DialectCompiler
from pagesql.compile.builder import StatementBuilder
from pagesql.compile.default import DefaultCompiler
from pagesql.compile.oracle import OracleCompiler
from pagesql.compile.postgres import PostgresCompiler
from pagesql.compile.sanitize import sanitize

__all__ = [
    "DialectCompiler",
    "StatementBuilder",
    "DefaultCompiler",
    "OracleCompiler",
    "PostgresCompiler",
    "sanitize",
]
