"""Custom exception hierarchy for pageSQL.

All public errors inherit from PageSQLError so callers can catch the base
class for any pageSQL-specific failure.

Malformed *requests* never raise: they degrade to partial or empty
statement maps (see :class:`~pagesql.schema.statements.CompiledStatements`).
Only programmer mistakes in the table configuration or the dialect
registry surface as exceptions.
"""
from __future__ import annotations


class PageSQLError(Exception):
    """Base exception for all pageSQL errors."""


class ConfigError(PageSQLError):
    """Raised when a TableConfig is misconfigured.

    Detected at construction time, before any statement is built, so the
    developer gets a clear message instead of broken SQL later.

    Args:
        message: Human-readable description.
        field: The configuration option at fault.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CompilationError(PageSQLError):
    """Raised when statement compilation fails for an unexpected reason.

    Args:
        message: Human-readable description.
        clause: The clause being compiled when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause
