"""Dialect compiler abstraction.

The Strategy pattern is used: a ``StatementBuilder`` holds exactly one
``DialectCompiler`` chosen when the builder is created, and every piece
of dialect-specific syntax (schema switch, pagination, search predicate)
is requested from it.  There are no string comparisons on the dialect
name anywhere else.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class DialectCompiler(ABC):
    """Abstract base for dialect-specific statement fragments."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'postgres'``)."""

    @abstractmethod
    def schema_switch(self, name: str) -> str:
        """Return the statement that makes ``name`` the active database/schema.

        Args:
            name: Database or schema name from the table configuration.

        Returns:
            A complete statement without the terminating semicolon.
        """

    @abstractmethod
    def like_operator(self) -> str:
        """Return the pattern-match keyword (``'LIKE'`` or ``'ILIKE'``)."""

    @abstractmethod
    def paginate(
        self,
        select_sql: str,
        start: int | None,
        length: int | None,
        default_length: int,
    ) -> str:
        """Apply pagination to a complete SELECT (without semicolon).

        Args:
            select_sql: The SELECT statement, including WHERE and ORDER BY.
            start: Zero-based row offset from the request, or ``None``.
            length: Page length from the request, or ``None``.
            default_length: Fallback page length from the table configuration.

        Returns:
            The paginated SELECT.  Returned unchanged when the request does
            not ask for a page.
        """

    def search_target(self, column: str) -> str:
        """Return the expression matched against a search pattern."""
        return column

    def search_predicate(self, column: str, value: str) -> str:
        """Return a ``<column> LIKE '%value%'`` style predicate.

        ``value`` must already be sanitized.
        """
        return f"{self.search_target(column)} {self.like_operator()} {self.pattern_literal(value)}"

    def pattern_literal(self, value: str) -> str:
        """Return the quoted ``'%value%'`` pattern for a sanitized value.

        The sanitizer's backslash escapes are emitted as they are, which is
        right for servers that read backslash escapes in literals.
        """
        return f"'%{value}%'"
