"""Compilation output: the statement map plus the per-call request context.

``CompiledStatements`` is what the statement builder returns and what the
response mapper consumes.  The caller executes ``statements`` in order and
hands the results back keyed identically, together with the compiled
object itself::

    compiled = pagesql.build_statements(config, request_params)
    results = {key: run(sql) for key, sql in compiled.statements.items()}
    response = pagesql.map_response(config, compiled, results)

Carrying the :class:`RequestContext` on the compiled object (instead of on
the shared table configuration) means one ``TableConfig`` can serve any
number of concurrent requests.
"""
from __future__ import annotations

from dataclasses import dataclass, field


class StatementKey:
    """Names of the statements in a statement map, in execution order."""

    CHANGE_DATABASE_OR_SCHEMA = "changeDatabaseOrSchema"
    RECORDS_TOTAL = "recordsTotal"
    RECORDS_FILTERED = "recordsFiltered"
    SELECT = "select"

    ORDER: tuple[str, ...] = (
        CHANGE_DATABASE_OR_SCHEMA,
        RECORDS_TOTAL,
        RECORDS_FILTERED,
        SELECT,
    )


@dataclass(frozen=True)
class RequestContext:
    """What the response mapper needs to know about the compiled request.

    Attributes:
        draw: Echo token to return to the UI.
        start: Requested row offset, if any.
        length: Requested page length, if any.
    """

    draw: int = 0
    start: int | None = None
    length: int | None = None


@dataclass(frozen=True)
class SkippedField:
    """A request field that was ignored during compilation.

    Attributes:
        field: Dotted path into the request (e.g. ``'order[1].column'``).
        reason: Why the field was skipped.
    """

    field: str
    reason: str


@dataclass
class CompiledStatements:
    """The output of one compilation run.

    Attributes:
        statements: SQL strings keyed by :class:`StatementKey` names, in
            execution order.  Empty when the request could not be used.
        context: Per-request values threaded to the response mapper.
        skipped: Request fields ignored while building clauses.
        error: Set when nothing could be compiled.
    """

    statements: dict[str, str] = field(default_factory=dict)
    context: RequestContext = field(default_factory=RequestContext)
    skipped: list[SkippedField] = field(default_factory=list)
    error: str | None = None

    @property
    def clean(self) -> bool:
        """True when every request field was used and nothing failed."""
        return not self.skipped and self.error is None

    @property
    def skip_count(self) -> int:
        return len(self.skipped)

    def __getitem__(self, key: str) -> str:
        return self.statements[key]

    def __contains__(self, key: object) -> bool:
        return key in self.statements

    def as_list(self) -> list[str]:
        """Return the statements in execution order."""
        return [self.statements[key] for key in StatementKey.ORDER if key in self.statements]
