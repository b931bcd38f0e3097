"""Compilation context objects.

``CompilationContext`` packages the ``(config, compiler)`` pair shared by
``StatementBuilder`` and every clause builder.  ``RuntimeContext`` holds
the per-call state (the skipped-field log) and is created fresh for each
``build()`` call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pagesql.compile.base import DialectCompiler
from pagesql.schema.statements import SkippedField
from pagesql.schema.table import TableConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context shared by all builders of one ``StatementBuilder``.

    Attributes:
        config: The table configuration.
        compiler: Dialect strategy resolved from ``config.dialect``.
    """

    config: TableConfig
    compiler: DialectCompiler


@dataclass
class RuntimeContext:
    """Collects request fields skipped during a single compilation run."""

    skipped: list[SkippedField] = field(default_factory=list)

    def skip(self, path: str, reason: str) -> None:
        """Record that ``path`` was ignored; duplicates are recorded once."""
        entry = SkippedField(field=path, reason=reason)
        if entry in self.skipped:
            return
        logger.debug("Skipping %s: %s", path, reason)
        self.skipped.append(entry)
