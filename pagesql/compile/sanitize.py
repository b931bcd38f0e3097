"""Escaping of user-supplied search text before it is placed in a literal.

This is defence in depth against breaking out of a quoted SQL string and
against injecting ``%`` LIKE wildcards.  It is NOT a substitute for
parameterized execution: identifiers and raw SQL fragments from the table
configuration are never escaped.

The escapes produced by :func:`sanitize` suit a server that honours
backslash escapes inside string literals (MySQL default).  Dialects that
read literals the standard SQL way re-render the value with
:func:`like_escape` and quote it themselves.
"""
from __future__ import annotations

import re
from typing import Any

#: Default upper bound on the length of a search value.
DEFAULT_MAX_LENGTH = 256

_ESCAPES: dict[str, str] = {
    "\0": "\\0",
    "\x08": "\\b",
    "\t": "\\t",
    "\x1a": "\\z",
    "\n": "\\n",
    "\r": "\\r",
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
    "%": "\\%",
}

_ESCAPE_RE = re.compile("[" + re.escape("".join(_ESCAPES)) + "]")


def sanitize(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> Any:
    """Escape characters that could break out of a SQL string literal.

    Args:
        value: The raw search value from the request.
        max_length: Longest accepted value, measured before escaping.

    Returns:
        ``None`` and ``""`` unchanged; ``None`` when ``value`` is not a
        string or is longer than ``max_length`` (the caller treats this as
        "no search"); otherwise the escaped string.
    """
    if value is None or value == "":
        return value
    if not isinstance(value, str) or len(value) > max_length:
        return None
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], value)


_UNESCAPES: dict[str, str] = {escaped[1]: raw for raw, escaped in _ESCAPES.items()}

_ESCAPED_RE = re.compile(r"\\(.)", re.DOTALL)


def unescape(value: str) -> str:
    """Reverse :func:`sanitize`, giving back the text the user typed."""
    return _ESCAPED_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(1)), value)


def like_escape(value: str) -> str:
    """Re-render sanitized text for a LIKE pattern with ``\\`` as escape.

    Only backslash and ``%`` are escaped.  Quoting the result is left to
    the dialect, since not every server reads backslashes in literals.
    """
    return unescape(value).replace("\\", "\\\\").replace("%", "\\%")
