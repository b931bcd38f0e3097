"""Unit tests for the search-value sanitizer."""
from __future__ import annotations

import pytest

from pagesql.compile.sanitize import DEFAULT_MAX_LENGTH, like_escape, sanitize, unescape


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("\0", "\\0"),
        ("\x08", "\\b"),
        ("\t", "\\t"),
        ("\x1a", "\\z"),
        ("\n", "\\n"),
        ("\r", "\\r"),
        ('"', '\\"'),
        ("'", "\\'"),
        ("\\", "\\\\"),
        ("%", "\\%"),
    ],
)
def test_each_restricted_character_is_escaped(raw, expected):
    assert sanitize(raw) == expected


def test_plain_text_is_unchanged():
    assert sanitize("hello world_42") == "hello world_42"


def test_quote_breakout_is_escaped():
    assert sanitize("x' OR '1'='1") == "x\\' OR \\'1\\'=\\'1"


def test_empty_and_none_pass_through():
    assert sanitize("") == ""
    assert sanitize(None) is None


def test_non_string_is_rejected():
    assert sanitize(42) is None
    assert sanitize(["a"]) is None


def test_oversized_value_is_rejected():
    assert sanitize("a" * DEFAULT_MAX_LENGTH) == "a" * DEFAULT_MAX_LENGTH
    assert sanitize("a" * (DEFAULT_MAX_LENGTH + 1)) is None


def test_custom_max_length():
    assert sanitize("abcdef", max_length=5) is None
    assert sanitize("abcde", max_length=5) == "abcde"


def test_sanitizing_twice_escapes_backslashes_again():
    once = sanitize("50%")
    assert once == "50\\%"
    assert sanitize(once) == "50\\\\\\%"


def test_unescape_reverses_sanitize():
    raw = "it's \"50%\" \\ done\n\t\0"
    assert unescape(sanitize(raw)) == raw


def test_like_escape_keeps_only_backslash_and_wildcard_escapes():
    assert like_escape(sanitize("it's 100%\\")) == "it's 100\\%\\\\"
