"""Unit tests for dashkit.string."""

import re

import pytest

from dashkit.string import (
    camel_case,
    capitalize,
    ends_with,
    kebab_case,
    snake_case,
    upper_first,
    words,
)

# pylint: disable=magic-value-comparison


# ============================================================================
#                               words
# ============================================================================


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("fred, barney, & pebbles", ["fred", "barney", "pebbles"]),
        ("ab cd", ["ab", "cd"]),
        ("fooBar", ["foo", "Bar"]),
        ("__FOO_BAR__", ["FOO", "BAR"]),
        ("héllo wörld", ["héllo", "wörld"]),
        ("don't stop", ["don't", "stop"]),
        ("", []),
        (None, []),
    ],
)
def test_words(text, expected):
    """Text is split on punctuation, whitespace and case changes."""
    assert words(text) == expected


def test_words_with_pattern():
    """A pattern string or compiled pattern selects the words."""
    text = "fred, barney, & pebbles"
    assert words(text, r"[^, ]+") == ["fred", "barney", "&", "pebbles"]
    assert words(text, re.compile(r"\w+")) == ["fred", "barney", "pebbles"]


# ============================================================================
#                               Case conversion
# ============================================================================


@pytest.mark.parametrize(
    ("text", "camel", "kebab", "snake"),
    [
        ("Foo Bar", "fooBar", "foo-bar", "foo_bar"),
        ("--foo-bar--", "fooBar", "foo-bar", "foo_bar"),
        ("__FOO_BAR__", "fooBar", "foo-bar", "foo_bar"),
        ("fooBar", "fooBar", "foo-bar", "foo_bar"),
        ("", "", "", ""),
    ],
)
def test_case_styles(text, camel, kebab, snake):
    """Every case style joins the same words."""
    assert camel_case(text) == camel
    assert kebab_case(text) == kebab
    assert snake_case(text) == snake


def test_case_styles_strip_apostrophes():
    """Apostrophes do not split words."""
    assert snake_case("don't stop") == "dont_stop"
    assert camel_case("it's fine") == "itsFine"


def test_capitalize():
    """Only the first character stays upper case."""
    assert capitalize("FRED") == "Fred"
    assert capitalize("fred") == "Fred"
    assert capitalize("") == ""


def test_upper_first():
    """Only the first character changes."""
    assert upper_first("fred") == "Fred"
    assert upper_first("FRED") == "FRED"
    assert upper_first("") == ""
    assert upper_first(None) == ""


# ============================================================================
#                               ends_with
# ============================================================================


@pytest.mark.parametrize(
    ("text", "target", "position", "expected"),
    [
        ("abc", "c", None, True),
        ("abc", "b", None, False),
        ("abc", "b", 2, True),
        ("abc", "", None, True),
        ("abc", "c", 10, True),
        ("abc", "a", -1, False),
        ("abc", "", 0, True),
        ("abc", "abcd", None, False),
    ],
)
def test_ends_with(text, target, position, expected):
    """Position truncates the text and is clamped to its length."""
    assert ends_with(text, target, position) is expected
