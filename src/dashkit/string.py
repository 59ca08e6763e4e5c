"""String helpers: word splitting and case conversion."""

import re
from typing import Any

from .arithmetic import clamp
from .lang import to_integer, to_string

# Plain ASCII text is split on anything that is not a letter or digit.
_ASCII_WORD_RE = re.compile(r"[^\x00-\x2f\x3a-\x40\x5b-\x60\x7b-\x7f]+")

# Mixed case, digits next to letters or any symbol call for the full splitter.
_HAS_UNICODE_WORD_RE = re.compile(
    r"[a-z][A-Z]|[A-Z]{2}[a-z]|[0-9][a-zA-Z]|[a-zA-Z][0-9]|[^a-zA-Z0-9 ]"
)

_LOWER_RANGE = "a-z\xdf-\xf6\xf8-\xff"
_UPPER_RANGE = "A-Z\xc0-\xd6\xd8-\xde"
_BREAK_RANGE = r"\x00-\x2f\x3a-\x40\x5b-\x60\x7b-\xbf\xd7\xf7\u2000-\u206f\s"

_RS_BREAK = f"[{_BREAK_RANGE}]"
_RS_LOWER = f"[{_LOWER_RANGE}]"
_RS_UPPER = f"[{_UPPER_RANGE}]"
_RS_MISC = f"[^{_BREAK_RANGE}{_LOWER_RANGE}{_UPPER_RANGE}\\d]"
_RS_MISC_LOWER = f"(?:{_RS_LOWER}|{_RS_MISC})"
_RS_MISC_UPPER = f"(?:{_RS_UPPER}|{_RS_MISC})"
_RS_OPT_CONTR_LOWER = "(?:['’](?:d|ll|m|re|s|t|ve))?"
_RS_OPT_CONTR_UPPER = "(?:['’](?:D|LL|M|RE|S|T|VE))?"

_UNICODE_WORD_RE = re.compile(
    "|".join(
        [
            f"{_RS_UPPER}?{_RS_LOWER}+{_RS_OPT_CONTR_LOWER}(?={_RS_BREAK}|{_RS_UPPER}|$)",
            f"{_RS_MISC_UPPER}+{_RS_OPT_CONTR_UPPER}(?={_RS_BREAK}|{_RS_UPPER}{_RS_MISC_LOWER}|$)",
            f"{_RS_UPPER}?{_RS_MISC_LOWER}+{_RS_OPT_CONTR_LOWER}",
            f"{_RS_UPPER}+{_RS_OPT_CONTR_UPPER}",
            r"\d*(?:1ST|2ND|3RD|(?![123])\dTH)(?=\b|[a-z_])",
            r"\d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|[A-Z_])",
            r"\d+",
        ]
    )
)

_APOSTROPHES_RE = re.compile("['’]")


def words(text: Any, pattern: str | re.Pattern[str] | None = None) -> list[str]:
    """Split ``text`` into a list of words.

    Without a ``pattern``, words are split on punctuation, whitespace, case
    changes (``"fooBar"`` gives ``["foo", "Bar"]``) and letter/digit
    boundaries. With a ``pattern``, every match of it is returned.

    Example:
        >>> words("fred, barney, & pebbles")
        ['fred', 'barney', 'pebbles']
        >>> words("fred, barney, & pebbles", r"[^, ]+")
        ['fred', 'barney', '&', 'pebbles']
    """
    text = to_string(text)
    if pattern is None:
        if _HAS_UNICODE_WORD_RE.search(text):
            pattern = _UNICODE_WORD_RE
        else:
            pattern = _ASCII_WORD_RE
    return [match.group(0) for match in re.finditer(pattern, text)]


def _case_words(text: Any) -> list[str]:
    return words(_APOSTROPHES_RE.sub("", to_string(text)))


def upper_first(text: Any) -> str:
    """Convert the first character of ``text`` to upper case."""
    text = to_string(text)
    return text[:1].upper() + text[1:]


def capitalize(text: Any) -> str:
    """Upper-case the first character of ``text`` and lower-case the rest.

    Example:
        >>> capitalize("FRED")
        'Fred'
    """
    return upper_first(to_string(text).lower())


def camel_case(text: Any) -> str:
    """Convert ``text`` to camelCase.

    Example:
        >>> camel_case("--foo-bar--")
        'fooBar'
    """
    parts = [word.lower() for word in _case_words(text)]
    return "".join(
        word if index == 0 else upper_first(word) for index, word in enumerate(parts)
    )


def kebab_case(text: Any) -> str:
    """Convert ``text`` to kebab-case."""
    return "-".join(word.lower() for word in _case_words(text))


def snake_case(text: Any) -> str:
    """Convert ``text`` to snake_case."""
    return "_".join(word.lower() for word in _case_words(text))


def ends_with(text: Any, target: Any, position: Any = None) -> bool:
    """Return True if ``text`` ends with ``target``.

    Args:
        text: The string to inspect.
        target: The suffix to search for.
        position: Treat ``text`` as if it were only this many characters long.

    Example:
        >>> ends_with("abc", "b", 2)
        True
    """
    text = to_string(text)
    target = to_string(target)
    length = len(text)
    end = length if position is None else clamp(to_integer(position), 0, length)
    start = end - len(target)
    return start >= 0 and text[start:end] == target
