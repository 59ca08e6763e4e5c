"""Type predicates, comparison and value coercion."""

import array
import datetime
import math
import re
from collections.abc import Sequence, Sized
from typing import Any

from ._base import is_scalar, same_value_zero_key
from .config import MAX_INTEGER, MAX_SAFE_INTEGER
from .object import keys

_BINARY_RE = re.compile(r"^0b[01]+$", re.IGNORECASE)
_OCTAL_RE = re.compile(r"^0o[0-7]+$", re.IGNORECASE)
_HEX_RE = re.compile(r"^0x[0-9a-f]+$", re.IGNORECASE)
_BAD_HEX_RE = re.compile(r"^[-+]0x[0-9a-f]+$", re.IGNORECASE)
_INFINITY_RE = re.compile(r"^[-+]?Infinity$")
# Digit separators and inf/nan spellings are not numbers here.
_NON_NUMERIC_RE = re.compile(r"_|inf|nan", re.IGNORECASE)

# ============================================================================
#                               Predicates
# ============================================================================


def eq(value: Any, other: Any) -> bool:
    """Compare two values using SameValueZero semantics.

    Scalars compare by value (NaN equals NaN, ``True`` is not ``1``); other
    objects compare by identity.

    Example:
        >>> obj = {"a": 1}
        >>> eq(obj, obj), eq(obj, {"a": 1}), eq(float("nan"), float("nan"))
        (True, False, True)
    """
    return value is other or same_value_zero_key(value) == same_value_zero_key(
        other
    )


def is_array_like(value: Any) -> bool:
    """Return True for non-callable sequences such as lists, tuples and strings."""
    if value is None or callable(value):
        return False
    return isinstance(value, (Sequence, array.array))


def is_object(value: Any) -> bool:
    """Return True for anything that is not ``None`` or a built-in scalar."""
    return not is_scalar(value)


def is_object_like(value: Any) -> bool:
    """Return True for non-scalar, non-callable values."""
    return is_object(value) and not callable(value)


def is_array_like_object(value: Any) -> bool:
    """Return True for array-like values that are also object-like (not ``str``)."""
    return is_array_like(value) and is_object_like(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_buffer(value: Any) -> bool:
    """Return True for byte buffers (``bytes`` and ``bytearray``)."""
    return isinstance(value, (bytes, bytearray))


def is_date(value: Any) -> bool:
    """Return True for ``datetime.date`` instances, including datetimes."""
    return isinstance(value, datetime.date)


def is_typed_array(value: Any) -> bool:
    """Return True for homogeneous typed arrays (``array.array``, ``memoryview``)."""
    return isinstance(value, (array.array, memoryview))


def is_length(value: Any) -> bool:
    """Return True if ``value`` is a valid sequence length.

    Example:
        >>> is_length(3), is_length(-1), is_length(float("inf"))
        (True, False, False)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return 0 <= value <= MAX_SAFE_INTEGER


def is_empty(value: Any) -> bool:
    """Return True if ``value`` has nothing in it.

    ``None``, scalars other than non-empty strings/bytes, empty containers and
    objects without public attributes are empty.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return not keys(value)


# ============================================================================
#                               Coercion
# ============================================================================


def cast_array(*args: Any) -> list[Any]:
    """Wrap a single value in a list unless it already is one.

    Example:
        >>> cast_array(1), cast_array()
        ([1], [])
    """
    if not args:
        return []
    value = args[0]
    return value if isinstance(value, list) else [value]


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def default_to(value: Any, default: Any) -> Any:
    """Return ``default`` if ``value`` is ``None`` or NaN, else ``value``."""
    return default if value is None or _is_nan(value) else value


def default_to_any(value: Any, *defaults: Any) -> Any:
    """Apply `default_to` through ``defaults`` from left to right.

    Example:
        >>> default_to_any(None, None, float("nan"), "fallback")
        'fallback'
    """
    for default in defaults:
        value = default_to(value, default)
    return value


def _parse_number(text: str) -> int | float:
    text = text.strip()
    if not text:
        return 0
    if _BINARY_RE.match(text):
        return int(text[2:], 2)
    if _OCTAL_RE.match(text):
        return int(text[2:], 8)
    if _HEX_RE.match(text):
        return int(text[2:], 16)
    if _BAD_HEX_RE.match(text):
        return math.nan
    if _INFINITY_RE.match(text):
        return -math.inf if text.startswith("-") else math.inf
    if not text.isascii() or _NON_NUMERIC_RE.search(text):
        return math.nan
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def to_number(value: Any) -> int | float:
    """Convert ``value`` to a number.

    Numbers pass through (booleans become ``0``/``1``), strings are parsed
    including ``0b``/``0o``/``0x`` prefixes, and everything else is NaN.

    Example:
        >>> to_number("0b10"), to_number("3.2"), to_number("  ")
        (2, 3.2, 0)
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _parse_number(value)
    if isinstance(value, bytes):
        return _parse_number(value.decode("ascii", errors="replace"))
    return math.nan


def to_finite(value: Any) -> int | float:
    """Convert ``value`` to a finite number.

    Infinities clamp to ``+-MAX_INTEGER`` and NaN becomes ``0``.
    """
    if not value:
        return value if isinstance(value, float) else 0
    number = to_number(value)
    if math.isinf(number):
        return MAX_INTEGER if number > 0 else -MAX_INTEGER
    return 0 if math.isnan(number) else number


def to_integer(value: Any) -> int:
    """Convert ``value`` to an integer, truncating toward zero.

    Example:
        >>> to_integer(3.2), to_integer(5e-324), to_integer("-4.9")
        (3, 0, -4)
    """
    return int(to_finite(value))


def _number_to_string(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def to_string(value: Any) -> str:
    """Convert ``value`` to a string.

    ``None`` becomes ``''``, ``-0.0`` keeps its sign, integral floats drop the
    trailing ``.0`` and lists/tuples are joined with commas recursively.

    Example:
        >>> to_string(None), to_string(-0.0), to_string([1, [2]])
        ('', '-0', '1,2')
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(to_string(item) for item in value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _number_to_string(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)

