"""Object helpers: property paths, deep lookup and key listing."""

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ._base import UNSET
from .memoize import memoize_capped

_PROP_NAME_RE = re.compile(
    r"""[^.[\]]+"""  # bare segment
    r"""|\[(?:([^"'][^[]*)|(["'])((?:(?!\2)[^\\]|\\.)*?)\2)\]"""  # [0] or ["key"]
    r"""|(?=(?:\.|\[\])(?:\.|\[\]|$))"""  # empty segment
)
_ESCAPE_CHAR_RE = re.compile(r"\\(\\)?")
_INDEX_RE = re.compile(r"^(?:0|[1-9]\d*)$")

PathLike = str | int | Sequence[Any]


def _parse_path(string: str) -> list[str]:
    result: list[str] = []
    if string.startswith("."):
        result.append("")
    for match in _PROP_NAME_RE.finditer(string):
        expression, quote, sub_string = match.groups()
        if quote:
            key = _ESCAPE_CHAR_RE.sub(r"\1", sub_string)
        elif expression:
            key = expression.strip()
        else:
            key = match.group(0)
        result.append(key)
    return result


_string_to_path = memoize_capped(_parse_path)


def to_path(path: PathLike) -> list[Any]:
    """Convert ``path`` to a list of property keys.

    Strings are parsed using dot and bracket notation; quoted brackets may
    contain dots and escaped quotes. Lists and tuples are copied as-is; any
    other value becomes a one-element path.

    Example:
        >>> to_path('a[0].b["c.d"]')
        ['a', '0', 'b', 'c.d']
    """
    if isinstance(path, str):
        return list(_string_to_path(path))
    if isinstance(path, (list, tuple)):
        return list(path)
    return [path]


def _to_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and _INDEX_RE.match(key):
        return int(key)
    return None


def _get_key(obj: Any, key: Any) -> Any:
    """Look up a single ``key`` on ``obj``; return UNSET if it is missing."""
    if isinstance(obj, Mapping):
        if key in obj:
            return obj[key]
        index = _to_index(key)
        if isinstance(key, str) and index is not None and index in obj:
            return obj[index]
        return UNSET
    if isinstance(obj, Sequence):
        index = _to_index(key)
        if index is not None and 0 <= index < len(obj):
            return obj[index]
        return UNSET
    if isinstance(key, str) and key:
        return getattr(obj, key, UNSET)
    return UNSET


def _is_direct_key(obj: Any, path: Any) -> bool:
    # "a.b" may itself be a key of a mapping
    return isinstance(obj, Mapping) and isinstance(path, str) and path in obj


def base_get(obj: Any, path: PathLike, default: Any = UNSET) -> Any:
    """Resolve ``path`` on ``obj``, returning ``default`` for missing paths."""
    keys = [path] if _is_direct_key(obj, path) else to_path(path)
    if not keys:
        return default
    for key in keys:
        obj = _get_key(obj, key)
        if obj is UNSET:
            return default
    return obj


def get(obj: Any, path: PathLike, default: Any = None) -> Any:
    """Get the value at ``path`` of ``obj``.

    Mappings are indexed by key, sequences by integer index (negative indexes
    are treated as missing), and other objects by attribute.

    Args:
        obj: The object to query.
        path: A path string (``"a[0].b"``), a single key, or a list of keys.
        default: Returned when the path does not resolve. A resolved value of
            ``None`` is returned as-is.

    Example:
        >>> get({"a": [{"b": {"c": 3}}]}, "a[0].b.c")
        3
        >>> get({"a": [{"b": {"c": 3}}]}, "a.b.c", "default")
        'default'
    """
    return base_get(obj, path, default)


def _flatten_paths(paths: Iterable[Any]) -> list[Any]:
    result: list[Any] = []
    for path in paths:
        if isinstance(path, (list, tuple)):
            result.extend(path)
        else:
            result.append(path)
    return result


def at(obj: Any, *paths: Any) -> list[Any]:
    """Return the values at each of ``paths``; lists of paths are flattened.

    Example:
        >>> at({"a": [{"b": {"c": 3}}, 4]}, ["a[0].b.c", "a[1]"])
        [3, 4]
    """
    return [get(obj, path) for path in _flatten_paths(paths)]


def keys(obj: Any) -> list[Any]:
    """List the own keys of ``obj``.

    Mappings yield their keys, sequences the string form of their indexes
    (``keys("hi") == ["0", "1"]``), and other objects their public instance
    attributes. Anything else has no keys.
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj)
    if isinstance(obj, Sequence):
        return [str(index) for index in range(len(obj))]
    try:
        attrs = vars(obj)
    except TypeError:
        return []
    return [name for name in attrs if not name.startswith("_")]


def is_match(obj: Any, source: Mapping[Any, Any]) -> bool:
    """Return True if ``obj`` contains every key/value of ``source``.

    Nested mappings in ``source`` are matched partially as well.
    """
    for key, expected in source.items():
        actual = _get_key(obj, key)
        if actual is UNSET:
            return False
        if isinstance(expected, Mapping):
            if not is_match(actual, expected):
                return False
        elif actual != expected:
            return False
    return True
