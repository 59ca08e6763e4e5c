"""Iteration helpers that accept sequences and mappings.

Callbacks receive ``(value, index_or_key, collection)`` but are only passed as
many of those as their signature accepts, so ``bool`` or ``math.floor`` can be
used directly. An iteratee may also be given in shorthand:

* ``None``: identity.
* a path (``str``, ``int``, ``list`` or ``tuple``): the value at that path.
* a ``dict``: True when the value partially matches it.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from ._base import UNSET, limit_args
from .errors import InvalidArgumentError
from .object import get, is_match


def _identity(value: Any) -> Any:
    return value


def iteratee(value: Any) -> Callable[..., Any]:
    """Turn an iteratee shorthand into a callable.

    Raises:
        InvalidArgumentError: If ``value`` is not a callable, path, dict or None.
    """
    if value is None:
        return _identity
    if callable(value):
        return value
    if isinstance(value, Mapping):
        return lambda obj: is_match(obj, value)
    if isinstance(value, (str, int, list, tuple)):
        return lambda obj: get(obj, value)
    raise InvalidArgumentError("iteratee", value, "a callable, path or dict")


def _entries(collection: Any) -> Iterator[tuple[Any, Any]]:
    if collection is None:
        return iter(())
    if isinstance(collection, Mapping):
        return ((value, key) for key, value in collection.items())
    return ((value, index) for index, value in enumerate(collection))


def count_by(collection: Iterable[Any] | None, func: Any = None) -> dict[Any, int]:
    """Count the elements of ``collection`` grouped by the result of ``func``.

    Example:
        >>> count_by([6.1, 4.2, 6.3], math.floor)
        {6: 2, 4: 1}
    """
    call = limit_args(iteratee(func))
    counts: dict[Any, int] = {}
    for value, key in _entries(collection):
        group = call(value, key, collection)
        counts[group] = counts.get(group, 0) + 1
    return counts


def every(collection: Iterable[Any] | None, predicate: Any = None) -> bool:
    """Return True if ``predicate`` is truthy for every element (or none exist)."""
    call = limit_args(iteratee(predicate))
    return all(call(value, key, collection) for value, key in _entries(collection))


def filter_(collection: Iterable[Any] | None, predicate: Any = None) -> list[Any]:
    """Return the elements for which ``predicate`` is truthy."""
    call = limit_args(iteratee(predicate))
    return [
        value for value, key in _entries(collection) if call(value, key, collection)
    ]


def map_(collection: Iterable[Any] | None, func: Any = None) -> list[Any]:
    """Return the results of calling ``func`` on every element.

    Example:
        >>> map_([4, 8], lambda n: n * n)
        [16, 64]
    """
    call = limit_args(iteratee(func))
    return [call(value, key, collection) for value, key in _entries(collection)]


def reduce_(
    collection: Iterable[Any] | None, func: Any = None, accumulator: Any = UNSET
) -> Any:
    """Fold ``collection`` into a single value.

    ``func`` is called as ``func(accumulator, value, index_or_key, collection)``.
    Without an ``accumulator`` the first element is used as the initial value;
    an empty collection then yields ``None``.

    Example:
        >>> reduce_([1, 2], lambda total, n: total + n, 0)
        3
    """
    call = limit_args(iteratee(func))
    entries = _entries(collection)
    if accumulator is UNSET:
        first = next(entries, None)
        if first is None:
            return None
        accumulator = first[0]
    for value, key in entries:
        accumulator = call(accumulator, value, key, collection)
    return accumulator
