"""Internals shared by the dashkit helper modules.

This module holds the ``UNSET`` sentinel, SameValueZero key normalization
(used by `eq`, `difference` and `MapCache`) and the arity inspection that lets
callbacks accept fewer arguments than a helper offers.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# pylint: disable=too-few-public-methods


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel marking an argument or lookup result that was not provided.

    This is distinct from `None`, which is a legitimate value everywhere in
    dashkit.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

SCALAR_TYPES = (bool, int, float, complex, str, bytes)

_NONE_KEY = ("none",)
_NAN_KEY = ("number", "NaN")


def is_scalar(value: Any) -> bool:
    """Return True for ``None`` and immutable built-in scalars."""
    return value is None or isinstance(value, SCALAR_TYPES)


def same_value_zero_key(value: Any) -> Any:
    """Normalize ``value`` into a hashable key with SameValueZero semantics.

    * ``None``, booleans, numbers, ``str`` and ``bytes`` compare by value.
      Booleans stay distinct from ``1``/``0``; ``1 == 1.0``; ``-0.0 == 0.0``;
      every NaN equals every other NaN.
    * ``tuple`` and ``frozenset`` compare element-wise using the same rules.
    * Any other object compares by identity.

    Identity keys are only meaningful while the object is alive, so callers
    that store keys must also hold a reference to the original object.
    """
    if value is None:
        return _NONE_KEY
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float, complex)):
        if value != value:  # pylint: disable=comparison-with-itself
            return _NAN_KEY
        return ("number", value)
    if isinstance(value, str):
        return ("str", value)
    if isinstance(value, bytes):
        return ("bytes", value)
    if type(value) is tuple:  # pylint: disable=unidiomatic-typecheck
        return ("tuple", tuple(same_value_zero_key(item) for item in value))
    if type(value) is frozenset:  # pylint: disable=unidiomatic-typecheck
        return ("frozenset", frozenset(same_value_zero_key(item) for item in value))
    return ("id", id(value))


def positional_arg_count(func: Callable[..., Any]) -> int | None:
    """Count the positional parameters ``func`` accepts.

    Returns:
        The number of positional parameters, or ``None`` when ``func`` takes
        ``*args``. Callables whose signature cannot be inspected (some
        builtins and extension types) are assumed to take one argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def limit_args(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``func`` so it is called with no more positional args than it takes."""
    count = positional_arg_count(func)
    if count is None:
        return func

    def call(*args: Any) -> Any:
        return func(*args[:count])

    return call
