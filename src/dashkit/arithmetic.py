"""Arithmetic with loose operand coercion, rounding to a precision, clamping."""

import math
import operator
from collections.abc import Callable
from typing import Any

from .lang import to_integer, to_number, to_string

# Rounding precision is capped so the exponent shift stays representable.
MAX_PRECISION = 292


def _create_math_operation(
    func: Callable[[Any, Any], Any], default_value: int
) -> Callable[[Any, Any], Any]:
    """Build a binary operation that coerces its operands.

    * Both operands ``None``: ``default_value``.
    * One operand ``None``: the other operand.
    * Either operand a string: both are converted with `to_string`.
    * Otherwise both are converted with `to_number`.
    """

    def operation(value: Any = None, other: Any = None) -> Any:
        if value is None and other is None:
            return default_value
        if value is None:
            return other
        if other is None:
            return value
        if isinstance(value, str) or isinstance(other, str):
            return func(to_string(value), to_string(other))
        return func(to_number(value), to_number(other))

    return operation


def _divide(dividend: Any, divisor: Any) -> Any:
    if isinstance(dividend, str):
        dividend, divisor = to_number(dividend), to_number(divisor)
    if divisor == 0:
        # IEEE 754 semantics instead of ZeroDivisionError
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


_add = _create_math_operation(operator.add, 0)
_div = _create_math_operation(_divide, 1)


def add(augend: Any = None, addend: Any = None) -> Any:
    """Add two values.

    Example:
        >>> add(6, 4)
        10
    """
    return _add(augend, addend)


def divide(dividend: Any = None, divisor: Any = None) -> Any:
    """Divide two values; division by zero gives an infinity or NaN.

    Example:
        >>> divide(6, 4)
        1.5
    """
    return _div(dividend, divisor)


def _shift(number: float, exponent: int) -> float:
    # Shift by editing the decimal exponent to avoid binary rounding error.
    mantissa, _, current = repr(float(number)).partition("e")
    return float(f"{mantissa}e{int(current or 0) + exponent}")


def _to_float(number: int | float) -> float:
    try:
        return float(number)
    except OverflowError:
        # ints beyond the float range
        return math.inf if number > 0 else -math.inf


def _create_round(func: Callable[[float], int]) -> Callable[..., int | float]:
    def rounder(number: Any, precision: Any = 0) -> int | float:
        number = _to_float(to_number(number))
        precision = min(max(to_integer(precision), -MAX_PRECISION), MAX_PRECISION)
        if not math.isfinite(number):
            return number
        if precision == 0:
            return func(number)
        shifted = _shift(number, precision)
        if not math.isfinite(shifted):
            # Too large to have digits at this precision.
            return number
        value = _shift(func(shifted), -precision)
        if not math.isfinite(value):
            return value
        return int(value) if precision < 0 else value

    return rounder


def _round_half_up(number: float) -> int:
    # Round half toward +Infinity rather than Python's banker's rounding.
    return math.floor(number + 0.5)


_ceil = _create_round(math.ceil)
_floor = _create_round(math.floor)
_round = _create_round(_round_half_up)


def ceil(number: Any, precision: Any = 0) -> int | float:
    """Round ``number`` up to ``precision`` decimal places.

    Non-positive precision returns an ``int``.

    Example:
        >>> ceil(6.004, 2), ceil(6040, -2)
        (6.01, 6100)
    """
    return _ceil(number, precision)


def floor(number: Any, precision: Any = 0) -> int | float:
    """Round ``number`` down to ``precision`` decimal places."""
    return _floor(number, precision)


def round_(number: Any, precision: Any = 0) -> int | float:
    """Round ``number`` half up to ``precision`` decimal places."""
    return _round(number, precision)


def clamp(number: Any, lower: Any, upper: Any = None) -> int | float:
    """Clamp ``number`` within the inclusive ``lower`` and ``upper`` bounds.

    With only one bound given it is treated as the upper bound. NaN bounds are
    treated as ``0``.

    Example:
        >>> clamp(10, -5, 5), clamp(-10, -5, 5)
        (5, -5)
    """
    number = to_number(number)
    if upper is None:
        lower, upper = None, lower
    if upper is not None:
        upper = to_number(upper)
        upper = 0 if math.isnan(upper) else upper
        number = min(number, upper)
    if lower is not None:
        lower = to_number(lower)
        lower = 0 if math.isnan(lower) else lower
        number = max(number, lower)
    return number
