"""dashkit

A toolkit of small, independent utility functions in the spirit of lodash:
type predicates, list/object helpers, numeric coercion, string casing and
memoization. Every helper is a plain function with no shared state, except
`memoize`, whose cache is exposed for inspection and replacement.
"""

from .arithmetic import add, ceil, clamp, divide, floor, round_
from .array import chunk, compact, difference, drop, slice_
from .collection import count_by, every, filter_, map_, reduce_
from .errors import DashkitError, InvalidArgumentError, UnknownCacheStoreError
from .lang import (
    cast_array,
    default_to,
    default_to_any,
    eq,
    is_array_like,
    is_array_like_object,
    is_boolean,
    is_buffer,
    is_date,
    is_empty,
    is_length,
    is_object,
    is_object_like,
    is_typed_array,
    to_finite,
    to_integer,
    to_number,
    to_string,
)
from .memoize import CacheStore, LockedMapCache, MapCache, MemoizedFunction, memoize
from .object import at, get, keys, to_path
from .string import (
    camel_case,
    capitalize,
    ends_with,
    kebab_case,
    snake_case,
    upper_first,
    words,
)

__all__ = [
    "__version__",
    # memoize
    "CacheStore",
    "LockedMapCache",
    "MapCache",
    "MemoizedFunction",
    "memoize",
    # errors
    "DashkitError",
    "InvalidArgumentError",
    "UnknownCacheStoreError",
    # arithmetic
    "add",
    "ceil",
    "clamp",
    "divide",
    "floor",
    "round_",
    # array
    "chunk",
    "compact",
    "difference",
    "drop",
    "slice_",
    # collection
    "count_by",
    "every",
    "filter_",
    "map_",
    "reduce_",
    # lang
    "cast_array",
    "default_to",
    "default_to_any",
    "eq",
    "is_array_like",
    "is_array_like_object",
    "is_boolean",
    "is_buffer",
    "is_date",
    "is_empty",
    "is_length",
    "is_object",
    "is_object_like",
    "is_typed_array",
    "to_finite",
    "to_integer",
    "to_number",
    "to_string",
    # object
    "at",
    "get",
    "keys",
    "to_path",
    # string
    "camel_case",
    "capitalize",
    "ends_with",
    "kebab_case",
    "snake_case",
    "upper_first",
    "words",
]
__version__ = "0.1.0"
