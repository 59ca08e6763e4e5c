"""Configuration values and environment lookups for dashkit.

Environment variables are read when a value is needed, never at import time,
so tests can patch them freely.
"""

import os
import sys
from typing import Literal, cast

from .errors import UnknownCacheStoreError

MAX_SAFE_INTEGER = 2**53 - 1
MAX_INTEGER = sys.float_info.max

CACHE_STORE_ENV = "DASHKIT_MEMOIZE_CACHE"  # pragma: no mutate
CACHE_STORE_KINDS = ("map", "locked")

CacheStoreKind = Literal["map", "locked"]


def get_cache_store_kind() -> CacheStoreKind:
    """Get the default cache store kind for new memoized functions.

    Returns:
        The lower-cased value of `DASHKIT_MEMOIZE_CACHE`, or ``"map"`` when the
        variable is unset or blank.

    Raises:
        UnknownCacheStoreError: If the variable names an unknown store kind.
    """
    if not (kind := os.environ.get(CACHE_STORE_ENV, "").strip().lower()):
        return "map"
    if kind not in CACHE_STORE_KINDS:
        raise UnknownCacheStoreError(kind, CACHE_STORE_KINDS)
    return cast(CacheStoreKind, kind)
