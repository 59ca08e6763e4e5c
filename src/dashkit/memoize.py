"""Memoization with an inspectable, replaceable cache store.

`memoize` wraps a function so results are cached under a key resolved from
the call arguments. The cache is exposed as the ``cache`` attribute of the
returned callable; callers may pre-seed it, evict entries, clear it, or swap
in a different store (bounded, expiring, shared...) by assignment.

Key resolution:

* With a ``resolver``, the key is ``resolver(*args, **kwargs)``.
* Without one, the key is the **first positional argument only**. Any other
  arguments are ignored for caching purposes, so ``f(1, 2)`` and ``f(1, 3)``
  share an entry. Pass a resolver such as ``lambda *args: args`` when every
  argument matters.
* With no positional arguments the key is ``None``.

The default store, `MapCache`, compares immutable built-in values (numbers,
strings, bytes, ``None`` and tuples of those) by value and every other object
by identity. Two equal but distinct lists are therefore different keys.

Caches grow without bound. There is no eviction policy.
"""

import abc
import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from functools import partial, update_wrapper
from typing import Any, Generic, TypeVar

from ._base import UNSET, same_value_zero_key
from .config import get_cache_store_kind
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

R = TypeVar("R")

MAX_MEMOIZE_SIZE = 500
REQUIRED_STORE_METHODS = ("get", "set", "has", "delete")


class CacheStore(abc.ABC):
    """Abstract base class for memoize cache stores.

    `memoize` only requires ``get``, ``set``, ``has`` and ``delete``; any
    object providing those may be used as a cache. Subclassing `CacheStore`
    additionally lets memoize perform a single lookup per call through
    ``get(key, default)``.
    """

    @abc.abstractmethod
    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent."""

    @abc.abstractmethod
    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abc.abstractmethod
    def has(self, key: Any) -> bool:
        """Return True if a value is stored under ``key``."""

    @abc.abstractmethod
    def delete(self, key: Any) -> bool:
        """Remove the entry for ``key``.

        Returns:
            bool: True if an entry was removed, False if none existed.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every entry."""

    @abc.abstractmethod
    def __len__(self) -> int: ...

    def __contains__(self, key: Any) -> bool:
        return self.has(key)


class MapCache(CacheStore):
    """Unbounded in-memory store keyed with SameValueZero semantics.

    Each entry keeps the original key object alongside the value, so identity
    keys remain valid for as long as the entry exists.
    """

    def __init__(self, entries: Iterable[tuple[Any, Any]] | None = None) -> None:
        self._data: dict[Any, tuple[Any, Any]] = {}
        for key, value in entries or ():
            self.set(key, value)

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._data.get(same_value_zero_key(key))
        return default if entry is None else entry[1]

    def set(self, key: Any, value: Any) -> None:
        self._data[same_value_zero_key(key)] = (key, value)

    def has(self, key: Any) -> bool:
        return same_value_zero_key(key) in self._data

    def delete(self, key: Any) -> bool:
        return self._data.pop(same_value_zero_key(key), None) is not None

    def clear(self) -> None:
        self._data.clear()

    def items(self) -> list[tuple[Any, Any]]:
        """Return a snapshot of ``(key, value)`` pairs in insertion order."""
        return list(self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter([key for key, _ in self.items()])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items()!r})"


class LockedMapCache(MapCache):
    """`MapCache` guarded by a re-entrant lock.

    Use this store when a memoized function is shared between threads.
    Concurrent misses on the same key may still compute the value more than
    once; the last result stored wins.
    """

    def __init__(self, entries: Iterable[tuple[Any, Any]] | None = None) -> None:
        self._lock = threading.RLock()
        super().__init__(entries)

    def get(self, key: Any, default: Any = None) -> Any:
        with self._lock:
            return super().get(key, default)

    def set(self, key: Any, value: Any) -> None:
        with self._lock:
            super().set(key, value)

    def has(self, key: Any) -> bool:
        with self._lock:
            return super().has(key)

    def delete(self, key: Any) -> bool:
        with self._lock:
            return super().delete(key)

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def items(self) -> list[tuple[Any, Any]]:
        with self._lock:
            return super().items()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


CACHE_STORES: dict[str, type[CacheStore]] = {
    "map": MapCache,
    "locked": LockedMapCache,
}


def _default_cache() -> Any:
    """Build a store using ``memoize.Cache`` if set, else the configured kind."""
    if (factory := getattr(memoize, "Cache", None)) is not None:
        return factory()
    return CACHE_STORES[get_cache_store_kind()]()


def _check_store(cache: Any) -> None:
    missing = [
        name
        for name in REQUIRED_STORE_METHODS
        if not callable(getattr(cache, name, None))
    ]
    if missing:
        raise InvalidArgumentError(
            "cache", cache, f"a cache store providing {', '.join(missing)}"
        )


class MemoizedFunction(Generic[R]):
    """Callable returned by `memoize`.

    Attributes:
        func: The wrapped function.
        resolver: The key resolver, or None to key on the first argument.
        cache: The cache store. Assigning a new store is validated.
    """

    def __init__(
        self,
        func: Callable[..., R],
        resolver: Callable[..., Any] | None = None,
        *,
        cache: Any = None,
    ) -> None:
        if not callable(func):
            raise InvalidArgumentError("func", func, "callable")
        if resolver is not None and not callable(resolver):
            raise InvalidArgumentError("resolver", resolver, "callable")
        # Copy metadata first so attributes of a wrapped MemoizedFunction
        # don't clobber our own.
        update_wrapper(self, func)
        self.func = func
        self.resolver = resolver
        self.cache = _default_cache() if cache is None else cache

    @property
    def cache(self) -> Any:
        """The cache store backing this function."""
        return self._cache

    @cache.setter
    def cache(self, value: Any) -> None:
        _check_store(value)
        self._cache = value

    def resolve_key(self, *args: Any, **kwargs: Any) -> Any:
        """Return the cache key for a call with the given arguments."""
        if self.resolver is not None:
            return self.resolver(*args, **kwargs)
        return args[0] if args else None

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = self.resolve_key(*args, **kwargs)
        cache = self._cache
        if isinstance(cache, CacheStore):
            result = cache.get(key, UNSET)
            if result is not UNSET:
                return result
        elif cache.has(key):
            return cache.get(key)

        logger.debug("Cache miss for %r with key %r", self.func, key)
        result = self.func(*args, **kwargs)
        cache.set(key, result)
        return result

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        # Bound access passes the instance as the first argument, which makes
        # it the default cache key.
        if obj is None:
            return self
        return BoundMemoizedFunction(self, obj)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.func!r})"


class BoundMemoizedFunction(partial):
    """A `MemoizedFunction` bound to an instance.

    ``cache`` reads and assigns the store of the underlying function, so
    ``obj.method.cache`` and ``Class.method.cache`` are the same store.
    """

    @property
    def cache(self) -> Any:
        """The cache store of the bound `MemoizedFunction`."""
        return self.func.cache

    @cache.setter
    def cache(self, value: Any) -> None:
        self.func.cache = value


def memoize(
    func: Callable[..., R],
    resolver: Callable[..., Any] | None = None,
    *,
    cache: Any = None,
) -> MemoizedFunction[R]:
    """Create a function that memoizes the result of ``func``.

    The cache key is ``resolver(*args, **kwargs)`` when a resolver is given,
    otherwise the first positional argument (``None`` if there is none).
    Remaining arguments do **not** contribute to the default key.

    Errors raised by ``func`` propagate unchanged and are never cached.

    Args:
        func: The function to memoize.
        resolver: Optional function computing the cache key.
        cache: Optional store instance. Defaults to ``memoize.Cache()`` when
            that attribute is set, else the store named by
            ``DASHKIT_MEMOIZE_CACHE`` (`MapCache` by default).

    Returns:
        MemoizedFunction: The memoized callable, exposing ``cache``.

    Raises:
        InvalidArgumentError: If ``func`` or ``resolver`` is not callable, or
            ``cache`` lacks ``get``/``set``/``has``/``delete``.

    Example:
        >>> double = memoize(lambda n: n * 2)
        >>> double(2)
        4
        >>> double.cache.set(3, 9)
        >>> double(3)
        9

    To use a resolver as a decorator, bind it with `functools.partial`::

        @partial(memoize, resolver=lambda *args: args)
        def area(width, height): ...
    """
    return MemoizedFunction(func, resolver, cache=cache)


# Store factory override; None defers to configuration.
memoize.Cache = None  # type: ignore[attr-defined]


def memoize_capped(
    func: Callable[..., R], max_size: int = MAX_MEMOIZE_SIZE
) -> MemoizedFunction[R]:
    """Memoize ``func`` on its first argument, clearing the cache when it fills.

    Once the cache holds ``max_size`` entries it is cleared before the next
    key is resolved, which bounds memory for helpers that see arbitrary input.
    """

    def resolver(*args: Any, **_kwargs: Any) -> Any:
        cache = result.cache
        if len(cache) >= max_size:
            cache.clear()
        return args[0] if args else None

    result = memoize(func, resolver, cache=MapCache())
    return result
