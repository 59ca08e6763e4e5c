"""Pytest fixtures for cache store contract tests.

Provided fixtures
-----------------
- **store**: Parametrized factory returning a **fresh** `CacheStore` per test.
  Currently supports `"map"` (`MapCache`) and `"locked"` (`LockedMapCache`).
  To exercise an additional store, add its key to `params` and branch in the
  fixture body.
"""

from __future__ import annotations

import pytest

from dashkit.memoize import CacheStore, LockedMapCache, MapCache


@pytest.fixture(params=["map", "locked"])
def store(request: pytest.FixtureRequest) -> CacheStore:
    """Return a fresh, empty store for the requested implementation."""

    match request.param:
        case "map":
            return MapCache()
        case "locked":
            return LockedMapCache()
        case _:
            raise ValueError(f"unknown store type: {request.param}")
