"""Global pytest fixtures for dashkit."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from dashkit.config import CACHE_STORE_ENV
from dashkit.memoize import memoize


class CallCounter:
    """Wrap a function and record every call made to it."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self.func(*args, **kwargs)

    @property
    def count(self) -> int:
        """Number of calls recorded so far."""
        return len(self.calls)


@pytest.fixture
def counted() -> Callable[[Callable[..., Any]], CallCounter]:
    """Factory wrapping a function in a `CallCounter`.

    Example:
        ```py
        def test_something(counted):
            double = counted(lambda n: n * 2)
        ```
    """
    return CallCounter


@pytest.fixture(autouse=True)
def _isolate_memoize_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the environment and ``memoize.Cache`` from leaking between tests."""
    monkeypatch.delenv(CACHE_STORE_ENV, raising=False)
    monkeypatch.setattr(memoize, "Cache", None)


TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {"unit": "unit", "contract": "contract", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each item after its top-level test folder (`unit`, `contract`, `e2e`)."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if (name := DIRECTORY_MARKERS.get(folder)) is None:
            continue
        if not any(marker.name == name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, name))
