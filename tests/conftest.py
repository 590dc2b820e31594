from __future__ import annotations

from typing import Callable

import pytest

from restaurant_search.catalog import FetchError, StaticCatalogSource
from restaurant_search.controller import SearchController
from restaurant_search.data import BUILTIN_CATALOG


class _ManualTimer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic stand-in for ``loop.call_later``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[_ManualTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> _ManualTimer:
        timer = _ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[_ManualTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        while True:
            due = [timer for timer in self.pending if timer.due <= self.now]
            if not due:
                return
            timer = min(due, key=lambda t: t.due)
            self.timers.remove(timer)
            timer.callback()


class FailingSource:
    def __init__(self, failures: int = 1) -> None:
        self.failures = failures
        self.calls = 0

    async def fetch_catalog(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise FetchError("catalog unavailable")
        return list(BUILTIN_CATALOG)


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("RESTAURANT_SEARCH_DEBUG_LOG", str(path))
    return path


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(scheduler):
    return SearchController(StaticCatalogSource(), debounce_seconds=0.3, scheduler=scheduler)


@pytest.fixture
def catalog():
    return list(BUILTIN_CATALOG)


@pytest.fixture
def failing_source():
    return FailingSource()
