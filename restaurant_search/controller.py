"""Search controller: owns SearchState and debounces recomputes."""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol

from restaurant_search.catalog import CatalogSource, FetchError
from restaurant_search.config import DEBOUNCE_SECONDS
from restaurant_search.debug_log import log_debug
from restaurant_search.filtering import derive_scopes, filter_restaurants, restaurant_suggestions, text_suggestions
from restaurant_search.models import ALL_SCOPE, Restaurant, SearchScope, SearchState


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]
Subscriber = Callable[["SearchController"], None]


def _loop_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


class SearchController:
    """Track query text and scope, and recompute results after input settles.

    Setters record values immediately and notify subscribers so the UI can
    echo keystrokes. Filtering itself runs once per quiet period of
    ``debounce_seconds`` using the latest query/scope pair.
    """

    def __init__(
        self,
        source: CatalogSource,
        *,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.source = source
        self.debounce_seconds = debounce_seconds
        self.state = SearchState()
        self.last_error: FetchError | None = None
        self.recompute_count = 0
        self._scheduler = scheduler or _loop_scheduler
        self._pending: TimerHandle | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def is_searching(self) -> bool:
        return self.state.is_searching

    @property
    def available_scopes(self) -> list[SearchScope]:
        return list(self.state.available_scopes)

    @property
    def has_pending_recompute(self) -> bool:
        return self._pending is not None

    def visible_results(self) -> list[Restaurant]:
        return list(self.state.visible_results)

    def text_suggestions(self) -> list[str]:
        return text_suggestions(self.state.query_text)

    def restaurant_suggestions(self) -> list[Restaurant]:
        return restaurant_suggestions(self.state.query_text, self.state.catalog)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for state changes and return an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_query_text(self, text: str) -> None:
        self.state.query_text = text
        self._notify()
        self._schedule_recompute()

    def set_scope(self, scope: SearchScope) -> None:
        self.state.scope = scope
        self._notify()
        self._schedule_recompute()

    def apply_suggestion(self, text: str) -> None:
        """Complete the query with a suggestion label or restaurant title."""
        self.set_query_text(text)

    async def load(self) -> None:
        """Fetch the catalog once. Failures are logged and leave the catalog empty."""
        log_debug(f"load_start source={type(self.source).__name__}")
        try:
            catalog = await self.source.fetch_catalog()
        except FetchError as exc:
            self.last_error = exc
            log_debug(f"load_failed error={exc!r}")
            self._notify()
            return

        self.last_error = None
        self.state.catalog = list(catalog)
        self.state.available_scopes = derive_scopes(self.state.catalog)
        log_debug(f"load_done restaurants={len(self.state.catalog)}")
        self._notify()
        if self.state.is_searching:
            # Results computed while the fetch was outstanding saw an empty catalog.
            self._schedule_recompute()

    def close(self) -> None:
        """Cancel pending work and drop subscribers."""
        self._cancel_pending()
        self._subscribers.clear()

    def _schedule_recompute(self) -> None:
        self._cancel_pending()
        self._pending = self._scheduler(self.debounce_seconds, self._on_debounce_elapsed)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _on_debounce_elapsed(self) -> None:
        self._pending = None
        self._recompute()
        self._notify()

    def _recompute(self) -> None:
        state = self.state
        self.recompute_count += 1
        if not state.query_text:
            state.filtered_results = []
            state.scope = ALL_SCOPE
        else:
            state.filtered_results = filter_restaurants(state.catalog, state.query_text, state.scope)
        log_debug(
            f"recompute query={state.query_text!r} scope={state.scope.title!r} results={len(state.filtered_results)}"
        )

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)
