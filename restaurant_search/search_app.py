"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Input, Static

from restaurant_search.catalog import build_catalog_source
from restaurant_search.config import resolve_catalog_path, resolve_debounce_seconds
from restaurant_search.constant import SEARCH_PROMPT
from restaurant_search.controller import SearchController
from restaurant_search.debug_log import log_debug
from restaurant_search.models import Restaurant
from restaurant_search.rendering import format_restaurant_row, format_scope_bar, format_suggestions
from restaurant_search.restaurant_modal import RestaurantModal


class RestaurantSearchApp(App):
    """A Textual app for browsing and searching the restaurant catalog."""

    TITLE = "Restaurantes"
    SUB_TITLE = "Browsing"

    CSS = """
    Screen {
        layout: vertical;
    }

    #search-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #search-input {
        margin-bottom: 1;
    }

    #scope-bar {
        height: 1;
        margin-bottom: 1;
    }

    #suggestions {
        height: auto;
        margin-bottom: 1;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        color: $text-muted;
    }
    """

    is_searching = reactive(False)
    selected_index = reactive(0)
    suggestion_index = reactive(None)

    BINDINGS = [
        Binding("ctrl+right", "cycle_scope(1)", "Next scope", priority=True),
        Binding("ctrl+left", "cycle_scope(-1)", "Previous scope", priority=True),
        Binding("tab", "cycle_suggestions", "Next suggestion", priority=True),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("escape", "clear_query", "Clear search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: SearchController | None = None) -> None:
        super().__init__()
        if controller is None:
            controller = SearchController(
                build_catalog_source(resolve_catalog_path()),
                debounce_seconds=resolve_debounce_seconds(),
            )
        self.controller = controller
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-pane"):
            yield Input(placeholder=SEARCH_PROMPT, id="search-input")
            yield Static(id="scope-bar")
            yield Static(id="suggestions")
            yield Static(id="results")
            yield Static("Loading...", id="status-line")

    def on_mount(self) -> None:
        self.controller.subscribe(self._on_state_change)
        self._refresh_all()
        self.run_worker(self.controller.load(), exclusive=True)

    def on_unmount(self) -> None:
        self.controller.close()
        log_debug("app_closed")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.value == self.controller.state.query_text:
            return
        self.selected_index = 0
        self.suggestion_index = None
        self.controller.set_query_text(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        highlighted = self.suggestion_index
        if highlighted is not None:
            self.suggestion_index = None
            entries = self._suggestion_entries()
            if 0 <= highlighted < len(entries):
                self.selected_index = 0
                self.controller.apply_suggestion(entries[highlighted])
                self._set_input_value(entries[highlighted])
                return

        results = self.controller.visible_results()
        if not results:
            return
        restaurant = results[min(self.selected_index, len(results) - 1)]
        # State changes while the modal is up are not drawn; catch up on close.
        self.push_screen(RestaurantModal(restaurant), lambda _: self._refresh_all())

    def watch_is_searching(self, searching: bool) -> None:
        self.sub_title = "Searching" if searching else "Browsing"

    def action_cycle_scope(self, delta: int) -> None:
        if isinstance(self.screen, RestaurantModal):
            return
        scopes = self.controller.available_scopes
        current = self.controller.state.scope
        idx = scopes.index(current) if current in scopes else 0
        self.selected_index = 0
        self.controller.set_scope(scopes[(idx + delta) % len(scopes)])

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, RestaurantModal):
            return
        results = self.controller.visible_results()
        if not results:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results()

    def action_cycle_suggestions(self) -> None:
        if isinstance(self.screen, RestaurantModal):
            return
        entries = self._suggestion_entries()
        if not entries:
            self.suggestion_index = None
        elif self.suggestion_index is None:
            self.suggestion_index = 0
        else:
            self.suggestion_index = (self.suggestion_index + 1) % len(entries)
        self._refresh_suggestions()

    def action_clear_query(self) -> None:
        if isinstance(self.screen, RestaurantModal):
            return
        if not self.controller.state.query_text:
            return
        self.selected_index = 0
        self.suggestion_index = None
        self.controller.set_query_text("")
        self._set_input_value("")

    def _on_state_change(self, controller: SearchController) -> None:
        self.is_searching = controller.is_searching
        self._refresh_all()

    def _suggestion_entries(self) -> list[str]:
        entries = self.controller.text_suggestions()
        entries.extend(restaurant.title for restaurant in self.controller.restaurant_suggestions())
        return entries

    def _refresh_all(self) -> None:
        self._refresh_scope_bar()
        self._refresh_suggestions()
        self._refresh_results()
        self._refresh_status()

    def _set_input_value(self, text: str) -> None:
        # Only for queries the app sets itself; typed text stays owned by the Input.
        try:
            search_input = self.query_one("#search-input", Input)
        except NoMatches:
            return
        if search_input.value != text:
            search_input.value = text

    def _refresh_scope_bar(self) -> None:
        try:
            bar = self.query_one("#scope-bar", Static)
        except NoMatches:
            return
        bar.update(format_scope_bar(self.controller.available_scopes, self.controller.state.scope))

    def _refresh_suggestions(self) -> None:
        try:
            widget = self.query_one("#suggestions", Static)
        except NoMatches:
            return
        widget.update(
            format_suggestions(
                self.controller.text_suggestions(),
                self.controller.restaurant_suggestions(),
                self.suggestion_index,
            )
        )

    def _visible_rows(self, widget: Static) -> int:
        # Each restaurant row takes two lines.
        height = widget.size.height
        if height <= 0:
            return 4
        return max(1, height // 2)

    def _window_bounds(self, total: int, rows: int, selected: int) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        start = max(0, selected - rows // 2)
        start = min(start, total - rows)
        return (start, start + rows)

    def _refresh_results(self) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return

        results: list[Restaurant] = self.controller.visible_results()
        if not results:
            results_widget.update("No results" if self.controller.is_searching else "")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(format_restaurant_row(results[idx], selected=idx == self.selected_index))

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status-line", Static)
        except NoMatches:
            return
        controller = self.controller
        if controller.last_error is not None:
            status.update(f"Could not load restaurants: {controller.last_error}")
            return
        if controller.is_searching:
            status.update(f"is searching: true  {len(controller.state.filtered_results)} match(es)")
            return
        status.update(f"is searching: false  {len(controller.state.catalog)} restaurant(s)")
