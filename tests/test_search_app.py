import pytest
from textual.widgets import Input

from restaurant_search.catalog import StaticCatalogSource
from restaurant_search.controller import SearchController
from restaurant_search.models import ALL_SCOPE, CuisineOption, SearchScope
from restaurant_search.restaurant_modal import RestaurantModal
from restaurant_search.search_app import RestaurantSearchApp


def _titles(restaurants):
    return [restaurant.title for restaurant in restaurants]


def _make_app(source=None):
    controller = SearchController(source or StaticCatalogSource(), debounce_seconds=0.01)
    return RestaurantSearchApp(controller)


@pytest.mark.asyncio
async def test_app_loads_catalog_on_mount():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert len(app.controller.state.catalog) == 4
        assert len(app.controller.available_scopes) == 5
        assert app.title == "Restaurantes"
        assert app.sub_title == "Browsing"


@pytest.mark.asyncio
async def test_typing_filters_results():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("b", "u")
        await pilot.pause(0.1)

        assert app.controller.state.query_text == "bu"
        assert _titles(app.controller.visible_results()) == ["Burger Shack"]
        assert app.is_searching
        assert app.sub_title == "Searching"


@pytest.mark.asyncio
async def test_scope_cycling_narrows_results():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("a")
        await pilot.press("ctrl+right")
        await pilot.pause(0.1)

        assert app.controller.state.scope == SearchScope(CuisineOption.AMERICAN)
        assert _titles(app.controller.state.filtered_results) == ["Burger Shack"]


@pytest.mark.asyncio
async def test_tab_and_enter_apply_suggestion():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("b", "u")
        await pilot.pause(0.1)
        await pilot.press("tab")
        assert app.suggestion_index == 0

        await pilot.press("enter")
        await pilot.pause(0.1)
        assert app.controller.state.query_text == "Burger"
        assert app.query_one("#search-input", Input).value == "Burger"
        assert app.suggestion_index is None


@pytest.mark.asyncio
async def test_clear_query_resets_scope():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("j")
        await pilot.press("ctrl+left")
        await pilot.pause(0.1)
        assert app.controller.state.scope == SearchScope(CuisineOption.ITALIAN)

        app.action_clear_query()
        await pilot.pause(0.1)
        assert app.controller.state.query_text == ""
        assert app.controller.state.scope == ALL_SCOPE
        assert app.query_one("#search-input", Input).value == ""
        assert not app.is_searching


@pytest.mark.asyncio
async def test_enter_opens_restaurant_modal():
    app = _make_app()
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("down")
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, RestaurantModal)
        assert app.screen.restaurant.title == "Moça Fina"

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, RestaurantModal)


@pytest.mark.asyncio
async def test_failed_load_keeps_app_running(failing_source):
    app = _make_app(failing_source)
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert app.controller.state.catalog == []
        assert app.controller.last_error is not None
        assert app.is_running


@pytest.mark.asyncio
async def test_recompute_keeps_keystroke_not_yet_handled(scheduler):
    controller = SearchController(StaticCatalogSource(), scheduler=scheduler)
    app = RestaurantSearchApp(controller)
    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("b", "u")
        await pilot.pause()
        assert controller.state.query_text == "bu"

        search_input = app.query_one("#search-input", Input)
        search_input.value = "bur"
        # Debounce fires before the Input.Changed for "bur" is dispatched.
        scheduler.advance(0.3)
        assert controller.recompute_count == 1
        await pilot.pause()
        await pilot.pause()

        assert search_input.value == "bur"
        assert controller.state.query_text == "bur"
        assert controller.has_pending_recompute
