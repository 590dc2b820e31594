"""Restaurant detail modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from restaurant_search.models import Restaurant
from restaurant_search.rendering import badge_style


class RestaurantModal(ModalScreen[None]):
    """Centered modal showing one restaurant."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    RestaurantModal {
        align: center middle;
        background: $background 60%;
    }

    #restaurant-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #restaurant-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #restaurant-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, restaurant: Restaurant) -> None:
        super().__init__()
        self.restaurant = restaurant

    def compose(self) -> ComposeResult:
        with Container(id="restaurant-dialog"):
            yield Static(self.restaurant.title, id="restaurant-title")
            yield Static(id="restaurant-body")
            yield Static("Esc / q / Ctrl+C to close", id="restaurant-help")

    def on_mount(self) -> None:
        body = Text()
        cuisine = self.restaurant.cuisine
        body.append(f" {cuisine.label} ", style=badge_style(cuisine))
        body.append(f"\nid {self.restaurant.restaurant_id}", style="dim")
        self.query_one("#restaurant-body", Static).update(body)

    def action_close(self) -> None:
        self.dismiss()
