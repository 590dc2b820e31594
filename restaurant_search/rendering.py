"""Rich rendering helpers for restaurants, scopes and suggestions."""

from __future__ import annotations

from rich.text import Text

from restaurant_search.models import CuisineOption, Restaurant, SearchScope

_BADGE_STYLES: dict[CuisineOption, str] = {
    CuisineOption.AMERICAN: "bold #ffffff on #b23a48",
    CuisineOption.ITALIAN: "bold #0b1f0f on #5fbf72",
    CuisineOption.JAPANESE: "bold #ffffff on #2f6db5",
    CuisineOption.ANGOLANA: "bold #1f1400 on #e0a23b",
}


def badge_style(cuisine: CuisineOption | None) -> str:
    """Return a consistent badge style for cuisine tags."""
    if cuisine is None:
        return "bold #ffffff on #555555"
    return _BADGE_STYLES[cuisine]


def format_restaurant_row(restaurant: Restaurant, *, selected: bool = False) -> Text:
    """Render the title line with the capitalized cuisine underneath."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(restaurant.title, style="bold")
    text.append("\n    ")
    text.append(restaurant.cuisine.label, style="dim")
    return text


def format_scope_bar(scopes: list[SearchScope], current: SearchScope) -> Text:
    """Render every scope title, highlighting the active one."""
    text = Text()
    for idx, scope in enumerate(scopes):
        if idx > 0:
            text.append(" ")
        if scope == current:
            text.append(f" {scope.title} ", style=badge_style(scope.cuisine))
        else:
            text.append(f" {scope.title} ", style="dim")
    return text


def format_suggestions(labels: list[str], restaurants: list[Restaurant], highlighted: int | None) -> Text:
    """Render text suggestions followed by restaurant suggestions.

    ``highlighted`` indexes into the combined list.
    """
    text = Text()
    entries = [(label, None) for label in labels]
    entries.extend((restaurant.title, restaurant.cuisine) for restaurant in restaurants)
    if not entries:
        return text

    for idx, (label, cuisine) in enumerate(entries):
        if idx > 0:
            text.append("  ")
        style = "reverse" if idx == highlighted else ""
        if cuisine is not None:
            text.append(cuisine.label[0], style=badge_style(cuisine))
            text.append(" ")
        text.append(label, style=style)
    return text
