"""Editable static catalog and suggestion configuration."""

from __future__ import annotations

# Built-in catalog rows in display order. Values must match CuisineOption.
RESTAURANT_ROWS: list[dict[str, str]] = [
    {"id": "1", "title": "Burger Shack", "category": "american"},
    {"id": "2", "title": "Moça Fina", "category": "angolana"},
    {"id": "3", "title": "ありがとう", "category": "japanese"},
    {"id": "4", "title": "JulioPerro", "category": "italian"},
]

# (trigger, label) pairs checked against the lowercased query, in order.
TEXT_SUGGESTION_RULES: list[tuple[str, str]] = [
    ("bu", "Burger"),
    ("mo", "Moça"),
]

# (trigger, cuisine value) pairs; a match suggests every restaurant of that cuisine.
RESTAURANT_SUGGESTION_RULES: list[tuple[str, str]] = [
    ("ita", "italian"),
    ("an", "angolana"),
]

SEARCH_PROMPT = "Search restaurants..."
