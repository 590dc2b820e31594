"""Static catalog and suggestion rules, typed."""

from __future__ import annotations

from restaurant_search.constant import (
    RESTAURANT_ROWS as _RESTAURANT_ROWS_RAW,
    RESTAURANT_SUGGESTION_RULES as _RESTAURANT_SUGGESTION_RULES_RAW,
    TEXT_SUGGESTION_RULES as _TEXT_SUGGESTION_RULES_RAW,
)
from restaurant_search.models import CuisineOption, Restaurant

BUILTIN_CATALOG: tuple[Restaurant, ...] = tuple(Restaurant.from_dict(row) for row in _RESTAURANT_ROWS_RAW)

TEXT_SUGGESTION_RULES: tuple[tuple[str, str], ...] = tuple(
    (trigger.lower(), label) for trigger, label in _TEXT_SUGGESTION_RULES_RAW
)

RESTAURANT_SUGGESTION_RULES: tuple[tuple[str, CuisineOption], ...] = tuple(
    (trigger.lower(), CuisineOption(value)) for trigger, value in _RESTAURANT_SUGGESTION_RULES_RAW
)

