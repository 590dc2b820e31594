"""Pure filtering and suggestion helpers over a restaurant catalog."""

from __future__ import annotations

from typing import Iterable, Sequence

from restaurant_search.config import SUGGESTION_QUERY_LIMIT
from restaurant_search.data import RESTAURANT_SUGGESTION_RULES, TEXT_SUGGESTION_RULES
from restaurant_search.models import ALL_SCOPE, CuisineOption, Restaurant, SearchScope


def partition_by_scope(catalog: Iterable[Restaurant], scope: SearchScope) -> list[Restaurant]:
    """Keep restaurants inside ``scope``; the All scope keeps everything."""
    if scope.is_all:
        return list(catalog)
    return [restaurant for restaurant in catalog if restaurant.cuisine == scope.cuisine]


def match_by_text(restaurants: Iterable[Restaurant], query_text: str) -> list[Restaurant]:
    """Case-insensitive substring match against title or cuisine value."""
    q = query_text.lower()
    return [
        restaurant
        for restaurant in restaurants
        if q in restaurant.title.lower() or q in restaurant.cuisine.value.lower()
    ]


def filter_restaurants(catalog: Sequence[Restaurant], query_text: str, scope: SearchScope) -> list[Restaurant]:
    """Return search results; an empty query means "not searching" and yields []."""
    if not query_text:
        return []
    return match_by_text(partition_by_scope(catalog, scope), query_text)


def derive_scopes(catalog: Iterable[Restaurant]) -> list[SearchScope]:
    """All first, then one scope per cuisine in first-seen order."""
    scopes = [ALL_SCOPE]
    seen: set[CuisineOption] = set()
    for restaurant in catalog:
        if restaurant.cuisine in seen:
            continue
        seen.add(restaurant.cuisine)
        scopes.append(SearchScope(cuisine=restaurant.cuisine))
    return scopes


def text_suggestions(
    query_text: str,
    *,
    rules: Sequence[tuple[str, str]] = TEXT_SUGGESTION_RULES,
    limit: int = SUGGESTION_QUERY_LIMIT,
) -> list[str]:
    """Rule labels whose trigger appears in the query, then every cuisine label.

    Nothing is suggested once the query reaches ``limit`` characters.
    """
    if len(query_text) >= limit:
        return []
    q = query_text.lower()
    suggestions = [label for trigger, label in rules if trigger in q]
    suggestions.extend(option.label for option in CuisineOption)
    return suggestions


def restaurant_suggestions(
    query_text: str,
    catalog: Sequence[Restaurant],
    *,
    rules: Sequence[tuple[str, CuisineOption]] = RESTAURANT_SUGGESTION_RULES,
    limit: int = SUGGESTION_QUERY_LIMIT,
) -> list[Restaurant]:
    """Restaurants of every cuisine whose rule trigger appears in the query.

    Rules are applied in order and their results are concatenated without
    de-duplication.
    """
    if len(query_text) >= limit:
        return []
    q = query_text.lower()
    suggestions: list[Restaurant] = []
    for trigger, cuisine in rules:
        if trigger not in q:
            continue
        suggestions.extend(restaurant for restaurant in catalog if restaurant.cuisine == cuisine)
    return suggestions
