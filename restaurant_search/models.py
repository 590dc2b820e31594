"""Domain models for restaurant search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class CuisineOption(str, Enum):
    """Closed set of cuisine tags, in declared order."""

    AMERICAN = "american"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    ANGOLANA = "angolana"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Restaurant:
    """A catalog entry. Identity is ``restaurant_id``."""

    restaurant_id: str
    title: str
    cuisine: CuisineOption

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> Restaurant:
        """Build a restaurant from the ``{id, title, category}`` wire shape."""
        try:
            restaurant_id = row["id"]
            title = row["title"]
            category = row["category"]
        except KeyError as exc:
            raise ValueError(f"restaurant record is missing {exc.args[0]!r}") from exc

        if not isinstance(restaurant_id, str) or not isinstance(title, str):
            raise ValueError("restaurant id and title must be strings")
        try:
            cuisine = CuisineOption(category)
        except ValueError as exc:
            raise ValueError(f"unknown category {category!r}") from exc
        return cls(restaurant_id=restaurant_id, title=title, cuisine=cuisine)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.restaurant_id, "title": self.title, "category": self.cuisine.value}


@dataclass(frozen=True)
class SearchScope:
    """Either the "All" scope (no cuisine) or one cuisine partition."""

    cuisine: CuisineOption | None = None

    @property
    def is_all(self) -> bool:
        return self.cuisine is None

    @property
    def title(self) -> str:
        if self.cuisine is None:
            return "All"
        return self.cuisine.label


ALL_SCOPE = SearchScope()


@dataclass
class SearchState:
    """Mutable search state owned by the controller."""

    catalog: list[Restaurant] = field(default_factory=list)
    query_text: str = ""
    scope: SearchScope = ALL_SCOPE
    available_scopes: list[SearchScope] = field(default_factory=lambda: [ALL_SCOPE])
    filtered_results: list[Restaurant] = field(default_factory=list)

    @property
    def is_searching(self) -> bool:
        return bool(self.query_text)

    @property
    def visible_results(self) -> list[Restaurant]:
        if self.is_searching:
            return self.filtered_results
        return self.catalog
