"""Catalog sources: the built-in list and an optional JSON file."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Protocol

from restaurant_search.data import BUILTIN_CATALOG
from restaurant_search.models import Restaurant


class FetchError(Exception):
    """Raised when the restaurant catalog cannot be retrieved."""


class CatalogSource(Protocol):
    async def fetch_catalog(self) -> list[Restaurant]: ...


class StaticCatalogSource:
    """Serve the built-in catalog."""

    def __init__(self, restaurants: tuple[Restaurant, ...] = BUILTIN_CATALOG) -> None:
        self.restaurants = restaurants

    async def fetch_catalog(self) -> list[Restaurant]:
        return list(self.restaurants)


class JsonCatalogSource:
    """Load restaurants from a JSON array of ``{id, title, category}`` objects."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def fetch_catalog(self) -> list[Restaurant]:
        return await asyncio.to_thread(self._read)

    def _read(self) -> list[Restaurant]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"cannot read catalog {self.path}: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise FetchError(f"catalog {self.path} is not valid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise FetchError(f"catalog {self.path} must contain a JSON array")

        restaurants: list[Restaurant] = []
        for idx, row in enumerate(payload):
            if not isinstance(row, dict):
                raise FetchError(f"catalog {self.path} entry {idx} is not an object")
            try:
                restaurants.append(Restaurant.from_dict(row))
            except ValueError as exc:
                raise FetchError(f"catalog {self.path} entry {idx}: {exc}") from exc
        return restaurants


def build_catalog_source(path: str | Path | None = None) -> CatalogSource:
    """Pick the JSON source when a path is given, else the built-in catalog."""
    if path:
        return JsonCatalogSource(path)
    return StaticCatalogSource()
