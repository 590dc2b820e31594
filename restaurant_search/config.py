"""Runtime configuration defaults for search and debug logging."""

from __future__ import annotations

import math
import os

DEBOUNCE_SECONDS = 0.3
SUGGESTION_QUERY_LIMIT = 5
DEBUG_LOG_PATH = "/tmp/restaurant-search-debug.log"
CATALOG_PATH: str | None = None

_DEBOUNCE_ENV = "RESTAURANT_SEARCH_DEBOUNCE"
_DEBUG_LOG_ENV = "RESTAURANT_SEARCH_DEBUG_LOG"
_CATALOG_ENV = "RESTAURANT_SEARCH_CATALOG"


def resolve_debounce_seconds() -> float:
    """Return the debounce interval, honoring RESTAURANT_SEARCH_DEBOUNCE."""
    raw = os.environ.get(_DEBOUNCE_ENV, "").strip()
    if not raw:
        return DEBOUNCE_SECONDS
    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{_DEBOUNCE_ENV} must be a finite, non-negative number")
    return value


def resolve_debug_log_path() -> str:
    return os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEBUG_LOG_PATH


def resolve_catalog_path() -> str | None:
    """Return an optional JSON catalog path; None selects the built-in catalog."""
    return os.environ.get(_CATALOG_ENV, "").strip() or CATALOG_PATH
