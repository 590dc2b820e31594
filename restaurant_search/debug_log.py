"""Append-only debug log shared by the controller and the app."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from restaurant_search.config import resolve_debug_log_path


def log_debug(message: str) -> None:
    """Append one timestamped line to the debug log file."""
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = Path(resolve_debug_log_path())
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
