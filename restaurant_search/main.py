"""Entry point for the restaurant search Textual app."""

from __future__ import annotations

import argparse
import math

from restaurant_search.catalog import build_catalog_source
from restaurant_search.config import resolve_catalog_path, resolve_debounce_seconds
from restaurant_search.controller import SearchController
from restaurant_search.search_app import RestaurantSearchApp


def _non_negative_float(value: str) -> float:
    parsed = float(value)
    if not math.isfinite(parsed) or parsed < 0:
        raise argparse.ArgumentTypeError("must be a finite, non-negative number")
    return parsed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and search the restaurant catalog")
    parser.add_argument("--catalog", default=None, help="JSON file with {id, title, category} records")
    parser.add_argument(
        "--debounce",
        type=_non_negative_float,
        default=None,
        help="Seconds of input quiet time before results update",
    )
    return parser.parse_args(argv)


def build_app(args: argparse.Namespace) -> RestaurantSearchApp:
    catalog_path = args.catalog if args.catalog is not None else resolve_catalog_path()
    debounce = args.debounce if args.debounce is not None else resolve_debounce_seconds()
    controller = SearchController(build_catalog_source(catalog_path), debounce_seconds=debounce)
    return RestaurantSearchApp(controller)


def main(argv: list[str] | None = None) -> int:
    """Run the Textual application."""
    build_app(parse_args(argv)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
