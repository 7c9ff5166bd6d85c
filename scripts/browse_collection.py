#!/usr/bin/env python3
"""
Browse a collection's products one page window at a time.

Search only looks at the page currently shown, not the whole collection.

Usage:
    # First page of in-stock products
    python3 scripts/browse_collection.py 412345678901

    # Sold-out tab, searching the page for "500mg"
    python3 scripts/browse_collection.py 412345678901 --stock sold-out --search 500mg

    # Continue from a cursor printed by a previous run
    python3 scripts/browse_collection.py 412345678901 --cursor eyJsYXN0... --direction next

    # Interactive: n(ext), p(revious), t(ab), s(earch) <text>, e(xport), q(uit)
    python3 scripts/browse_collection.py 412345678901 --interactive
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

# Add project root to path for proper package imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_inventory_settings
from src.common.exceptions import ShopifyError
from src.common.log_config import setup_logging
from src.inventory import (
    CollectionCSVExporter,
    CollectionView,
    CursorPaginator,
    export_view,
    load_collection_view,
    refilter_view,
)
from src.models import StockFilter, ViewState
from src.shopify.catalog import ShopifyCatalog
from src.shopify.cli import add_shop_arguments, build_client, exit_for_error

load_dotenv()

logger = logging.getLogger(__name__)

PROMPT = "[n]ext [p]revious [t]ab [s]earch <text> [e]xport [q]uit > "


def print_view(view: CollectionView) -> None:
    tab = view.state.stock.description.title()
    print(f"\n{view.title} - {tab}")
    print(view.heading)
    print("-" * 100)

    if view.empty_message:
        print(view.empty_message)
    else:
        print(f"{'Product Name':<40} {'Weight':<14} {'Price':>14} {'Barcode':<16} {'Units':>6}")
        for record in view.records:
            print(f"{record.title[:40]:<40} {record.weight_display[:14]:<14} "
                  f"{record.price.display():>14} {record.barcode[:16]:<16} "
                  f"{record.available_units:>6}")

    print("-" * 100)
    if view.previous_state():
        print(f"Previous: --cursor {view.window.start_cursor} --direction previous")
    if view.next_state():
        print(f"Next:     --cursor {view.window.end_cursor} --direction next")


def interactive(paginator, collection_id, state, exporter, export_dir) -> None:
    view = load_collection_view(paginator, collection_id, state)
    print_view(view)

    while True:
        try:
            command = input(PROMPT).strip()
        except EOFError:
            print()
            return

        action, _, argument = command.partition(" ")
        action = action.lower()

        if action in ("q", "quit"):
            return
        if action in ("n", "next"):
            state = view.next_state()
            if state is None:
                print("Already on the last page.")
                continue
        elif action in ("p", "previous"):
            state = view.previous_state()
            if state is None:
                print("Already on the first page.")
                continue
        elif action in ("t", "tab"):
            other = StockFilter.SOLD_OUT if view.state.stock is StockFilter.IN_STOCK else StockFilter.IN_STOCK
            state = view.state.with_stock(other)
        elif action in ("s", "search"):
            state = view.state.with_query(argument)
        elif action in ("e", "export"):
            result = export_view(view, exporter)
            if result.ok:
                print(f"Exported {result.row_count} products to {result.write(export_dir)}")
            else:
                print(result.notice)
            continue
        else:
            print("Unknown command.")
            continue

        # Search re-filters the loaded window, everything else refetches
        if action in ("s", "search"):
            view = refilter_view(view, state.query)
        else:
            view = load_collection_view(paginator, collection_id, state)
        print_view(view)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Browse a collection's products (search covers the current page only)"
    )
    parser.add_argument("collection_id", help="Numeric collection id or collection GID")
    add_shop_arguments(parser)
    parser.add_argument("--stock", choices=[f.value for f in StockFilter], default="in-stock")
    parser.add_argument("--cursor", help="Opaque cursor from a previous page")
    parser.add_argument("--direction", choices=["next", "previous"], default="next")
    parser.add_argument("--search", default="", help="Filter the current page by name, barcode or weight")
    parser.add_argument("--page-size", type=int, help="Products per page (default: from config)")
    parser.add_argument("--interactive", "-i", action="store_true", help="Navigate interactively")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    settings = load_inventory_settings()

    state = ViewState.from_query_params({
        "stock": args.stock,
        "direction": args.direction,
        "cursor": args.cursor,
        "q": args.search,
    })

    with build_client(args, settings) as client:
        paginator = CursorPaginator(ShopifyCatalog(client), page_size=args.page_size or settings.page_size)
        try:
            if args.interactive:
                exporter = CollectionCSVExporter(settings.export_columns, settings.include_bom)
                interactive(paginator, args.collection_id, state, exporter, settings.export_dir)
            else:
                print_view(load_collection_view(paginator, args.collection_id, state))
        except ShopifyError as e:
            exit_for_error(e)


if __name__ == "__main__":
    main()
