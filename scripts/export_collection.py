#!/usr/bin/env python3
"""
Export a collection tab to CSV for Excel.

By default exports the page window a browse would show (same --cursor,
--direction and --search). --all-pages walks every window of the tab.

Output file: <CollectionTitle>_<InStock|SoldOut>_<YYYY-MM-DD>.csv

Usage:
    # Current (first) page of in-stock products
    python3 scripts/export_collection.py 412345678901

    # Whole sold-out tab
    python3 scripts/export_collection.py 412345678901 --stock sold-out --all-pages

    # Custom directory, no byte-order mark
    python3 scripts/export_collection.py 412345678901 --output-dir /tmp/exports --no-bom
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
    CursorPaginator,
    export_all_pages,
    export_view,
    load_collection_view,
)
from src.models import StockFilter, ViewState
from src.shopify.catalog import ShopifyCatalog
from src.shopify.cli import add_shop_arguments, build_client, exit_for_error

load_dotenv()

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Export a collection tab to CSV")
    parser.add_argument("collection_id", help="Numeric collection id or collection GID")
    add_shop_arguments(parser)
    parser.add_argument("--stock", choices=[f.value for f in StockFilter], default="in-stock")
    parser.add_argument("--cursor", help="Opaque cursor of the page to export")
    parser.add_argument("--direction", choices=["next", "previous"], default="next")
    parser.add_argument("--search", default="", help="Only export rows matching this text")
    parser.add_argument("--all-pages", action="store_true", help="Export every page of the tab")
    parser.add_argument("--page-size", type=int, help="Products per page (default: from config)")
    parser.add_argument("--output-dir", help="Directory for the CSV (default: export_dir from config)")
    parser.add_argument("--no-bom", action="store_true", help="Omit the UTF-8 byte-order mark")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    settings = load_inventory_settings()

    state = ViewState.from_query_params({
        "stock": args.stock,
        "direction": args.direction,
        "cursor": args.cursor,
        "q": args.search,
    })
    exporter = CollectionCSVExporter(
        columns=settings.export_columns,
        include_bom=settings.include_bom and not args.no_bom,
    )

    with build_client(args, settings) as client:
        paginator = CursorPaginator(ShopifyCatalog(client), page_size=args.page_size or settings.page_size)
        try:
            if args.all_pages:
                result = export_all_pages(paginator, args.collection_id, state, exporter)
            else:
                result = export_view(load_collection_view(paginator, args.collection_id, state), exporter)
        except ShopifyError as e:
            exit_for_error(e)

    if not result.ok:
        print(result.notice)
        return

    path = result.write(args.output_dir or settings.export_dir)
    print(f"Exported {result.row_count} products to {path}")


if __name__ == "__main__":
    main()
