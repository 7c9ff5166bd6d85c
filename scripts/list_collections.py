#!/usr/bin/env python3
"""
List the shop's collections with their in-stock product counts.

Usage:
    python3 scripts/list_collections.py --shop my-store
    python3 scripts/list_collections.py --limit 10   # shop/token from .env
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
from src.shopify.catalog import ShopifyCatalog, numeric_id
from src.shopify.cli import add_shop_arguments, build_client, exit_for_error

load_dotenv()

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="List collections with in-stock counts")
    add_shop_arguments(parser)
    parser.add_argument(
        "--limit",
        type=int,
        metavar="N",
        help="Number of collections to fetch (default: collections_limit from config)",
    )
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    settings = load_inventory_settings()

    with build_client(args, settings) as client:
        catalog = ShopifyCatalog(client)
        try:
            collections = catalog.list_collections(first=args.limit or settings.collections_limit)
        except ShopifyError as e:
            exit_for_error(e)

    if not collections:
        print("No collections found. Create some collections in your Shopify store to see them here.")
        return

    print(f"{'ID':<16} {'In stock':>8} {'Total':>7}  Title")
    print("-" * 60)
    for summary in collections:
        print(f"{numeric_id(summary.id):<16} {summary.in_stock_products:>8} "
              f"{summary.total_products:>7}  {summary.title}")


if __name__ == "__main__":
    main()
