#!/usr/bin/env python3
"""
Show a product's details and variants.

Usage:
    python3 scripts/show_product.py 8123456789012
    python3 scripts/show_product.py gid://shopify/Product/8123456789012
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from dotenv import load_dotenv

# Add project root to path for proper package imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_inventory_settings
from src.common.exceptions import ShopifyError
from src.common.log_config import setup_logging
from src.models import NOT_AVAILABLE
from src.shopify.catalog import ShopifyCatalog
from src.shopify.cli import add_shop_arguments, build_client, exit_for_error

load_dotenv()

logger = logging.getLogger(__name__)


def format_date(value: str) -> str:
    """ISO timestamp -> "March 5, 2025"."""
    if not value:
        return NOT_AVAILABLE
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_amount(value) -> str:
    return f"{value:,.2f}" if value is not None else NOT_AVAILABLE


def main() -> None:
    parser = argparse.ArgumentParser(description="Show product details and variants")
    parser.add_argument("product_id", help="Numeric product id or product GID")
    add_shop_arguments(parser)
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    settings = load_inventory_settings()

    with build_client(args, settings) as client:
        try:
            product = ShopifyCatalog(client).get_product(args.product_id)
        except ShopifyError as e:
            exit_for_error(e)

    print(f"{product.title}  [{product.status}]")
    print("=" * 60)
    print(f"Vendor:          {product.vendor}")
    print(f"Product Type:    {product.product_type}")
    print(f"Total Inventory: {product.total_inventory} units")
    print(f"Created:         {format_date(product.created_at)}")
    print(f"Last Updated:    {format_date(product.updated_at)}")
    if product.tags:
        print(f"Tags:            {', '.join(product.tags)}")

    print(f"\nImages ({len(product.images)})")
    for url in product.images or ["No images available"]:
        print(f"  {url}")

    if product.description:
        print(f"\nDescription\n  {product.description}")

    print(f"\nVariants ({len(product.variants)})")
    if not product.variants:
        print("  No variants available")
        return

    print(f"  {'Variant':<24} {'SKU':<16} {'Price':>10} {'Compare':>10} "
          f"{'Inventory':>9} {'Available':<9} Weight")
    for variant in product.variants:
        print(f"  {variant.title:<24} {variant.sku:<16} {format_amount(variant.price):>10} "
              f"{format_amount(variant.compare_at_price):>10} {variant.inventory_quantity:>9} "
              f"{'Yes' if variant.available_for_sale else 'No':<9} {variant.weight_display}")


if __name__ == "__main__":
    main()
