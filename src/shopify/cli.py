"""
Shared command-line plumbing for the inventory scripts.

Every script takes the same shop/token/logging flags and reports Shopify
failures the same way.
"""

import argparse
import logging
import sys

from ..common.config_loader import InventorySettings, resolve_credentials
from ..common.exceptions import NotFoundError, ShopifyError
from .api_client import ShopifyAPIClient

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def add_shop_arguments(parser: argparse.ArgumentParser) -> None:
    """Add --shop, --token, --verbose and --quiet."""
    parser.add_argument(
        "--shop",
        help="Shopify shop name (default: reads SHOPIFY_SHOP env var)",
    )
    parser.add_argument(
        "--token",
        help="Shopify Admin API access token (default: reads SHOPIFY_ACCESS_TOKEN env var)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors")


def build_client(args: argparse.Namespace, settings: InventorySettings) -> ShopifyAPIClient:
    """
    Create an API client from CLI arguments and environment.

    Exits with status 1 when shop or token cannot be resolved.
    """
    shop, token = resolve_credentials(args.shop, args.token)
    if not shop:
        print("ERROR: No Shopify shop. Use --shop or set SHOPIFY_SHOP.")
        sys.exit(EXIT_ERROR)
    if not token:
        print("ERROR: No Shopify access token. Use --token or set SHOPIFY_ACCESS_TOKEN.")
        sys.exit(EXIT_ERROR)

    return ShopifyAPIClient(shop=shop, access_token=token, api_version=settings.api_version)


def exit_for_error(error: ShopifyError) -> None:
    """Report a Shopify failure and exit (2 for not found, 1 otherwise)."""
    logger.error("%s (HTTP %d)", error.message, error.status_code)
    print(f"ERROR: {error.message}")
    sys.exit(EXIT_NOT_FOUND if isinstance(error, NotFoundError) else EXIT_ERROR)
