"""
Shopify integration modules.

Modules:
    api_client - GraphQL client for the Shopify Admin API
    catalog - Collections overview, collection pages and product details
    queries - GraphQL query strings
"""

from ..common.exceptions import (
    InvalidPayloadError,
    NotFoundError,
    PaginationError,
    ShopifyError,
    UpstreamError,
)
from .api_client import ShopifyAPIClient
from .catalog import ShopifyCatalog, numeric_id, to_gid

__all__ = [
    # API Client
    'ShopifyAPIClient',
    # Catalog
    'ShopifyCatalog',
    'numeric_id',
    'to_gid',
    # Errors
    'ShopifyError',
    'NotFoundError',
    'UpstreamError',
    'InvalidPayloadError',
    'PaginationError',
]
