"""
Shopify Catalog

Read-only access to collections and products through the Admin GraphQL
API. ShopifyCatalog is the paged source behind CursorPaginator and also
serves the collections overview and the product detail page.
"""

import logging
from typing import Dict, List, Optional

from ..common.exceptions import InvalidPayloadError, NotFoundError
from ..inventory.normalizer import normalize_product_detail
from ..inventory.stock import count_in_stock
from ..models import CollectionSummary, Direction, ProductDetail, StockFilter
from .api_client import ShopifyAPIClient
from .queries import QUERY_COLLECTION_PRODUCTS, QUERY_COLLECTIONS, QUERY_PRODUCT

logger = logging.getLogger(__name__)

GID_PREFIX = "gid://shopify/"

# Product search syntax for each stock tab
STOCK_QUERIES = {
    StockFilter.IN_STOCK: "inventory_total:>0",
    StockFilter.SOLD_OUT: "inventory_total:<=0",
}


def to_gid(resource: str, identifier: str) -> str:
    """
    Build a Shopify GID from a numeric id; GIDs pass through unchanged.

    Args:
        resource: GraphQL type name ("Collection", "Product")
        identifier: "123" or "gid://shopify/Collection/123"

    Raises:
        ValueError: If the id is empty or a GID of another resource
    """
    identifier = str(identifier).strip()
    if not identifier:
        raise ValueError(f"{resource} id is required")

    if identifier.startswith(GID_PREFIX):
        expected = f"{GID_PREFIX}{resource}/"
        if not identifier.startswith(expected):
            raise ValueError(f"Expected a {resource} id, got {identifier}")
        return identifier

    return f"{GID_PREFIX}{resource}/{identifier}"


def numeric_id(identifier: str) -> str:
    """Trailing id of a GID ("gid://shopify/Collection/123" -> "123")."""
    return str(identifier).rstrip('/').rsplit('/', 1)[-1]


def stock_search_query(collection_id: str, stock_filter: StockFilter) -> str:
    """Product search string selecting one stock tab of a collection."""
    return f"collection_id:{numeric_id(collection_id)} AND {STOCK_QUERIES[stock_filter]}"


class ShopifyCatalog:
    """
    Collections and products of one shop.

    Usage:
        with ShopifyAPIClient(shop, token) as client:
            catalog = ShopifyCatalog(client)
            for summary in catalog.list_collections():
                print(summary.title, summary.in_stock_products)
    """

    def __init__(self, client: ShopifyAPIClient):
        self.client = client

    def list_collections(self, first: int = 50) -> List[CollectionSummary]:
        """
        Fetch the collections overview.

        The in-stock count covers the first 250 products of each collection.
        """
        data = self.client.graphql_request(QUERY_COLLECTIONS, {"first": first})
        edges = (data.get("collections") or {}).get("edges")
        if edges is None:
            raise InvalidPayloadError("Collections response has no edges")

        summaries = []
        for edge in edges:
            node = edge.get("node") or {}
            products = [
                product_edge.get("node") or {}
                for product_edge in (node.get("products") or {}).get("edges") or []
            ]
            image = node.get("image") or {}
            title = node.get("title") or ""
            summaries.append(CollectionSummary(
                id=node.get("id", ""),
                title=title,
                total_products=(node.get("productsCount") or {}).get("count") or 0,
                in_stock_products=count_in_stock(p.get("totalInventory") for p in products),
                image=image.get("url"),
                image_alt=image.get("altText") or title,
            ))

        logger.info("Found %d collections", len(summaries))
        return summaries

    def fetch_page(
        self,
        collection_id: str,
        page_size: int = 30,
        cursor: Optional[str] = None,
        direction: Direction = Direction.FORWARD,
        stock_filter: StockFilter = StockFilter.IN_STOCK,
    ) -> Optional[Dict]:
        """
        Fetch one raw page of a collection's products.

        Forward pages use first/after, backward pages last/before; without
        a cursor that is the start or the end of the sequence.

        Returns:
            ``{"title", "edges", "pageInfo"}`` or None if the collection
            does not exist
        """
        gid = to_gid("Collection", collection_id)
        variables = {"id": gid, "query": stock_search_query(gid, stock_filter)}
        if direction is Direction.FORWARD:
            variables["first"] = page_size
            if cursor:
                variables["after"] = cursor
        else:
            variables["last"] = page_size
            if cursor:
                variables["before"] = cursor

        data = self.client.graphql_request(QUERY_COLLECTION_PRODUCTS, variables)

        collection = data.get("collection")
        if not collection:
            logger.warning("Collection not found: %s", gid)
            return None

        products = data.get("products") or {}
        return {
            "title": collection.get("title") or "",
            "edges": products.get("edges") or [],
            "pageInfo": products.get("pageInfo"),
        }

    def get_product(self, product_id: str) -> ProductDetail:
        """
        Fetch product details with images and variants.

        Raises:
            NotFoundError: If the product does not exist
        """
        gid = to_gid("Product", product_id)
        data = self.client.graphql_request(QUERY_PRODUCT, {"id": gid})

        product = data.get("product")
        if not product:
            raise NotFoundError(f"Product not found: {gid}")

        return normalize_product_detail(product)
