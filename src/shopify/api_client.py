"""
Shopify API Client

Client for the Shopify Admin GraphQL API.
Handles authentication, rate limiting and error reporting.
"""

import logging
import time
from typing import Dict, Optional

import requests

from ..common.exceptions import UpstreamError

logger = logging.getLogger(__name__)

SHOP_DOMAIN = ".myshopify.com"


def normalize_shop(shop: str) -> str:
    """Shop handle from "my-store", "my-store.myshopify.com" or a full URL."""
    shop = shop.strip().rstrip("/")
    for scheme in ("https://", "http://"):
        if shop.startswith(scheme):
            shop = shop[len(scheme):]
    return shop.split(SHOP_DOMAIN)[0]


class ShopifyAPIClient:
    """
    Client for the Shopify Admin GraphQL API.

    Handles:
    - Authentication
    - Rate limiting (2 requests/second)
    - Converting HTTP and GraphQL failures into UpstreamError

    Failures are not retried: each page view issues one request and
    reports whatever went wrong.

    Usage:
        with ShopifyAPIClient(shop="my-store", access_token="shpat_xxx") as client:
            data = client.graphql_request(query, variables)
    """

    API_VERSION = "2025-01"
    DEFAULT_TIMEOUT = 30

    def __init__(self, shop: str, access_token: str, api_version: Optional[str] = None):
        """
        Initialize the API client.

        Args:
            shop: Shop name (without .myshopify.com) or full domain
            access_token: Shopify Admin API access token
            api_version: Admin API version (defaults to API_VERSION)
        """
        self.shop = normalize_shop(shop)

        self.api_version = api_version or self.API_VERSION
        self.access_token = access_token
        self.base_url = f"https://{self.shop}{SHOP_DOMAIN}/admin/api/{self.api_version}"
        self.graphql_url = f"{self.base_url}/graphql.json"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

        # Rate limiting
        self.requests_made = 0
        self.last_request_time = 0.0
        self.min_request_interval = 0.5  # 2 req/sec

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _rate_limit(self):
        """Implement rate limiting (2 requests/second max)."""
        now = time.time()
        elapsed = now - self.last_request_time

        if elapsed < self.min_request_interval:
            time.sleep(self.min_request_interval - elapsed)

        self.last_request_time = time.time()
        self.requests_made += 1

    def graphql_request(
        self,
        query: str,
        variables: Optional[Dict] = None,
        timeout: int = DEFAULT_TIMEOUT
    ) -> Dict:
        """
        Make a GraphQL API request.

        Args:
            query: GraphQL query
            variables: Query variables
            timeout: Request timeout in seconds

        Returns:
            Response data (without 'data' wrapper)

        Raises:
            UpstreamError: On transport failure, HTTP error status,
                GraphQL errors or a response without data
        """
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        self._rate_limit()

        try:
            response = self.session.post(self.graphql_url, json=payload, timeout=timeout)
        except requests.exceptions.Timeout:
            logger.error("GraphQL request timeout after %ds", timeout)
            raise UpstreamError(f"Shopify request timed out after {timeout}s") from None
        except requests.exceptions.RequestException as e:
            logger.error("Request failed: %s", e)
            raise UpstreamError(f"Shopify request failed: {e}") from e

        if response.status_code >= 400:
            logger.error("API Error %d: %s", response.status_code, response.text[:200])
            raise UpstreamError(f"Shopify API returned HTTP {response.status_code}")

        try:
            result = response.json()
        except ValueError:
            logger.error("Non-JSON response: %s", response.text[:200])
            raise UpstreamError("Shopify API returned a non-JSON response") from None

        if not isinstance(result, dict):
            logger.error("Unexpected response body: %s", response.text[:200])
            raise UpstreamError("Shopify API returned a non-object JSON response")

        # GraphQL reports query errors with HTTP 200
        if result.get("errors"):
            logger.error("GraphQL Errors: %s", result["errors"])
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in result["errors"]
            )
            raise UpstreamError(f"GraphQL errors: {messages}")

        data = result.get("data")
        if data is None:
            raise UpstreamError("GraphQL response has no data")

        logger.debug("GraphQL request #%d ok", self.requests_made)
        return data

    def test_connection(self) -> bool:
        """
        Test API connection by fetching the shop name.

        Returns:
            True if connection successful
        """
        try:
            data = self.graphql_request("{ shop { name } }")
        except UpstreamError:
            return False

        shop_name = (data.get("shop") or {}).get("name", "Unknown")
        logger.info("Connected to: %s", shop_name)
        return True
