"""
Shopify error types shared by the API client, catalog and paginator.

Every upstream failure is terminal for the request that hit it; nothing
here is retried. ``status_code`` is the HTTP-equivalent status the CLI
reports for the failure.
"""


class ShopifyError(Exception):
    """Base class for failures talking to the Shopify Admin API."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ShopifyError):
    """The requested collection or product does not exist upstream."""

    status_code = 404


class UpstreamError(ShopifyError):
    """HTTP error, transport failure or GraphQL ``errors`` payload."""


class InvalidPayloadError(UpstreamError):
    """Response parsed but does not have the shape the queries ask for."""


class PaginationError(UpstreamError):
    """Cursor traversal would not terminate (repeated or missing cursor)."""
