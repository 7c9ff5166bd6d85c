"""
Inventory data models.

Pure data classes for the records, page windows and navigation state the
inventory browser passes around. No API access here - only data structures
and their invariants.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Single placeholder for absent string fields
NOT_AVAILABLE = "N/A"


class StockFilter(Enum):
    """Binary view partition of a collection by inventory count."""
    IN_STOCK = "in-stock"
    SOLD_OUT = "sold-out"

    @property
    def label(self) -> str:
        """File name label used in CSV exports."""
        return "InStock" if self is StockFilter.IN_STOCK else "SoldOut"

    @property
    def description(self) -> str:
        """Lowercase human wording ("in stock" / "sold out")."""
        return "in stock" if self is StockFilter.IN_STOCK else "sold out"

    @classmethod
    def parse(cls, value: Optional[str]) -> "StockFilter":
        """Parse a ``stock`` query parameter; absent means in-stock."""
        if not value:
            return cls.IN_STOCK
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown stock filter {value!r} (expected 'in-stock' or 'sold-out')"
            ) from None


class Direction(Enum):
    """Traversal direction over a cursor-paged connection."""
    FORWARD = "next"
    BACKWARD = "previous"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Direction":
        """Parse a ``direction`` query parameter; absent means forward."""
        if not value:
            return cls.FORWARD
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown direction {value!r} (expected 'next' or 'previous')"
            ) from None


@dataclass(frozen=True)
class Price:
    """Minimum variant price of a product."""
    amount: Decimal
    currency_code: str

    def display(self) -> str:
        """Human readable price, e.g. "12.50 EUR"."""
        return f"{self.amount:,.2f} {self.currency_code}"


@dataclass(frozen=True)
class ProductRecord:
    """
    Flat product row shown in a collection listing.

    Built by the normalizer from a raw GraphQL product node. Optional
    string fields are already defaulted to NOT_AVAILABLE, so consumers
    never see None for title, weight or barcode.
    """
    id: str
    price: Price
    title: str = NOT_AVAILABLE
    image: Optional[str] = None
    image_alt: str = NOT_AVAILABLE
    weight_display: str = NOT_AVAILABLE
    barcode: str = NOT_AVAILABLE
    available_units: int = 0
    cursor: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Product id is required")
        if self.available_units < 0:
            raise ValueError(f"available_units must be >= 0, got {self.available_units}")

    @property
    def sold_out(self) -> bool:
        return self.available_units == 0

    @property
    def numeric_id(self) -> str:
        """Trailing numeric part of the GID (gid://shopify/Product/123 -> 123)."""
        return self.id.rsplit('/', 1)[-1]


@dataclass(frozen=True)
class PageWindow:
    """
    One page of a cursor-paged product listing.

    The cursors are only valid for the stock filter and page size the
    window was fetched with.
    """
    records: Tuple[ProductRecord, ...]
    has_next_page: bool
    has_previous_page: bool
    start_cursor: Optional[str]
    end_cursor: Optional[str]
    stock_filter: StockFilter = StockFilter.IN_STOCK
    page_size: int = 30
    collection_title: str = ""

    @property
    def total_on_page(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class ViewState:
    """
    Navigation state of a collection page.

    Mirrors the query parameters of the admin page (stock, direction,
    cursor, q) so that the listing can be rebuilt from them alone.
    """
    stock: StockFilter = StockFilter.IN_STOCK
    direction: Direction = Direction.FORWARD
    cursor: Optional[str] = None
    query: str = ""

    @classmethod
    def from_query_params(cls, params: Dict[str, str]) -> "ViewState":
        """
        Build state from query parameters.

        Raises:
            ValueError: If stock or direction hold an unknown value
        """
        return cls(
            stock=StockFilter.parse(params.get("stock")),
            direction=Direction.parse(params.get("direction")),
            cursor=params.get("cursor") or None,
            query=params.get("q") or "",
        )

    def to_query_params(self) -> Dict[str, str]:
        """Serialize back to query parameters, omitting defaults-by-absence."""
        params = {"stock": self.stock.value}
        if self.cursor:
            params["cursor"] = self.cursor
        if self.cursor or self.direction is Direction.BACKWARD:
            params["direction"] = self.direction.value
        if self.query:
            params["q"] = self.query
        return params

    def with_stock(self, stock: StockFilter) -> "ViewState":
        """Switch tabs: cursors and search belong to the old tab and are dropped."""
        if stock is self.stock:
            return self
        return ViewState(stock=stock)

    def with_query(self, query: str) -> "ViewState":
        return replace(self, query=query)

    def forward(self, cursor: str) -> "ViewState":
        return replace(self, direction=Direction.FORWARD, cursor=cursor)

    def backward(self, cursor: str) -> "ViewState":
        return replace(self, direction=Direction.BACKWARD, cursor=cursor)


@dataclass
class CollectionSummary:
    """Collection row on the overview page."""
    id: str
    title: str
    total_products: int = 0
    in_stock_products: int = 0
    image: Optional[str] = None
    image_alt: str = ""


@dataclass
class VariantDetail:
    """Variant row on the product detail page."""
    title: str
    price: Optional[Decimal] = None
    sku: str = NOT_AVAILABLE
    compare_at_price: Optional[Decimal] = None
    inventory_quantity: int = 0
    available_for_sale: bool = False
    weight_display: str = NOT_AVAILABLE


@dataclass
class ProductDetail:
    """Product detail page data."""
    id: str
    title: str = NOT_AVAILABLE
    status: str = NOT_AVAILABLE
    vendor: str = NOT_AVAILABLE
    product_type: str = NOT_AVAILABLE
    description: str = ""
    tags: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    total_inventory: int = 0
    images: List[str] = field(default_factory=list)
    variants: List[VariantDetail] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.status == "ACTIVE"
