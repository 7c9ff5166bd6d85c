"""Shared test fixtures."""

from decimal import Decimal

import pytest

from src.models import Direction, Price, ProductRecord, StockFilter


def make_node(
    index: int,
    title: str = None,
    inventory: int = 5,
    amount: str = "12.50",
    currency: str = "EUR",
    barcode: str = None,
    weight: dict = None,
    image: bool = True,
):
    """Build a raw product node shaped like the collection products query."""
    title = title if title is not None else f"Product {index}"
    variant = {
        "id": f"gid://shopify/ProductVariant/{9000 + index}",
        "barcode": barcode if barcode is not None else f"380000000{index:04d}",
        "inventoryItem": {"measurement": {"weight": weight}},
    }
    return {
        "id": f"gid://shopify/Product/{1000 + index}",
        "title": title,
        "featuredImage": {"url": f"https://cdn.example.com/{index}.jpg", "altText": None} if image else None,
        "priceRangeV2": {"minVariantPrice": {"amount": amount, "currencyCode": currency}},
        "totalInventory": inventory,
        "status": "ACTIVE",
        "variants": {"edges": [{"node": variant}]},
    }


class InMemoryPageSource:
    """
    Cursor-paged product source over a list of raw nodes.

    Behaves like the Admin API connection: stock filtering before paging,
    first/after forward, last/before backward, cursors tied to the filter.
    """

    def __init__(self, nodes, collection_id="123", title="Summer Sale"):
        self.nodes = list(nodes)
        self.collection_id = collection_id
        self.title = title
        self.calls = []

    def _filtered(self, stock_filter):
        if stock_filter is StockFilter.IN_STOCK:
            return [n for n in self.nodes if n["totalInventory"] > 0]
        return [n for n in self.nodes if n["totalInventory"] <= 0]

    def fetch_page(self, entity_id, page_size=30, cursor=None,
                   direction=Direction.FORWARD, stock_filter=StockFilter.IN_STOCK):
        self.calls.append((entity_id, page_size, cursor, direction, stock_filter))
        if entity_id != self.collection_id:
            return None

        nodes = self._filtered(stock_filter)
        prefix = f"{stock_filter.value}:"
        position = None
        if cursor:
            assert cursor.startswith(prefix), "cursor used with another stock filter"
            position = int(cursor[len(prefix):])

        if direction is Direction.FORWARD:
            start = position + 1 if position is not None else 0
            end = min(start + page_size, len(nodes))
        else:
            end = position if position is not None else len(nodes)
            start = max(0, end - page_size)

        edges = [
            {"cursor": f"{prefix}{i}", "node": nodes[i]}
            for i in range(start, end)
        ]
        return {
            "title": self.title,
            "edges": edges,
            "pageInfo": {
                "hasNextPage": end < len(nodes),
                "hasPreviousPage": start > 0,
                "startCursor": edges[0]["cursor"] if edges else None,
                "endCursor": edges[-1]["cursor"] if edges else None,
            },
        }


@pytest.fixture
def raw_node():
    """A fully populated raw product node."""
    return make_node(
        1,
        title="Vitamin C 500mg",
        inventory=12,
        amount="19.90",
        currency="EUR",
        barcode="3800123456789",
        weight={"value": 0.25, "unit": "KILOGRAMS"},
    )


@pytest.fixture
def records():
    """Mixed in-stock / sold-out records."""
    def record(index, title, units, barcode="N/A", weight="N/A"):
        return ProductRecord(
            id=f"gid://shopify/Product/{index}",
            title=title,
            price=Price(amount=Decimal("9.99"), currency_code="USD"),
            barcode=barcode,
            weight_display=weight,
            available_units=units,
        )

    return [
        record(1, "Vitamin C 500mg", 10, barcode="3800000000011", weight="0.25 kilograms"),
        record(2, "Zinc Tablets", 0, barcode="3800000000028", weight="100 grams"),
        record(3, 'Acme "Pro" Widget', 3),
        record(4, "Fish Oil Capsules", 0, weight="1 pounds"),
        record(5, "Magnesium 500", 7, barcode="5000000000500"),
    ]


@pytest.fixture
def make_source():
    """Factory for an InMemoryPageSource."""
    return InMemoryPageSource


@pytest.fixture
def make_raw_node():
    """Factory for raw product nodes."""
    return make_node
