"""
Product Normalizer

Turns raw Admin API product nodes into flat ProductRecord rows.

Absent optional fields become defaults (NOT_AVAILABLE for strings, 0 for
counts). Fields the listing cannot do without - the product id and its
minimum variant price - are validated here, and a node missing them is
rejected with InvalidPayloadError instead of leaking None downstream.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

from ..common.exceptions import InvalidPayloadError
from ..common.text_utils import format_number
from ..models import NOT_AVAILABLE, Price, ProductDetail, ProductRecord, VariantDetail

logger = logging.getLogger(__name__)


def _get(data: Any, *path: str) -> Any:
    """Walk nested mappings, returning None as soon as a level is missing."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _first_edge_node(connection: Any) -> Optional[Dict]:
    edges = _get(connection, "edges") or []
    if not edges:
        return None
    return _get(edges[0], "node")


def _text(value: Any, default: str = NOT_AVAILABLE) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def _to_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def format_weight(weight: Optional[Dict]) -> str:
    """
    Format a weight measurement as "<value> <unit lowercased>".

    Args:
        weight: ``{"value": 1.5, "unit": "KILOGRAMS"}`` or None

    Returns:
        e.g. "1.5 kilograms", or NOT_AVAILABLE when there is no non-zero value
    """
    value = _get(weight, "value")
    if not value or isinstance(value, bool):
        return NOT_AVAILABLE

    unit = (_get(weight, "unit") or "").lower()
    return f"{format_number(value)} {unit}".strip()


def parse_price(raw_price: Any) -> Price:
    """
    Parse a ``MoneyV2`` mapping.

    Raises:
        InvalidPayloadError: If amount or currency code is missing or invalid
    """
    amount = _to_decimal(_get(raw_price, "amount"))
    currency = _get(raw_price, "currencyCode")
    if amount is None or not currency:
        raise InvalidPayloadError(f"Invalid price payload: {raw_price!r}")
    return Price(amount=amount, currency_code=str(currency))


def normalize(raw_node: Any, cursor: Optional[str] = None) -> ProductRecord:
    """
    Convert a raw product node into a ProductRecord.

    Args:
        raw_node: Product node from the collection products query
        cursor: Edge cursor of the node in the current window

    Returns:
        Normalized record

    Raises:
        InvalidPayloadError: If the node is not a mapping, has no id or
            has no usable minimum variant price
    """
    if not isinstance(raw_node, dict):
        raise InvalidPayloadError(f"Product node must be an object, got {type(raw_node).__name__}")

    product_id = raw_node.get("id")
    if not product_id:
        raise InvalidPayloadError("Product node is missing its id")

    price = parse_price(_get(raw_node, "priceRangeV2", "minVariantPrice"))

    title = _text(raw_node.get("title"))
    variant = _first_edge_node(raw_node.get("variants"))

    available_units = _to_int(raw_node.get("totalInventory"))
    if available_units < 0:
        # Oversold products report negative inventory; they are sold out
        logger.warning("Product %s reports %d units, treating as sold out",
                       product_id, available_units)
        available_units = 0

    return ProductRecord(
        id=str(product_id),
        title=title,
        image=_get(raw_node, "featuredImage", "url") or None,
        image_alt=_text(_get(raw_node, "featuredImage", "altText"), default=title),
        weight_display=format_weight(_get(variant, "inventoryItem", "measurement", "weight")),
        price=price,
        barcode=_text(_get(variant, "barcode")),
        available_units=available_units,
        cursor=cursor,
    )


def normalize_edges(edges: Iterable[Any]) -> List[ProductRecord]:
    """Normalize ``{cursor, node}`` edges, keeping their order."""
    records = []
    for edge in edges or []:
        if not isinstance(edge, dict):
            raise InvalidPayloadError(f"Edge must be an object, got {type(edge).__name__}")
        records.append(normalize(edge.get("node"), cursor=edge.get("cursor")))
    return records


def normalize_variant(raw_variant: Dict) -> VariantDetail:
    return VariantDetail(
        title=_text(raw_variant.get("title")),
        sku=_text(raw_variant.get("sku")),
        price=_to_decimal(raw_variant.get("price")),
        compare_at_price=_to_decimal(raw_variant.get("compareAtPrice")),
        inventory_quantity=_to_int(raw_variant.get("inventoryQuantity")),
        available_for_sale=bool(raw_variant.get("availableForSale")),
        weight_display=format_weight(_get(raw_variant, "inventoryItem", "measurement", "weight")),
    )


def normalize_product_detail(raw_product: Any) -> ProductDetail:
    """
    Convert a raw product (detail query) into a ProductDetail.

    Raises:
        InvalidPayloadError: If the product is not a mapping or has no id
    """
    if not isinstance(raw_product, dict) or not raw_product.get("id"):
        raise InvalidPayloadError("Product payload is missing its id")

    images = [
        node["url"]
        for node in (_get(edge, "node") for edge in _get(raw_product, "images", "edges") or [])
        if isinstance(node, dict) and node.get("url")
    ]
    variants = [
        normalize_variant(node)
        for node in (_get(edge, "node") for edge in _get(raw_product, "variants", "edges") or [])
        if isinstance(node, dict)
    ]

    return ProductDetail(
        id=str(raw_product["id"]),
        title=_text(raw_product.get("title")),
        status=_text(raw_product.get("status")),
        vendor=_text(raw_product.get("vendor")),
        product_type=_text(raw_product.get("productType")),
        description=(raw_product.get("description") or "").strip(),
        tags=[str(tag) for tag in raw_product.get("tags") or []],
        created_at=raw_product.get("createdAt"),
        updated_at=raw_product.get("updatedAt"),
        total_inventory=_to_int(raw_product.get("totalInventory")),
        images=images,
        variants=variants,
    )
