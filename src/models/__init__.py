"""
Data models for the inventory browser.

This module contains pure data classes with no API access.
"""

from .product import (
    NOT_AVAILABLE,
    CollectionSummary,
    Direction,
    PageWindow,
    Price,
    ProductDetail,
    ProductRecord,
    StockFilter,
    VariantDetail,
    ViewState,
)

__all__ = [
    'NOT_AVAILABLE',
    'CollectionSummary',
    'Direction',
    'PageWindow',
    'Price',
    'ProductDetail',
    'ProductRecord',
    'StockFilter',
    'VariantDetail',
    'ViewState',
]
