"""
Stock Partitioner

Splits product records into the "In Stock" and "Sold Out" tabs.
"""

from typing import Iterable, List

from ..models import ProductRecord, StockFilter


def matches(record: ProductRecord, stock_filter: StockFilter) -> bool:
    """True if the record belongs on the given stock tab."""
    if stock_filter is StockFilter.IN_STOCK:
        return record.available_units > 0
    return record.available_units == 0


def partition(records: Iterable[ProductRecord], stock_filter: StockFilter) -> List[ProductRecord]:
    """
    Select the records of one stock tab, keeping their order.

    IN_STOCK and SOLD_OUT subsets of the same input are disjoint and
    together hold every record.
    """
    return [record for record in records if matches(record, stock_filter)]


def count_in_stock(units: Iterable[int]) -> int:
    """Count inventory totals above zero (collections overview badge)."""
    return sum(1 for value in units if (value or 0) > 0)
