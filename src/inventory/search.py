"""
Search Filter

Free-text search over the records of the current page window.

Only the loaded window is searched, never the whole remote collection:
a product on another page will not match until that page is opened.
"""

from typing import Iterable, List

from ..models import ProductRecord

SEARCH_FIELDS = ("title", "barcode", "weight_display")


def matches_query(record: ProductRecord, needle: str) -> bool:
    """True if the lowercased needle occurs in any searchable field."""
    return any(needle in getattr(record, name).lower() for name in SEARCH_FIELDS)


def filter_records(records: Iterable[ProductRecord], query: str) -> List[ProductRecord]:
    """
    Case-insensitive substring search by name, barcode or weight.

    Args:
        records: Records of the current page window
        query: Search text; surrounding whitespace is ignored

    Returns:
        Matching records in input order (all records for an empty query)
    """
    records = list(records)
    needle = (query or "").strip().lower()
    if not needle:
        return records
    return [record for record in records if matches_query(record, needle)]
