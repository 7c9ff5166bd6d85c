"""
Inventory listing logic.

Modules:
    normalizer - Raw GraphQL nodes to ProductRecord
    stock - In-stock / sold-out partition
    paginator - Cursor-paged PageWindow traversal
    search - Current-page text search
    csv_exporter - CSV export with BOM
    view - Collection page composition
"""

from .csv_exporter import (
    DEFAULT_COLUMNS,
    EMPTY_EXPORT_NOTICE,
    CollectionCSVExporter,
    ExportResult,
    export_filename,
)
from .normalizer import normalize, normalize_edges, normalize_product_detail
from .paginator import CursorPaginator
from .search import filter_records
from .stock import count_in_stock, partition
from .view import (
    CollectionView,
    export_all_pages,
    export_view,
    load_collection_view,
    refilter_view,
)

__all__ = [
    # Normalizer
    'normalize',
    'normalize_edges',
    'normalize_product_detail',
    # Stock
    'partition',
    'count_in_stock',
    # Pagination
    'CursorPaginator',
    # Search
    'filter_records',
    # Export
    'CollectionCSVExporter',
    'ExportResult',
    'DEFAULT_COLUMNS',
    'EMPTY_EXPORT_NOTICE',
    'export_filename',
    # View
    'CollectionView',
    'load_collection_view',
    'refilter_view',
    'export_view',
    'export_all_pages',
]
