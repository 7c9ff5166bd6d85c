"""
Cursor Paginator

Forward/backward traversal over a cursor-paged product source without
loading the whole collection.

The source is anything with a ``fetch_page`` method (ShopifyCatalog in
production, an in-memory list in tests):

    source.fetch_page(entity_id, page_size=30, cursor=None,
                      direction=Direction.FORWARD,
                      stock_filter=StockFilter.IN_STOCK)

returning ``{"title": str, "edges": [...], "pageInfo": {...}}`` or None
when the entity does not exist. Windows are a pass-through of what the
source returns: there is no snapshot, so a collection edited between two
requests can shift records across pages.
"""

import logging
from typing import Iterator, Optional

from ..common.config_loader import MAX_PAGE_SIZE
from ..common.exceptions import InvalidPayloadError, NotFoundError, PaginationError
from ..models import Direction, PageWindow, StockFilter
from .normalizer import normalize_edges
from .stock import matches

logger = logging.getLogger(__name__)


class CursorPaginator:
    """
    Fetches PageWindows from a paged source.

    Usage:
        paginator = CursorPaginator(catalog, page_size=30)
        window = paginator.fetch("123", StockFilter.IN_STOCK)
        if window.has_next_page:
            window = paginator.next_window("123", window)
    """

    def __init__(self, source, page_size: int = 30):
        """
        Args:
            source: Object with a ``fetch_page`` method (see module docstring)
            page_size: Records per window (1-250)
        """
        if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        if page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size cannot exceed {MAX_PAGE_SIZE}, got {page_size}")

        self.source = source
        self.page_size = page_size

    def fetch(
        self,
        entity_id: str,
        stock_filter: StockFilter = StockFilter.IN_STOCK,
        direction: Direction = Direction.FORWARD,
        cursor: Optional[str] = None,
    ) -> PageWindow:
        """
        Fetch one page window.

        Without a cursor this is the first (forward) or last (backward)
        page; with one, the records strictly after/before it.

        Raises:
            NotFoundError: If the source reports the entity absent
            InvalidPayloadError: If the page has no pageInfo or bad nodes
        """
        logger.debug("Fetching %s page of %s (%s, cursor=%s)",
                     direction.value, entity_id, stock_filter.value, cursor)

        page = self.source.fetch_page(
            entity_id,
            page_size=self.page_size,
            cursor=cursor,
            direction=direction,
            stock_filter=stock_filter,
        )
        if page is None:
            raise NotFoundError(f"Collection not found: {entity_id}")

        page_info = page.get("pageInfo")
        if not isinstance(page_info, dict):
            raise InvalidPayloadError(f"Page of {entity_id} is missing pageInfo")

        records = normalize_edges(page.get("edges"))

        # Inventory can change between the upstream search index and the read
        kept = tuple(record for record in records if matches(record, stock_filter))
        if len(kept) != len(records):
            logger.debug("Dropped %d records no longer %s",
                         len(records) - len(kept), stock_filter.description)

        window = PageWindow(
            records=kept,
            has_next_page=bool(page_info.get("hasNextPage")),
            has_previous_page=bool(page_info.get("hasPreviousPage")),
            start_cursor=page_info.get("startCursor"),
            end_cursor=page_info.get("endCursor"),
            stock_filter=stock_filter,
            page_size=self.page_size,
            collection_title=page.get("title") or "",
        )
        logger.debug("Window has %d records (next=%s, previous=%s)",
                     window.total_on_page, window.has_next_page, window.has_previous_page)
        return window

    def _check_window(self, window: PageWindow):
        if window.page_size != self.page_size:
            raise ValueError(
                f"Window was fetched with page size {window.page_size}, "
                f"paginator uses {self.page_size}"
            )

    def next_window(self, entity_id: str, window: PageWindow) -> PageWindow:
        """Fetch the window after ``window``."""
        self._check_window(window)
        if not window.has_next_page:
            raise ValueError("Window has no next page")
        return self.fetch(entity_id, window.stock_filter, Direction.FORWARD, window.end_cursor)

    def previous_window(self, entity_id: str, window: PageWindow) -> PageWindow:
        """Fetch the window before ``window``."""
        self._check_window(window)
        if not window.has_previous_page:
            raise ValueError("Window has no previous page")
        return self.fetch(entity_id, window.stock_filter, Direction.BACKWARD, window.start_cursor)

    def iter_windows(
        self,
        entity_id: str,
        stock_filter: StockFilter = StockFilter.IN_STOCK,
    ) -> Iterator[PageWindow]:
        """
        Yield every window from the start of the sequence.

        Stops after the window reporting has_next_page=False.

        Raises:
            PaginationError: If the source keeps reporting a next page
                without a new end cursor
        """
        seen_cursors = set()
        window = self.fetch(entity_id, stock_filter)
        yield window

        while window.has_next_page:
            cursor = window.end_cursor
            if not cursor:
                raise PaginationError(f"Page of {entity_id} has a next page but no end cursor")
            if cursor in seen_cursors:
                raise PaginationError(f"Cursor {cursor!r} repeated while paging {entity_id}")
            seen_cursors.add(cursor)

            window = self.fetch(entity_id, stock_filter, Direction.FORWARD, cursor)
            yield window
