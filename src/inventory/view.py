"""
Collection View

Builds what a collection page shows from its ViewState: the page window
for the selected stock tab, the records left after the current-page
search, the heading and empty-state text, and the states the previous /
next buttons lead to.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..models import PageWindow, ProductRecord, ViewState
from .csv_exporter import CollectionCSVExporter, ExportResult, export_filename
from .paginator import CursorPaginator
from .search import filter_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionView:
    """One rendered collection page."""
    collection_id: str
    state: ViewState
    window: PageWindow
    records: List[ProductRecord]

    @property
    def title(self) -> str:
        return self.window.collection_title or "Products"

    @property
    def total_on_page(self) -> int:
        """Records shown after search (the table row count)."""
        return len(self.records)

    @property
    def searching(self) -> bool:
        return bool(self.state.query.strip())

    @property
    def heading(self) -> str:
        label = "found" if self.searching else self.state.stock.description
        return f"Products ({self.total_on_page} {label})"

    @property
    def empty_message(self) -> Optional[str]:
        """Empty-state text, or None when there are rows to show."""
        if self.records:
            return None
        if self.searching:
            return "No products found on this page. Try adjusting your search terms."
        return f"There are no {self.state.stock.description} products in this collection."

    def next_state(self) -> Optional[ViewState]:
        if not self.window.has_next_page or not self.window.end_cursor:
            return None
        return self.state.forward(self.window.end_cursor)

    def previous_state(self) -> Optional[ViewState]:
        if not self.window.has_previous_page or not self.window.start_cursor:
            return None
        return self.state.backward(self.window.start_cursor)


def load_collection_view(
    paginator: CursorPaginator,
    collection_id: str,
    state: ViewState,
) -> CollectionView:
    """
    Fetch the window described by ``state`` and apply the search.

    Raises:
        NotFoundError: If the collection does not exist
        UpstreamError: If the API request fails
    """
    window = paginator.fetch(
        collection_id,
        stock_filter=state.stock,
        direction=state.direction,
        cursor=state.cursor,
    )
    records = filter_records(window.records, state.query)
    if state.query:
        logger.debug("Search %r matched %d of %d records on this page",
                     state.query, len(records), window.total_on_page)

    return CollectionView(
        collection_id=collection_id,
        state=state,
        window=window,
        records=records,
    )


def refilter_view(view: CollectionView, query: str) -> CollectionView:
    """Apply a new search to the already loaded window without refetching."""
    return CollectionView(
        collection_id=view.collection_id,
        state=view.state.with_query(query),
        window=view.window,
        records=filter_records(view.window.records, query),
    )


def export_view(
    view: CollectionView,
    exporter: CollectionCSVExporter,
    day: Optional[date] = None,
) -> ExportResult:
    """Export the rows the view currently shows."""
    filename = export_filename(view.window.collection_title, view.state.stock, day)
    return exporter.export(view.records, filename=filename)


def export_all_pages(
    paginator: CursorPaginator,
    collection_id: str,
    state: ViewState,
    exporter: CollectionCSVExporter,
    day: Optional[date] = None,
) -> ExportResult:
    """
    Export every record of the selected stock tab.

    Walks all windows from the start of the collection; the search query
    of ``state`` is applied to each window.
    """
    records: List[ProductRecord] = []
    title = ""
    for window in paginator.iter_windows(collection_id, state.stock):
        title = title or window.collection_title
        records.extend(filter_records(window.records, state.query))

    logger.info("Collected %d %s products across all pages",
                len(records), state.stock.description)
    return exporter.export(records, filename=export_filename(title, state.stock, day))
