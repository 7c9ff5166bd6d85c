"""Tests for src/inventory/view.py"""

import csv
import io
from datetime import date

import pytest

from src.common.exceptions import NotFoundError
from src.inventory.csv_exporter import CollectionCSVExporter
from src.inventory.paginator import CursorPaginator
from src.inventory.view import (
    export_all_pages,
    export_view,
    load_collection_view,
    refilter_view,
)
from src.models import Direction, StockFilter, ViewState

DAY = date(2025, 6, 1)


@pytest.fixture
def paginator(make_source, make_raw_node):
    """35 products in "Summer Sale"; products 4, 17 and 30 are sold out."""
    nodes = [make_raw_node(i, inventory=0 if i in (4, 17, 30) else i + 1) for i in range(35)]
    return CursorPaginator(make_source(nodes), page_size=30)


def rows(result):
    return list(csv.reader(io.StringIO(result.content.decode("utf-8-sig"), newline="")))


class TestLoadCollectionView:
    def test_first_page(self, paginator):
        view = load_collection_view(paginator, "123", ViewState())

        assert view.title == "Summer Sale"
        assert view.total_on_page == 30
        assert view.heading == "Products (30 in stock)"
        assert view.empty_message is None

    def test_sold_out_tab(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(stock=StockFilter.SOLD_OUT))

        assert [r.title for r in view.records] == ["Product 4", "Product 17", "Product 30"]
        assert view.heading == "Products (3 sold out)"

    def test_search_filters_current_page_only(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(query="  Product 12 "))

        assert [r.title for r in view.records] == ["Product 12"]
        assert view.window.total_on_page == 30
        assert view.heading == "Products (1 found)"

    def test_search_does_not_reach_other_pages(self, paginator):
        # Product 34 lives on the second window
        view = load_collection_view(paginator, "123", ViewState(query="Product 34"))

        assert view.records == []
        assert view.empty_message == (
            "No products found on this page. Try adjusting your search terms."
        )

    def test_search_by_barcode(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(query="3800000000007"))
        assert [r.title for r in view.records] == ["Product 7"]

    def test_empty_tab_message(self, make_source, make_raw_node):
        paginator = CursorPaginator(make_source([make_raw_node(1, inventory=3)]))

        view = load_collection_view(paginator, "123", ViewState(stock=StockFilter.SOLD_OUT))

        assert view.empty_message == "There are no sold out products in this collection."
        assert view.heading == "Products (0 sold out)"

    def test_backward_without_cursor_shows_last_window(self, paginator):
        state = ViewState.from_query_params({"direction": "previous"})

        view = load_collection_view(paginator, "123", state)

        assert view.total_on_page == 30
        assert view.records[0].title == "Product 2"
        assert view.records[-1].title == "Product 34"
        assert view.window.has_next_page is False
        assert view.window.has_previous_page is True
        assert view.next_state() is None

    def test_unknown_collection(self, paginator):
        with pytest.raises(NotFoundError):
            load_collection_view(paginator, "999", ViewState())


class TestNavigationStates:
    def test_next_and_back(self, paginator):
        first = load_collection_view(paginator, "123", ViewState(query="product"))
        assert first.previous_state() is None

        next_state = first.next_state()
        assert next_state.direction is Direction.FORWARD
        assert next_state.cursor == first.window.end_cursor
        assert next_state.query == "product"

        second = load_collection_view(paginator, "123", next_state)
        assert second.total_on_page == 2
        assert second.next_state() is None

        back = load_collection_view(paginator, "123", second.previous_state())
        assert back.records == first.records

    def test_states_round_trip_through_query_params(self, paginator):
        first = load_collection_view(paginator, "123", ViewState())
        params = first.next_state().to_query_params()

        second = load_collection_view(paginator, "123", ViewState.from_query_params(params))

        assert second.total_on_page == 2


class TestRefilterView:
    def test_reuses_loaded_window(self, paginator):
        view = load_collection_view(paginator, "123", ViewState())
        calls = len(paginator.source.calls)

        searched = refilter_view(view, "Product 2")

        assert len(paginator.source.calls) == calls
        assert searched.window is view.window
        assert searched.state.query == "Product 2"
        assert searched.total_on_page == 11

    def test_clearing_search_shows_whole_window(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(query="Product 2"))

        cleared = refilter_view(view, "")

        assert cleared.total_on_page == 30
        assert cleared.heading == "Products (30 in stock)"


class TestExportView:
    def test_exports_visible_rows(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(query="Product 1"))
        exporter = CollectionCSVExporter()

        result = export_view(view, exporter, day=DAY)

        assert result.filename == "Summer Sale_InStock_2025-06-01.csv"
        assert result.row_count == view.total_on_page
        assert [row[0] for row in rows(result)[1:]] == [r.title for r in view.records]

    def test_sold_out_filename(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(stock=StockFilter.SOLD_OUT))

        result = export_view(view, CollectionCSVExporter(), day=DAY)

        assert result.filename == "Summer Sale_SoldOut_2025-06-01.csv"
        assert rows(result)[1] == ["Product 4", "N/A", "12.50", "EUR", "3800000000004", "0"]

    def test_empty_view_gives_notice(self, paginator):
        view = load_collection_view(paginator, "123", ViewState(query="no such product"))

        result = export_view(view, CollectionCSVExporter(), day=DAY)

        assert not result.ok
        assert result.notice == "No products to export"


class TestExportAllPages:
    def test_collects_every_window(self, make_source, make_raw_node):
        nodes = [make_raw_node(i, inventory=0 if i in (4, 17, 30) else i + 1) for i in range(35)]
        paginator = CursorPaginator(make_source(nodes), page_size=7)

        result = export_all_pages(paginator, "123", ViewState(), CollectionCSVExporter(), day=DAY)

        assert result.row_count == 32
        assert result.filename == "Summer Sale_InStock_2025-06-01.csv"
        titles = [row[0] for row in rows(result)[1:]]
        assert len(set(titles)) == 32
        assert "Product 4" not in titles

    def test_applies_search_to_each_window(self, paginator):
        state = ViewState(query="Product 3")

        result = export_all_pages(paginator, "123", state, CollectionCSVExporter(), day=DAY)

        titles = [row[0] for row in rows(result)[1:]]
        assert titles == ["Product 3", "Product 31", "Product 32", "Product 33", "Product 34"]

    def test_unknown_collection(self, paginator):
        with pytest.raises(NotFoundError):
            export_all_pages(paginator, "999", ViewState(), CollectionCSVExporter())
