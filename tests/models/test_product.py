"""Tests for src/models/product.py"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from src.models import (
    Direction,
    PageWindow,
    Price,
    ProductDetail,
    ProductRecord,
    StockFilter,
    ViewState,
)


class TestStockFilter:
    def test_parse_values(self):
        assert StockFilter.parse("in-stock") is StockFilter.IN_STOCK
        assert StockFilter.parse("SOLD-OUT") is StockFilter.SOLD_OUT

    def test_parse_absent_defaults_to_in_stock(self):
        assert StockFilter.parse(None) is StockFilter.IN_STOCK
        assert StockFilter.parse("") is StockFilter.IN_STOCK

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown stock filter"):
            StockFilter.parse("archived")

    def test_labels(self):
        assert StockFilter.IN_STOCK.label == "InStock"
        assert StockFilter.SOLD_OUT.label == "SoldOut"
        assert StockFilter.SOLD_OUT.description == "sold out"


class TestDirection:
    def test_parse(self):
        assert Direction.parse("next") is Direction.FORWARD
        assert Direction.parse("previous") is Direction.BACKWARD
        assert Direction.parse(None) is Direction.FORWARD

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("sideways")


class TestProductRecord:
    def test_create_with_defaults(self):
        record = ProductRecord(id="gid://shopify/Product/1", price=Price(Decimal("1.00"), "USD"))
        assert record.title == "N/A"
        assert record.barcode == "N/A"
        assert record.weight_display == "N/A"
        assert record.image is None
        assert record.sold_out is True

    def test_raises_on_empty_id(self):
        with pytest.raises(ValueError, match="id is required"):
            ProductRecord(id="", price=Price(Decimal("1.00"), "USD"))

    def test_raises_on_negative_units(self):
        with pytest.raises(ValueError, match="available_units"):
            ProductRecord(id="x", price=Price(Decimal("1.00"), "USD"), available_units=-1)

    def test_is_immutable(self):
        record = ProductRecord(id="x", price=Price(Decimal("1.00"), "USD"))
        with pytest.raises(FrozenInstanceError):
            record.title = "Changed"

    def test_numeric_id(self):
        record = ProductRecord(id="gid://shopify/Product/8123", price=Price(Decimal("1"), "USD"))
        assert record.numeric_id == "8123"


class TestPrice:
    def test_display(self):
        assert Price(Decimal("1234.5"), "EUR").display() == "1,234.50 EUR"


class TestPageWindow:
    def test_total_on_page(self, records):
        window = PageWindow(
            records=tuple(records),
            has_next_page=False,
            has_previous_page=False,
            start_cursor=None,
            end_cursor=None,
        )
        assert window.total_on_page == 5


class TestViewState:
    def test_defaults_from_empty_params(self):
        state = ViewState.from_query_params({})
        assert state == ViewState()
        assert state.stock is StockFilter.IN_STOCK
        assert state.cursor is None

    def test_round_trip_query_params(self):
        params = {"stock": "sold-out", "direction": "previous", "cursor": "abc", "q": "zinc"}
        state = ViewState.from_query_params(params)
        assert state.to_query_params() == params

    def test_direction_omitted_without_cursor(self):
        assert ViewState().to_query_params() == {"stock": "in-stock"}

    def test_backward_kept_without_cursor(self):
        params = {"stock": "in-stock", "direction": "previous"}
        state = ViewState.from_query_params(params)
        assert state.direction is Direction.BACKWARD
        assert state.to_query_params() == params

    def test_invalid_stock_rejected(self):
        with pytest.raises(ValueError):
            ViewState.from_query_params({"stock": "maybe"})

    def test_switching_stock_drops_cursor_and_search(self):
        state = ViewState(cursor="abc", query="zinc").with_stock(StockFilter.SOLD_OUT)
        assert state == ViewState(stock=StockFilter.SOLD_OUT)

    def test_same_stock_keeps_state(self):
        state = ViewState(cursor="abc", query="zinc")
        assert state.with_stock(StockFilter.IN_STOCK) is state

    def test_forward_and_backward(self):
        state = ViewState(query="zinc")
        assert state.forward("c1") == ViewState(direction=Direction.FORWARD, cursor="c1", query="zinc")
        assert state.backward("c0").direction is Direction.BACKWARD


class TestProductDetail:
    def test_is_active(self):
        assert ProductDetail(id="x", status="ACTIVE").is_active
        assert not ProductDetail(id="x", status="DRAFT").is_active

    def test_default_lists_not_shared(self):
        first, second = ProductDetail(id="a"), ProductDetail(id="b")
        first.tags.append("sale")
        assert second.tags == []
