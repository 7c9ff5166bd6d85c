"""Tests for src/inventory/stock.py"""

from src.inventory.stock import count_in_stock, partition
from src.models import StockFilter


class TestPartition:
    def test_in_stock(self, records):
        titles = [r.title for r in partition(records, StockFilter.IN_STOCK)]
        assert titles == ["Vitamin C 500mg", 'Acme "Pro" Widget', "Magnesium 500"]

    def test_sold_out(self, records):
        titles = [r.title for r in partition(records, StockFilter.SOLD_OUT)]
        assert titles == ["Zinc Tablets", "Fish Oil Capsules"]

    def test_is_a_partition(self, records):
        in_stock = partition(records, StockFilter.IN_STOCK)
        sold_out = partition(records, StockFilter.SOLD_OUT)

        ids_in = {r.id for r in in_stock}
        ids_out = {r.id for r in sold_out}
        assert ids_in.isdisjoint(ids_out)
        assert ids_in | ids_out == {r.id for r in records}
        assert len(in_stock) + len(sold_out) == len(records)

    def test_empty_input(self):
        assert partition([], StockFilter.IN_STOCK) == []


class TestCountInStock:
    def test_counts_positive_totals(self):
        assert count_in_stock([3, 0, -1, None, 8]) == 2

    def test_empty(self):
        assert count_in_stock([]) == 0
