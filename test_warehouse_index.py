"""
Tests for Warehouse Index Builder

Run with: python3 -m pytest test_warehouse_index.py -v
"""

import math

import pytest
from stocksync.warehouse_index import build_warehouse_index, parse_quantity


class TestParseQuantity:
    """Test quantity cell parsing."""
    
    def test_plain_number_text(self):
        assert parse_quantity("10") == 10
    
    def test_thousands_separator(self):
        assert parse_quantity("1,234") == 1234
    
    def test_numeric_cell(self):
        assert parse_quantity(42) == 42
        assert parse_quantity(3.5) == 3.5
    
    def test_none_is_zero(self):
        assert parse_quantity(None) == 0
    
    def test_nan_is_zero(self):
        assert parse_quantity(float("nan")) == 0
    
    def test_unparsable_is_zero(self):
        assert parse_quantity("n/a") == 0
        assert parse_quantity("") == 0
    
    def test_leading_number_prefix(self):
        assert parse_quantity("12 units") == 12
    
    def test_whitespace_and_sign(self):
        assert parse_quantity("  -5 ") == -5
    
    def test_never_returns_nan(self):
        assert not math.isnan(parse_quantity("abc"))


class TestBuildWarehouseIndex:
    """Test identifier -> quantity index construction."""
    
    def test_item_number_only(self):
        rows = [["A1", "10"], ["A2", "20"]]
        index = build_warehouse_index(rows, quantity_col=1, item_number_col=0)
        assert index == {"A1": 10, "A2": 20}
    
    def test_barcode_only(self):
        rows = [["5012345678900", 7]]
        index = build_warehouse_index(rows, quantity_col=1, barcode_col=0)
        assert index == {"5012345678900": 7}
    
    def test_both_identifiers_share_quantity(self):
        rows = [["A1", "123456", "8"]]
        index = build_warehouse_index(rows, quantity_col=2, item_number_col=0, barcode_col=1)
        assert index == {"A1": 8, "123456": 8}
    
    def test_last_write_wins(self):
        rows = [["A1", "10"], ["A1", "15"]]
        index = build_warehouse_index(rows, quantity_col=1, item_number_col=0)
        assert index["A1"] == 15
    
    def test_blank_identifiers_skipped(self):
        rows = [["  ", None, "5"], [None, "", "6"]]
        index = build_warehouse_index(rows, quantity_col=2, item_number_col=0, barcode_col=1)
        assert index == {}
    
    def test_identifiers_trimmed(self):
        rows = [["  A1  ", "3"]]
        index = build_warehouse_index(rows, quantity_col=1, item_number_col=0)
        assert "A1" in index
    
    def test_integral_float_identifier(self):
        rows = [[123456.0, "4"]]
        index = build_warehouse_index(rows, quantity_col=1, barcode_col=0)
        assert index == {"123456": 4}
    
    def test_missing_quantity_defaults_to_zero(self):
        rows = [["A1", None], ["A2", "oops"], ["A3"]]
        index = build_warehouse_index(rows, quantity_col=1, item_number_col=0)
        assert index == {"A1": 0, "A2": 0, "A3": 0}
    
    def test_thousands_separator_quantity(self):
        rows = [["A1", "1,234"]]
        index = build_warehouse_index(rows, quantity_col=1, item_number_col=0)
        assert index["A1"] == 1234
    
    def test_empty_rows(self):
        assert build_warehouse_index([], quantity_col=0, item_number_col=1) == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
