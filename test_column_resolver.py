"""
Tests for Column Resolver

Run with: python3 -m pytest test_column_resolver.py -v
"""

import pytest
from stocksync.column_resolver import (
    ALIASES,
    normalize_header,
    resolve_column,
    resolve_columns,
    WAREHOUSE_COLUMNS,
    SHOPIFY_COLUMNS
)


class TestResolveColumn:
    """Test single-column resolution."""
    
    def test_exact_match(self):
        assert resolve_column(["Item Number", "Available Physical"], ["Item Number"]) == 0
    
    def test_case_and_whitespace_insensitive(self):
        headers = ["Name", "  AVAILABLE physical  "]
        assert resolve_column(headers, ALIASES["available_physical"]) == 1
    
    def test_no_match_returns_none(self):
        assert resolve_column(["Name", "Price"], ALIASES["sku"]) is None
    
    def test_alias_priority_beats_header_position(self):
        headers = ["On hand", "Available", "On hand (new)"]
        assert resolve_column(headers, ALIASES["on_hand"]) == 2
    
    def test_first_matching_header_wins_for_same_alias(self):
        headers = ["SKU", "sku"]
        assert resolve_column(headers, ["sku"]) == 0
    
    def test_blank_headers_never_match(self):
        headers = [None, "", "   ", "Barcode"]
        assert resolve_column(headers, ALIASES["barcode"]) == 3
    
    def test_blank_alias_is_ignored(self):
        assert resolve_column(["", "SKU"], ["", "sku"]) == 1
    
    def test_underscore_variant(self):
        assert resolve_column(["item_number"], ALIASES["item_number"]) == 0
    
    def test_numeric_header_cell(self):
        assert resolve_column([2024, "SKU"], ALIASES["sku"]) == 1
    
    def test_variant_sku_alias(self):
        assert resolve_column(["Handle", "Variant SKU"], ALIASES["sku"]) == 1


class TestResolveColumns:
    """Test resolution of several logical columns at once."""
    
    def test_warehouse_columns(self):
        headers = ["Barcode", "Description", "Available Physical"]
        mapping = resolve_columns(headers, WAREHOUSE_COLUMNS)
        assert mapping == {"item_number": None, "barcode": 0, "available_physical": 2}
    
    def test_shopify_columns(self):
        headers = ["Handle", "Title", "SKU", "Location", "On hand (current)", "On hand (new)"]
        mapping = resolve_columns(headers, SHOPIFY_COLUMNS)
        assert mapping == {"sku": 2, "on_hand": 5}


class TestNormalizeHeader:
    
    def test_none_is_empty(self):
        assert normalize_header(None) == ""
    
    def test_lowercases_and_trims(self):
        assert normalize_header("  On Hand ") == "on hand"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
