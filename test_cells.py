"""
Tests for cell normalization and the Table model

Run with: python3 -m pytest test_cells.py -v
"""

import numpy as np
import pytest
from stocksync.cells import Table, cell_to_text, clean_cell, is_blank_row


class TestCellToText:
    
    def test_none_and_nan(self):
        assert cell_to_text(None) == ""
        assert cell_to_text(float("nan")) == ""
    
    def test_integral_float(self):
        assert cell_to_text(12.0) == "12"
    
    def test_fractional_float(self):
        assert cell_to_text(1.5) == "1.5"
    
    def test_trims_text(self):
        assert cell_to_text("  A1 ") == "A1"


class TestCleanCell:
    
    def test_numpy_scalars_become_python(self):
        value = clean_cell(np.int64(7))
        assert value == 7
        assert type(value) is int
    
    def test_nan_becomes_none(self):
        assert clean_cell(np.float64("nan")) is None


class TestTable:
    
    def test_blank_row(self):
        assert is_blank_row([None, " ", float("nan")])
        assert not is_blank_row([None, "x"])
    
    def test_width_and_emptiness(self):
        table = Table(["SKU", "On hand"])
        assert table.width == 2
        assert table.is_empty
    
    def test_headers_text(self):
        assert Table([" SKU ", None, 3.0]).headers_text == ["SKU", "", "3"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
