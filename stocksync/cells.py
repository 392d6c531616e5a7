"""
Cell and Table Models

Spreadsheet cells arrive as text, numbers or nothing. Matching is always
done on a normalized string form produced by cell_to_text().
"""

import math
from typing import List, Optional, Sequence, Union

import numpy as np


Cell = Optional[Union[str, int, float]]
Row = List[Cell]


def is_empty_cell(value: Cell) -> bool:
    """Return True for None and NaN (pandas' marker for a blank cell)."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def clean_cell(value) -> Cell:
    """Collapse blank markers to None so rows only ever hold plain values."""
    if is_empty_cell(value):
        return None
    # numpy scalars from pandas -> plain Python numbers
    if isinstance(value, np.generic):
        return value.item()
    return value


def cell_to_text(value: Cell) -> str:
    """
    Convert a cell to its trimmed string form.

    Integral floats lose their fractional part so 12.0 and "12" compare equal,
    which is how spreadsheet tools display them.
    """
    if is_empty_cell(value):
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_blank_row(row: Sequence[Cell]) -> bool:
    """Return True when every cell of a row is empty or whitespace."""
    return all(cell_to_text(cell) == "" for cell in row)


class Table:
    """A header row plus ordered data rows, as decoded from one sheet."""

    def __init__(self, header: Sequence[Cell], rows: Optional[Sequence[Sequence[Cell]]] = None):
        self.header = list(header)
        self.rows = [list(row) for row in (rows or [])]

    @property
    def width(self) -> int:
        return len(self.header)

    @property
    def headers_text(self) -> List[str]:
        return [cell_to_text(cell) for cell in self.header]

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 0

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return f"Table(width={self.width}, rows={len(self.rows)})"
