"""
Warehouse Index Module

Builds the identifier -> quantity lookup from warehouse rows.
Each row may register its quantity under its Item Number, its Barcode, or both.
"""

import logging
import math
import re
from typing import Dict, Optional, Sequence

from .cells import Cell, cell_to_text, is_empty_cell


logger = logging.getLogger(__name__)

# Leading decimal number, the same prefix JavaScript's parseFloat accepts
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_quantity(value: Cell) -> float:
    """
    Parse a quantity cell.

    Thousands separators are stripped ("1,234" -> 1234). Missing or
    unparsable values count as 0. Never raises.
    """
    if is_empty_cell(value):
        return 0.0
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).replace(",", "").strip()
        match = _LEADING_NUMBER.match(text)
        if not match:
            return 0.0
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _cell_at(row: Sequence[Cell], index: int) -> Cell:
    """Read a cell, treating positions past the end of a short row as empty."""
    if index < len(row):
        return row[index]
    return None


def build_warehouse_index(
    rows: Sequence[Sequence[Cell]],
    quantity_col: int,
    item_number_col: Optional[int] = None,
    barcode_col: Optional[int] = None
) -> Dict[str, float]:
    """
    Map every non-empty identifier to its row's quantity.

    Args:
        rows: Warehouse data rows in sheet order.
        quantity_col: Index of the "Available Physical" column.
        item_number_col: Index of the "Item Number" column, if present.
        barcode_col: Index of the "Barcode" column, if present.

    Returns:
        Dict of identifier string -> quantity. When an identifier appears on
        several rows the last row wins.
    """
    index: Dict[str, float] = {}
    identifier_cols = [col for col in (item_number_col, barcode_col) if col is not None]

    for row in rows:
        quantity = parse_quantity(_cell_at(row, quantity_col))
        for col in identifier_cols:
            key = cell_to_text(_cell_at(row, col))
            if key:
                index[key] = quantity

    logger.info(f"Warehouse index built: {len(index)} identifiers from {len(rows)} rows")
    return index
