"""
Shopify Merge Module

Writes warehouse quantities into the on-hand column of Shopify rows while
keeping every row exactly as wide as the header.
"""

import logging
from typing import Dict, List, Sequence, Tuple, Union

from .cells import Cell, Row, cell_to_text


logger = logging.getLogger(__name__)


def normalize_row_width(row: Sequence[Cell], width: int) -> Row:
    """Return a copy of row padded with None or truncated to width."""
    new_row = list(row[:width])
    if len(new_row) < width:
        new_row.extend([None] * (width - len(new_row)))
    return new_row


def _as_cell_quantity(quantity: float) -> Union[int, float]:
    """Whole quantities are written as int so the sheet shows 15, not 15.0."""
    if float(quantity).is_integer():
        return int(quantity)
    return quantity


def merge_shopify_rows(
    rows: Sequence[Sequence[Cell]],
    header_length: int,
    sku_col: int,
    on_hand_col: int,
    index: Dict[str, float]
) -> Tuple[List[Row], int]:
    """
    Update the on-hand cell of every Shopify row whose SKU is in the index.

    Rows with an empty SKU or an unknown SKU keep their existing on-hand value.
    Input rows are not modified.

    Returns:
        Tuple of (updated_rows, match_count)
    """
    updated_rows = []
    match_count = 0

    for row in rows:
        new_row = normalize_row_width(row, header_length)

        sku = new_row[sku_col]
        if sku is not None:
            sku_text = cell_to_text(sku)
            if sku_text in index:
                new_row[on_hand_col] = _as_cell_quantity(index[sku_text])
                match_count += 1

        updated_rows.append(new_row)

    logger.info(f"Shopify merge: {match_count} of {len(rows)} rows matched")
    return updated_rows, match_count
