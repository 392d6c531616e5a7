"""
Column Resolver Module

Finds the columns StockSync needs in spreadsheets whose headers vary
between exports. Matching is case-insensitive and whitespace-trimmed
against a fixed alias table.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .cells import Cell, cell_to_text


logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════
# ALIAS TABLE
# ═══════════════════════════════════════════════════════════════

# ORDER MATTERS: earlier aliases win over later ones wherever they sit in the header
ALIASES = {
    "item_number": ["Item Number", "item number", "item_number"],
    "barcode": ["Barcode", "barcode"],
    "available_physical": ["Available Physical", "available physical", "available_physical"],
    "sku": ["SKU", "Sku", "sku", "variant sku"],
    "on_hand": [
        "On hand (new)", "On hand", "on hand", "on_hand", "inventory quantity",
        "Variant Inventory Qty", "Inventory Available", "Available", "On hand (current)"
    ],
}

WAREHOUSE_COLUMNS = ["item_number", "barcode", "available_physical"]
SHOPIFY_COLUMNS = ["sku", "on_hand"]

# Display names used in error messages
COLUMN_LABELS = {
    "item_number": "Item Number",
    "barcode": "Barcode",
    "available_physical": "Available Physical",
    "sku": "SKU",
    "on_hand": "On hand",
}


# ═══════════════════════════════════════════════════════════════
# RESOLUTION
# ═══════════════════════════════════════════════════════════════

def normalize_header(value: Cell) -> str:
    """Lowercase and trim a header cell. Blank cells become ""."""
    return cell_to_text(value).lower()


def resolve_column(headers: Sequence[Cell], aliases: Sequence[str]) -> Optional[int]:
    """
    Return the index of the header matching the highest-priority alias.

    Args:
        headers: Header row cells in sheet order.
        aliases: Acceptable header names, highest priority first.

    Returns:
        Zero-based column index, or None when no alias matches.
    """
    normalized = [normalize_header(h) for h in headers]
    for alias in aliases:
        target = alias.lower().strip()
        if not target:
            continue
        if target in normalized:
            return normalized.index(target)
    return None


def resolve_columns(headers: Sequence[Cell], logical_columns: List[str]) -> Dict[str, Optional[int]]:
    """Resolve several logical columns against one header row."""
    mapping = {name: resolve_column(headers, ALIASES[name]) for name in logical_columns}
    logger.debug(f"Resolved columns: {mapping}")
    return mapping
