"""
Sync Engine Module

Sequences column resolution, warehouse indexing and the Shopify merge,
and turns two uploaded spreadsheets into one updated Shopify workbook.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .cells import Table
from .column_resolver import COLUMN_LABELS, SHOPIFY_COLUMNS, WAREHOUSE_COLUMNS, resolve_columns
from .errors import EmptyInputError, MissingColumnError, SyncError, UnknownFailureError
from .file_validator import validate_upload_pair
from .settings import OUTPUT_CONTENT_TYPE, OUTPUT_FILE_NAME
from .shopify_merge import merge_shopify_rows
from .tabular_codec import TabularCodec
from .warehouse_index import build_warehouse_index


logger = logging.getLogger(__name__)

NO_MATCH_WARNING = "No matches found between Shopify SKUs and Warehouse identifiers (Item Number/Barcode)."


# ═══════════════════════════════════════════════════════════════
# RESULT CLASSES
# ═══════════════════════════════════════════════════════════════

class UploadedSpreadsheet:
    """In-memory upload. Mirrors the .name / .getvalue() shape of Streamlit uploads."""

    def __init__(self, name: str, data: bytes):
        self.name = name
        self.data = data

    def getvalue(self) -> bytes:
        return self.data

    @classmethod
    def from_path(cls, file_path: Union[str, Path]) -> "UploadedSpreadsheet":
        path = Path(file_path)
        return cls(path.name, path.read_bytes())


class SyncResult:
    """Outcome of one successful sync."""

    def __init__(self, table: Table, match_count: int, warnings: Optional[List[str]] = None,
                 columns: Optional[Dict] = None, index_size: int = 0, data: Optional[bytes] = None):
        self.table = table
        self.match_count = match_count
        self.warnings = warnings or []
        self.columns = columns or {}
        self.index_size = index_size
        self.data = data

    @property
    def has_matches(self) -> bool:
        return self.match_count > 0


# ═══════════════════════════════════════════════════════════════
# PRECONDITIONS
# ═══════════════════════════════════════════════════════════════

def _quoted(names: List[str]) -> List[str]:
    return [f'"{COLUMN_LABELS[name]}"' for name in names]


def check_warehouse_columns(columns: Dict[str, Optional[int]]) -> None:
    """Quantity is always required, plus at least one identifier column."""
    missing = []
    if columns["item_number"] is None and columns["barcode"] is None:
        missing.append(" or ".join(_quoted(["item_number", "barcode"])))
    if columns["available_physical"] is None:
        missing.extend(_quoted(["available_physical"]))

    if missing:
        raise MissingColumnError(
            "Warehouse",
            missing,
            'Warehouse file must contain "Available Physical" and either "Item Number" or "Barcode" columns. '
            f"Missing: {', '.join(missing)}."
        )


def check_shopify_columns(columns: Dict[str, Optional[int]]) -> None:
    missing = _quoted([name for name in SHOPIFY_COLUMNS if columns[name] is None])
    if missing:
        raise MissingColumnError(
            "Shopify",
            missing,
            'Shopify file must contain "SKU" and an inventory column like "On hand (new)" or "On hand". '
            f"Missing: {', '.join(missing)}."
        )


# ═══════════════════════════════════════════════════════════════
# CORE PIPELINE
# ═══════════════════════════════════════════════════════════════

def process_tables(warehouse: Table, shopify: Table) -> SyncResult:
    """
    Update Shopify on-hand quantities from the warehouse table.

    Args:
        warehouse: Decoded warehouse stock table.
        shopify: Decoded Shopify product export.

    Returns:
        SyncResult holding the updated Shopify table (header unchanged).

    Raises:
        EmptyInputError: Either table has no data rows.
        MissingColumnError: A required column could not be found.
    """
    if shopify.is_empty:
        raise EmptyInputError("Shopify")
    if warehouse.is_empty:
        raise EmptyInputError("Warehouse")

    warehouse_cols = resolve_columns(warehouse.header, WAREHOUSE_COLUMNS)
    check_warehouse_columns(warehouse_cols)

    shopify_cols = resolve_columns(shopify.header, SHOPIFY_COLUMNS)
    check_shopify_columns(shopify_cols)

    index = build_warehouse_index(
        warehouse.rows,
        quantity_col=warehouse_cols["available_physical"],
        item_number_col=warehouse_cols["item_number"],
        barcode_col=warehouse_cols["barcode"]
    )

    updated_rows, match_count = merge_shopify_rows(
        shopify.rows,
        header_length=shopify.width,
        sku_col=shopify_cols["sku"],
        on_hand_col=shopify_cols["on_hand"],
        index=index
    )

    warnings = []
    if match_count == 0:
        logger.warning(NO_MATCH_WARNING)
        warnings.append(NO_MATCH_WARNING)

    return SyncResult(
        table=Table(header=shopify.header, rows=updated_rows),
        match_count=match_count,
        warnings=warnings,
        columns={"warehouse": warehouse_cols, "shopify": shopify_cols},
        index_size=len(index)
    )


def decode_uploads(warehouse_file, shopify_file, codec) -> Tuple[Table, Table]:
    """
    Decode both uploads concurrently.

    The first failure is re-raised and the other result is discarded.
    """
    tables = {}
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = {
            executor.submit(codec.decode, uploaded.getvalue(), uploaded.name): label
            for label, uploaded in (("warehouse", warehouse_file), ("shopify", shopify_file))
        }
        for future in as_completed(futures):
            try:
                tables[futures[future]] = future.result()
            except Exception:
                for pending in futures:
                    pending.cancel()
                raise

    return tables["warehouse"], tables["shopify"]


def sync_files(warehouse_file, shopify_file, codec=None) -> SyncResult:
    """
    Decode, process and re-encode. The returned result carries the .xlsx bytes.

    Raises:
        SyncError: Any failure. Unexpected exceptions are wrapped in
            UnknownFailureError with the original as __cause__.
    """
    codec = codec or TabularCodec()
    try:
        warehouse, shopify = decode_uploads(warehouse_file, shopify_file, codec)
        result = process_tables(warehouse, shopify)
        result.data = codec.encode(result.table)
    except SyncError:
        raise
    except Exception as e:
        logger.error(f"Unexpected failure while syncing: {e}", exc_info=True)
        raise UnknownFailureError() from e

    logger.info(
        f"Sync complete: {result.match_count} matches, "
        f"{result.index_size} warehouse identifiers, {len(result.table)} Shopify rows"
    )
    return result


def run_sync(warehouse_file, shopify_file, codec=None) -> Dict:
    """
    Main entry point for the UI.

    Args:
        warehouse_file: Upload with .name and .getvalue(), or None.
        shopify_file: Upload with .name and .getvalue(), or None.
        codec: Optional codec override (defaults to TabularCodec).

    Returns:
        Dict with sync result:
        - On success: {"status": "success", "message": "...", "match_count": int,
          "warnings": [...], "file_name": "...", "content_type": "...", "data": bytes}
        - On failure: {"status": "error", "reason": "..."}
    """
    validation = validate_upload_pair(warehouse_file, shopify_file)
    if validation["status"] != "valid":
        return {"status": "error", "reason": validation["reason"]}

    try:
        result = sync_files(warehouse_file, shopify_file, codec=codec)
    except SyncError as e:
        logger.error(f"File processing failed: {e.message}")
        return {"status": "error", "reason": e.message}

    return {
        "status": "success",
        "message": f'Your file "{OUTPUT_FILE_NAME}" is ready. {result.match_count} products updated.',
        "match_count": result.match_count,
        "warnings": result.warnings,
        "file_name": OUTPUT_FILE_NAME,
        "content_type": OUTPUT_CONTENT_TYPE,
        "data": result.data
    }


def run_tracked_sync(status, warehouse_file, shopify_file, codec=None) -> Dict:
    """
    Run run_sync while driving a SyncStatus through processing -> success | error.

    The status never stays in processing: any exception escaping run_sync
    is logged and reported as an error result.
    """
    status.start()
    try:
        result = run_sync(warehouse_file, shopify_file, codec=codec)
    except Exception:
        logger.exception("Sync crashed outside the error taxonomy")
        result = {"status": "error", "reason": UnknownFailureError().message}

    if result["status"] == "success":
        status.succeed()
    else:
        status.fail(result["reason"])
    return result
