"""
StockSync

Synchronizes Shopify on-hand quantities from a warehouse stock export.
"""

from .sync_engine import (
    process_tables,
    sync_files,
    run_sync,
    run_tracked_sync,
    SyncResult,
    UploadedSpreadsheet
)
from .column_resolver import (
    ALIASES,
    resolve_column,
    resolve_columns
)
from .warehouse_index import (
    build_warehouse_index,
    parse_quantity
)
from .shopify_merge import merge_shopify_rows
from .tabular_codec import TabularCodec
from .cells import Table
from .sync_status import SyncStatus
from .errors import (
    SyncError,
    MissingColumnError,
    EmptyInputError,
    CodecUnavailableError,
    DecodeError,
    UnknownFailureError
)

__all__ = [
    "process_tables",
    "sync_files",
    "run_sync",
    "run_tracked_sync",
    "SyncResult",
    "UploadedSpreadsheet",
    "ALIASES",
    "resolve_column",
    "resolve_columns",
    "build_warehouse_index",
    "parse_quantity",
    "merge_shopify_rows",
    "TabularCodec",
    "Table",
    "SyncStatus",
    "SyncError",
    "MissingColumnError",
    "EmptyInputError",
    "CodecUnavailableError",
    "DecodeError",
    "UnknownFailureError"
]
