"""
Central configuration for StockSync.

Output naming, accepted upload formats, size limits and UI timing.
Values that a deployment may want to change can be overridden with
STOCKSYNC_* environment variables.
"""

import os


OUTPUT_FILE_NAME = "Shopify_Onhand_Updated.xlsx"
OUTPUT_SHEET_NAME = "Updated Inventory"
OUTPUT_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SUPPORTED_EXTENSIONS = {".csv", ".xls", ".xlsx"}

MAX_FILE_SIZE_MB = int(os.environ.get("STOCKSYNC_MAX_FILE_SIZE_MB", "50"))

# Seconds the success state stays visible before the UI returns to idle
SUCCESS_RESET_SECONDS = float(os.environ.get("STOCKSYNC_SUCCESS_RESET_SECONDS", "5"))

LOG_LEVEL = os.environ.get("STOCKSYNC_LOG_LEVEL", "INFO").upper()
