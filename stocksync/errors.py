"""
Error taxonomy for StockSync.

Every failure aborts the whole sync. Each error carries one human-readable
message that the UI shows as-is.
"""

from typing import List


class SyncError(Exception):
    """Base class for failures surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingColumnError(SyncError):
    """A mandatory logical column could not be resolved in one of the files."""

    def __init__(self, file_label: str, missing: List[str], message: str):
        super().__init__(message)
        self.file_label = file_label
        self.missing = missing


class EmptyInputError(SyncError):
    """A decoded table had zero data rows."""

    def __init__(self, file_label: str):
        super().__init__(f"The {file_label.lower()} file is empty.")
        self.file_label = file_label


class CodecUnavailableError(SyncError):
    """The spreadsheet library needed for a format is not installed."""


class DecodeError(SyncError):
    """A file could not be parsed as a spreadsheet."""

    def __init__(self, file_name: str, detail: str = ""):
        message = f'Unable to read "{file_name}". Please ensure it is a valid .xlsx, .xls or .csv file.'
        super().__init__(message)
        self.file_name = file_name
        self.detail = detail


class UnknownFailureError(SyncError):
    """Any other exception raised while processing."""

    def __init__(self, message: str = "An unexpected error occurred while processing the files."):
        super().__init__(message)
