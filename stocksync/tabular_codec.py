"""
Tabular Codec Module

Turns uploaded spreadsheet bytes into Tables and Tables back into .xlsx bytes.
Backed by pandas: openpyxl for .xlsx, xlrd for .xls, the C parser for .csv.
Only the first sheet of a workbook is read.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from .cells import Row, Table, cell_to_text, clean_cell, is_blank_row
from .errors import CodecUnavailableError, DecodeError
from .settings import OUTPUT_SHEET_NAME, SUPPORTED_EXTENSIONS


logger = logging.getLogger(__name__)

EXCEL_ENGINES = {
    ".xlsx": "openpyxl",
    ".xls": "xlrd",
}


def _read_csv_frame(data: bytes) -> Tuple[pd.DataFrame, int]:
    """
    Read CSV text keeping literal cell values ("NA", "null" stay text).

    The widest line sets the column count so ragged rows longer than the
    header are read instead of rejected. Also returns the header line's own
    field count.
    """
    text = data.decode("utf-8-sig")
    records = [fields for fields in csv.reader(io.StringIO(text)) if any(f.strip() for f in fields)]
    if not records:
        return pd.DataFrame(), 0
    width = max(len(fields) for fields in records)
    frame = pd.read_csv(
        io.StringIO(text),
        header=None,
        names=list(range(width)),
        dtype=object,
        keep_default_na=False,
        na_values=[""],
        skip_blank_lines=True
    )
    return frame, len(records[0])


def _read_frame(data: bytes, file_name: str) -> Tuple[pd.DataFrame, Optional[int]]:
    """
    Read the first sheet with no header inference and no type coercion.

    Returns:
        Tuple of (frame, header_width). header_width is None when the
        sheet's own range defines the width.
    """
    ext = Path(file_name).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise DecodeError(file_name, f"unsupported extension {ext!r}")

    if ext == ".csv":
        return _read_csv_frame(data)
    frame = pd.read_excel(
        io.BytesIO(data),
        sheet_name=0,
        header=None,
        dtype=object,
        keep_default_na=False,
        na_values=[""],
        engine=EXCEL_ENGINES[ext]
    )
    return frame, None


def _frame_to_rows(df: pd.DataFrame) -> List[Row]:
    rows = []
    for values in df.itertuples(index=False, name=None):
        row = [clean_cell(value) for value in values]
        if is_blank_row(row):
            continue
        rows.append(row)
    return rows


class TabularCodec:
    """Decode/encode spreadsheets. Swap in any object with the same two methods."""

    def decode(self, data: bytes, file_name: str) -> Table:
        """
        Decode one uploaded file.

        The first non-blank row is the header. Blank header cells become "".
        Data rows are returned as read, including cells past the header width.

        Raises:
            CodecUnavailableError: The reader library for this format is missing.
            DecodeError: The file is corrupt, empty of a sheet, or not a spreadsheet.
        """
        try:
            df, header_width = _read_frame(data, file_name)
        except ImportError as e:
            raise CodecUnavailableError(
                f"File processing library is not available for {file_name}: {e}"
            ) from e
        except pd.errors.EmptyDataError:
            return Table(header=[])
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(file_name, str(e)) from e

        rows = _frame_to_rows(df)
        if not rows:
            return Table(header=[])

        header_cells = rows[0] if header_width is None else rows[0][:header_width]
        header = [cell if isinstance(cell, str) else cell_to_text(cell) for cell in header_cells]
        table = Table(header=header, rows=rows[1:])
        logger.info(f"Decoded {file_name}: {table.width} columns, {len(table)} data rows")
        return table

    def encode(self, table: Table, sheet_name: str = OUTPUT_SHEET_NAME) -> bytes:
        """Write header + rows as a single-sheet .xlsx workbook."""
        frame = pd.DataFrame([table.header] + table.rows, dtype=object)
        buffer = io.BytesIO()
        try:
            frame.to_excel(buffer, sheet_name=sheet_name, header=False, index=False, engine="openpyxl")
        except ImportError as e:
            raise CodecUnavailableError(f"File processing library is not available: {e}") from e
        return buffer.getvalue()
