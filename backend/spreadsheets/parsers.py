"""
Turn an uploaded spreadsheet blob into a header list plus row records.

Pandas does the Excel decoding (openpyxl/xlrd); CSV is tokenised with the
``csv`` module so that ragged rows survive, then loaded into a frame too.
Everything is read with ``header=None`` so that the header rules live here
instead of in Pandas, which would otherwise rename duplicates to "Sales.1".
"""
from __future__ import annotations

import csv
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from io import BytesIO, StringIO
from pathlib import PurePath
from typing import Any

import numpy as np
import pandas as pd

from .exceptions import ParseError, ValidationError

SUPPORTED_EXTENSIONS = {
    ".xlsx": "xlsx",
    ".xls": "xls",
    ".csv": "csv",
}

ALLOWED_CONTENT_TYPES = {
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",  # .xlsx
    "application/vnd.ms-excel",  # .xls (and CSV on Windows)
    "text/csv",
}

EXCEL_ENGINES = {"xlsx": "openpyxl", "xls": "xlrd"}

# Files saved from Excel on Windows are often not UTF-8.
CSV_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")

# A CSV sheet has no sheet name of its own; spreadsheet tools call it "Sheet1".
CSV_SHEET_NAME = "Sheet1"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass
class ParsedSheet:
    """Result of parsing the first sheet of an upload."""

    headers: list[str]
    rows: list[dict[str, Any]]
    sheet_names: list[str] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def detect_format(filename: str | None, content_type: str | None) -> str:
    """
    Work out "xlsx" / "xls" / "csv" from the upload's name and MIME type.

    Both have to look right, otherwise the file is rejected before we try to
    decode anything.
    """
    extension = PurePath(filename or "").suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
        raise ValidationError("Only Excel/CSV files are allowed!")
    return SUPPORTED_EXTENSIONS[extension]


def parse_spreadsheet(blob: bytes, file_format: str) -> ParsedSheet:
    """
    Parse the first sheet of ``blob``.

    The first row is always the header row. Fully blank rows are skipped.
    Raises ``ParseError`` if the blob cannot be decoded or there is nothing
    to ingest (no sheets, empty sheet, header only).
    """
    if file_format == "csv":
        frame = _read_csv(blob)
        sheet_names = [CSV_SHEET_NAME]
        convert = _csv_cell
    elif file_format in EXCEL_ENGINES:
        frame, sheet_names = _read_excel(blob, file_format)
        convert = _excel_cell
    else:
        raise ParseError(f"Unsupported file format: {file_format}")

    if frame.empty:
        raise ParseError("First worksheet is empty")

    raw_rows = frame.itertuples(index=False, name=None)
    headers = _build_headers(next(raw_rows))

    rows = []
    for raw_row in raw_rows:
        cells = [convert(value) for value in raw_row]
        if all(cell is None for cell in cells):
            continue
        rows.append(dict(zip(headers, cells)))

    if not rows:
        raise ParseError("First worksheet contains no data")

    return ParsedSheet(headers=headers, rows=rows, sheet_names=sheet_names)


def _read_excel(blob: bytes, file_format: str) -> tuple[pd.DataFrame, list[str]]:
    try:
        sheets = pd.read_excel(
            BytesIO(blob),
            sheet_name=None,
            header=None,
            # "NA", "null", "None" etc. are real text in a spreadsheet.
            keep_default_na=False,
            na_values=[],
            engine=EXCEL_ENGINES[file_format],
        )
    except Exception as exc:  # noqa: BLE001
        # openpyxl/xlrd raise a zoo of exception types for corrupt files.
        raise ParseError(f"Invalid Excel file: {exc}") from exc

    if not sheets:
        raise ParseError("Excel file contains no worksheets")

    sheet_names = [str(name) for name in sheets]
    first_sheet = next(iter(sheets.values()))
    return first_sheet, sheet_names


def _read_csv(blob: bytes) -> pd.DataFrame:
    text = None
    for encoding in CSV_ENCODINGS:
        try:
            text = blob.decode(encoding)
            break
        except UnicodeDecodeError:
            continue
    if text is None:
        raise ParseError("Invalid CSV file: could not decode the file")

    try:
        # Blank lines come back as [] and are dropped, like Pandas would.
        records = [record for record in csv.reader(StringIO(text, newline="")) if record]
    except csv.Error as exc:
        raise ParseError(f"Invalid CSV file: {exc}") from exc

    # Rows can be ragged; the frame pads short rows with None and wider rows
    # get extra columns that fall under the blank-header rule.
    return pd.DataFrame(records)


def _build_headers(header_cells: tuple) -> list[str]:
    values = [_native_cell(value) for value in header_cells]
    if all(value is None or str(value).strip() == "" for value in values):
        raise ParseError("First row of the worksheet is empty; expected a header row")

    headers: list[str] = []
    seen: set[str] = set()
    for position, value in enumerate(values, start=1):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        name = "" if value is None else str(value)

        if not name.strip() or name in seen:
            name = f"Column {position}"
            suffix = 2
            while name in seen:
                name = f"Column {position} ({suffix})"
                suffix += 1

        seen.add(name)
        headers.append(name)
    return headers


def _native_cell(value: Any) -> Any:
    """Convert a Pandas/NumPy cell into a plain JSON-friendly Python value."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, float) and pd.isna(value):
        return None
    if isinstance(value, (bool, int, float)):
        return value
    return str(value)


def _csv_cell(value: Any) -> Any:
    """
    Type a raw CSV cell the way spreadsheet tools do.

    Plain numbers become int/float and TRUE/FALSE become booleans. Anything
    else, including "nan" or "1,000", stays text.
    """
    if not isinstance(value, str):
        # Padding for short rows.
        return None
    if value == "":
        return None

    text = value.strip()
    if _INTEGER_RE.match(text):
        return int(text)
    if _NUMBER_RE.match(text):
        return float(text)
    if text.upper() in ("TRUE", "FALSE"):
        return text.upper() == "TRUE"
    return value


def _excel_cell(value: Any) -> Any:
    # With NA detection off, empty Excel cells arrive as "".
    value = _native_cell(value)
    return None if value == "" else value
