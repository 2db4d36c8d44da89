"""Reading and writing host tables (CSV / Excel ranges)"""

from pathlib import Path
from typing import Any, List

import chardet
import pandas as pd

from core.exceptions import FileParseError
from core.models import Table

EXCEL_EXTENSIONS = (".xlsx",)
UNSUPPORTED_EXTENSIONS = (".xls",)


def _check_format(path: Path, file_path: str) -> None:
    if path.suffix.lower() in UNSUPPORTED_EXTENSIONS:
        raise FileParseError(
            f"Unsupported table format {path.suffix}: save it as .xlsx or .csv", file_path
        )


def _detect_encoding(path: Path) -> str:
    with open(path, "rb") as f:
        raw_sample = f.read(8192)
    if raw_sample.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    result = chardet.detect(raw_sample)
    if result["encoding"] and result["confidence"] > 0.7:
        return result["encoding"]
    return "utf-8"


def read_table(file_path: str, trim_blank_rows: bool = True) -> Table:
    """
    Load a header-less range as rows of text cells

    Blank cells become empty strings. Blank rows inside the range are kept
    so parallel header rows stay aligned; trailing blank rows are dropped
    unless trim_blank_rows is False (schema tables, where the last header
    row may be legitimately empty).
    """
    path = Path(file_path)
    if not path.exists():
        raise FileParseError(f"File not found: {file_path}", file_path)
    _check_format(path, file_path)

    try:
        if path.suffix.lower() in EXCEL_EXTENSIONS:
            df = pd.read_excel(path, header=None, dtype=str, keep_default_na=False)
        else:
            df = pd.read_csv(
                path,
                encoding=_detect_encoding(path),
                header=None,
                dtype=str,
                keep_default_na=False
            )
    except Exception as e:
        raise FileParseError(f"Failed to read table: {e}", file_path) from e

    rows = df.values.tolist()
    while trim_blank_rows and rows and not any(str(cell).strip() for cell in rows[-1]):
        rows.pop()
    return rows


def write_table(rows: List[List[Any]], file_path: str) -> None:
    """Write rows without header or index"""
    path = Path(file_path)
    _check_format(path, file_path)
    df = pd.DataFrame(rows)
    try:
        if path.suffix.lower() in EXCEL_EXTENSIONS:
            df.to_excel(path, header=False, index=False)
        else:
            df.to_csv(path, header=False, index=False)
    except (OSError, ValueError) as e:
        raise FileParseError(f"Failed to write table: {e}", file_path) from e


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_rows(rows: List[List[Any]], row_separator: str = "|", column_separator: str = ",") -> str:
    """Serialise rows into one delimited string"""
    return row_separator.join(
        column_separator.join(format_cell(cell) for cell in row) for row in rows
    )
