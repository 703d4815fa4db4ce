import io

import pandas as pd

from .errors import StatementReadError, UnsupportedFileType


def read_statement(data: bytes, file_type: str) -> pd.DataFrame:
    """Decode an uploaded statement into a DataFrame of string cells.

    Only the first sheet of a workbook is read. Blank CSV cells stay as empty
    strings; blank workbook cells come back as NaN.
    """
    if not data:
        raise StatementReadError("empty file")
    try:
        if file_type == "csv":
            return pd.read_csv(io.BytesIO(data), dtype=str, keep_default_na=False)
        if file_type == "xlsx":
            return pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=str, engine="openpyxl")
    except Exception as e:
        raise StatementReadError(f"failed to read {file_type} file: {e}") from e
    raise UnsupportedFileType(f"unsupported file type {file_type!r}")
