import io

import pandas as pd

import config

from .errors import UnsupportedFileType


def write_statement(df: pd.DataFrame, file_type: str, sheet_name: str = config.OUTPUT_SHEET_NAME) -> bytes:
    if file_type == "csv":
        return df.to_csv(index=False).encode("utf-8")
    if file_type == "xlsx":
        buf = io.BytesIO()
        with pd.ExcelWriter(buf, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False)
        return buf.getvalue()
    raise UnsupportedFileType(f"unsupported file type {file_type!r}")
