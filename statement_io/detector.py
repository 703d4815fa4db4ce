import os

from .errors import UnsupportedFileType

SUPPORTED_TYPES = {
    ".csv": "csv",
    ".xlsx": "xlsx",
}


def detect_file_type(filename: str) -> str:
    """Return 'csv' or 'xlsx' from the file extension (case-insensitive)."""
    ext = os.path.splitext(filename or "")[1].lower()
    try:
        return SUPPORTED_TYPES[ext]
    except KeyError:
        raise UnsupportedFileType(f"unsupported file type {ext or '(none)'!r}; expected .csv or .xlsx") from None
