"""statement_io package: reading bank-statement exports (CSV/XLSX), adding
the parsed remark columns and writing them back out.
"""
import logging
from typing import Optional, Tuple

from processors.remark_processor import RemarkProcessor

from .detector import detect_file_type
from .errors import StatementFileError, StatementReadError, UnsupportedFileType
from .reader import read_statement
from .writer import write_statement

logger = logging.getLogger(__name__)

__all__ = [
    'detect_file_type',
    'read_statement',
    'write_statement',
    'process_statement',
    'StatementFileError',
    'StatementReadError',
    'UnsupportedFileType',
]


def process_statement(data: bytes, filename: str, processor: Optional[RemarkProcessor] = None) -> Tuple[bytes, str]:
    """Detect, read, augment and re-encode a statement file.

    Returns the encoded output and its file type ('csv' or 'xlsx').
    """
    file_type = detect_file_type(filename)
    df = read_statement(data, file_type)
    logger.info("read %s with %d rows", filename, len(df))
    out = (processor or RemarkProcessor()).process_frame(df)
    return write_statement(out, file_type), file_type
