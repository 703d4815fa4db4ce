"""
Configuration File - column names, service and logging settings
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Statement columns
REMARKS_COLUMN = os.getenv("REMARKS_COLUMN", "Transaction Remarks")
OUTPUT_COLUMNS = ("Name", "Transaction ID", "Bank")
OUTPUT_SHEET_NAME = "Sheet1"

# Service settings
HOST = os.getenv("REMARKS_HOST", "127.0.0.1")
PORT = int(os.getenv("REMARKS_PORT", "3000"))
PUBLIC_DIR = os.getenv(
    "REMARKS_PUBLIC_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "public"),
)
MAX_UPLOAD_BYTES = int(float(os.getenv("REMARKS_MAX_UPLOAD_MB", "20")) * 1024 * 1024)

# Logging
LOG_LEVEL = os.getenv("REMARKS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
