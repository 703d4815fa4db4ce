# utils/regex_patterns.py
"""
Regex patterns and literal markers for deterministic remark parsing.
All tables here are read-only and shared across rows.
"""
from types import MappingProxyType

UNKNOWN = "UNKNOWN"

# Bank display name -> alternation patterns, checked case-insensitively.
# Order matters: the first bank with a matching pattern wins.
BANK_PATTERNS = MappingProxyType({
    "State Bank of India": (r"State Bank|SBI|SBIN\d{7}|@sbi",),
    "HDFC Bank": (r"HDFC BANK|HDFC|HDF|@hdfc",),
    "ICICI Bank": (r"ICICI|ICIC|@ybl",),
    "Axis Bank": (r"Axis Bank|Axis|@apl",),
    "Kotak Mahindra Bank": (r"Kotak|KMB|Kotak Mahindra",),
    "Canara Bank": (r"CANARA BANK|Canara|CNRB",),
    "Punjab National Bank": (r"Punjab Nat|PNB|PNBM|PUNB",),
    "IDFC FIRST Bank": (r"idfc|IDFC FIRST|@idfc",),
    "Yes Bank": (r"YES BANK|YESB",),
    "AU Small Finance Bank": (r"AUBL",),
    "Bank of Baroda": (r"Baroda|BOB|BARB",),
    "Indian Bank": (r"INDIAN BANK|IDIB|@ibl",),
    "Sarvodaya Bank": (r"Sarvodaya",),
    "Paytm Payments Bank": (r"@paytm|@ptye|@ptax",),
})

# Literal prefixes, in dispatch priority order
DIALECT_MARKERS = (
    ("CMS", "CMS/"),
    ("UPI", "UPI/"),
    ("NEFT", "NEFT-"),
    ("RTGS", "RTGS-"),
    ("CLG", "CLG/"),
    ("MMT", "MMT/"),
    ("BIL", "BIL/"),
)

# Boilerplate words that disqualify a UPI segment as a payer name
UPI_NAME_DENY_WORDS = (
    "remark",
    "fund",
    "payment",
    "booking",
    "request",
    "sent",
    "p2a",
    "bill payment",
    "kotak",
    "nat",
    "bank",
)
UPI_NAME_DENY_PREFIXES = ("paid",)

UPI_REFERENCE = r"\d{12}"
IMPS_REFERENCE = r"\d{12}"

NEFT_ID_LENGTHS = (16, 18, 22)
RTGS_MIN_ID_LENGTH = 22
CLG_ID_LENGTH = 6
IFSC_BANK_CODE_LENGTH = 4

BIL_CARRIER_CODES = ("EKW", "EJF")
BIL_REFERENCE = r"(?:%s)\d{7}" % "|".join(BIL_CARRIER_CODES)
