import re
from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import (
    UNKNOWN,
    UPI_NAME_DENY_PREFIXES,
    UPI_NAME_DENY_WORDS,
    UPI_REFERENCE,
)

_DIGIT = re.compile(r"\d")
_REFERENCE = re.compile(UPI_REFERENCE)


def looks_like_name(part: str) -> bool:
    """A segment with a space, no digits, no VPA and no boilerplate words."""
    if " " not in part or "@" in part or _DIGIT.search(part):
        return False
    lower = part.lower().strip()
    if any(word in lower for word in UPI_NAME_DENY_WORDS):
        return False
    return not lower.startswith(UPI_NAME_DENY_PREFIXES)


class UPIParser(BaseRemarkParser):
    dialect = "UPI"

    def split(self, remark: str) -> List[str]:
        # drop the leading "UPI" marker segment
        return super().split(remark)[1:]

    def extract_name(self, parts: List[str], remark: str) -> str:
        for part in parts:
            if looks_like_name(part):
                return part
        # fall back to the handle of the first VPA
        for part in parts:
            if "@" in part:
                return part.split("@")[0]
        return UNKNOWN

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        m = _REFERENCE.search(remark)
        if m:
            return f"UPI-{m.group(0)}"
        last = parts[-1] if parts else ""
        return f"UPI-{last}" if len(last) > 10 else UNKNOWN
