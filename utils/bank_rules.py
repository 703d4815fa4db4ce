# utils/bank_rules.py
import re
from typing import Mapping, Optional, Sequence

from utils.regex_patterns import BANK_PATTERNS, UNKNOWN


class BankIdentifier:
    """Keyword/pattern lookup of the issuing bank in a text snippet.

    The table is an ordered mapping of display name -> pattern strings.
    Patterns are compiled once and matched case-insensitively; the first
    bank with any matching pattern wins.
    """

    def __init__(self, table: Optional[Mapping[str, Sequence[str]]] = None):
        table = BANK_PATTERNS if table is None else table
        self._rules = tuple(
            (name, tuple(re.compile(p, flags=re.IGNORECASE) for p in patterns))
            for name, patterns in table.items()
        )

    @property
    def banks(self):
        return tuple(name for name, _ in self._rules)

    def find_bank(self, text: Optional[str]) -> str:
        if not text:
            return UNKNOWN
        for name, patterns in self._rules:
            for pattern in patterns:
                if pattern.search(text):
                    return name
        return UNKNOWN

    def find_bank_or(self, text: Optional[str], fallback: Optional[str]) -> str:
        """Match `text` first, then `fallback` if `text` gave nothing."""
        bank = self.find_bank(text)
        if bank == UNKNOWN:
            return self.find_bank(fallback)
        return bank


DEFAULT_IDENTIFIER = BankIdentifier()


def find_bank(text: Optional[str]) -> str:
    return DEFAULT_IDENTIFIER.find_bank(text)
