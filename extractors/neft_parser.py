from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import IFSC_BANK_CODE_LENGTH, NEFT_ID_LENGTHS, UNKNOWN


class NEFTParser(BaseRemarkParser):
    """NEFT-<ref>-<name>-...; the reference starts with the sender IFSC code."""

    dialect = "NEFT"
    delimiter = "-"

    def is_valid_id(self, id_part: str) -> bool:
        return len(id_part) in NEFT_ID_LENGTHS

    def extract_name(self, parts: List[str], remark: str) -> str:
        return self.segment(parts, 2)

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        id_part = self.segment(parts, 1, "")
        return f"{self.dialect}-{id_part}" if self.is_valid_id(id_part) else UNKNOWN

    def extract_bank(self, parts: List[str], remark: str) -> str:
        id_part = self.segment(parts, 1, "")
        if len(id_part) >= IFSC_BANK_CODE_LENGTH:
            return self.banks.find_bank_or(id_part[:IFSC_BANK_CODE_LENGTH], remark)
        return self.banks.find_bank(remark)
