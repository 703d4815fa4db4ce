from typing import List, Optional

from models.remark import ParsedRemark
from utils.bank_rules import DEFAULT_IDENTIFIER, BankIdentifier
from utils.regex_patterns import UNKNOWN


class BaseRemarkParser:
    dialect = UNKNOWN
    delimiter = "/"

    def __init__(self, bank_identifier: Optional[BankIdentifier] = None):
        self.banks = bank_identifier or DEFAULT_IDENTIFIER

    def split(self, remark: str) -> List[str]:
        """Split on the dialect delimiter, dropping empty segments"""
        return [p for p in remark.split(self.delimiter) if p]

    @staticmethod
    def segment(parts: List[str], index: int, default: str = UNKNOWN) -> str:
        return parts[index] if len(parts) > index else default

    def extract_name(self, parts: List[str], remark: str) -> str:
        """Override: payer name or UNKNOWN"""
        raise NotImplementedError

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        """Override: dialect-prefixed identifier or UNKNOWN"""
        raise NotImplementedError

    def extract_bank(self, parts: List[str], remark: str) -> str:
        return self.banks.find_bank(remark)

    def parse(self, remark: str) -> ParsedRemark:
        parts = self.split(remark)
        name = self.extract_name(parts, remark).strip()
        return ParsedRemark(
            name=name or UNKNOWN,
            transaction_id=self.extract_transaction_id(parts, remark),
            bank=self.extract_bank(parts, remark),
        )


class UnknownParser(BaseRemarkParser):
    def parse(self, remark: str) -> ParsedRemark:
        return ParsedRemark(name=UNKNOWN, transaction_id=UNKNOWN, bank=UNKNOWN)
