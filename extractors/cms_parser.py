from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import UNKNOWN


class CMSParser(BaseRemarkParser):
    dialect = "CMS"

    def extract_name(self, parts: List[str], remark: str) -> str:
        # CMS narrations never carry the payer
        return UNKNOWN

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        for part in parts:
            if "_" in part:
                return f"CMS-{part}"
        return UNKNOWN
