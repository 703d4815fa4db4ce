import re
from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import IMPS_REFERENCE, UNKNOWN

_REFERENCE = re.compile(IMPS_REFERENCE)


class MMTParser(BaseRemarkParser):
    dialect = "MMT"

    def extract_name(self, parts: List[str], remark: str) -> str:
        return self.segment(parts, 4, self.segment(parts, 3))

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        id_part = self.segment(parts, 2, "")
        if "IMPS" in remark and _REFERENCE.fullmatch(id_part):
            return f"IMPS-{id_part}"
        return UNKNOWN

    def extract_bank(self, parts: List[str], remark: str) -> str:
        # only the trailing segment is inspected, which is usually the name
        tail = remark[remark.rfind("/") + 1:]
        return self.banks.find_bank(tail or remark)
