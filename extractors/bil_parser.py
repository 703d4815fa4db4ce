import re
from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import BIL_REFERENCE, UNKNOWN

_REFERENCE = re.compile(BIL_REFERENCE)


class BILParser(BaseRemarkParser):
    """Internet fund transfer bills: BIL/<type>/<carrier ref>/<..>/<name>"""

    dialect = "BIL"

    def extract_name(self, parts: List[str], remark: str) -> str:
        return self.segment(parts, 4, self.segment(parts, 3))

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        id_part = self.segment(parts, 2, "")
        return f"INFT-{id_part}" if _REFERENCE.fullmatch(id_part) else UNKNOWN
