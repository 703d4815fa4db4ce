from typing import List

from extractors.base_parser import BaseRemarkParser
from utils.regex_patterns import CLG_ID_LENGTH, UNKNOWN


class CLGParser(BaseRemarkParser):
    """Cheque clearing: CLG/<name>/<cheque no>/<bank code>"""

    dialect = "CLG"

    def extract_name(self, parts: List[str], remark: str) -> str:
        return self.segment(parts, 1)

    def extract_transaction_id(self, parts: List[str], remark: str) -> str:
        id_part = self.segment(parts, 2, "")
        return f"CLG-{id_part}" if len(id_part) == CLG_ID_LENGTH else UNKNOWN

    def extract_bank(self, parts: List[str], remark: str) -> str:
        if len(parts) > 3:
            return self.banks.find_bank_or(parts[3], remark)
        return self.banks.find_bank(remark)
