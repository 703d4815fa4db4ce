from extractors.neft_parser import NEFTParser
from utils.regex_patterns import RTGS_MIN_ID_LENGTH


class RTGSParser(NEFTParser):
    dialect = "RTGS"

    def is_valid_id(self, id_part: str) -> bool:
        return len(id_part) >= RTGS_MIN_ID_LENGTH
