import logging
from enum import Enum
from typing import Optional

from extractors.base_parser import BaseRemarkParser, UnknownParser
from extractors.bil_parser import BILParser
from extractors.clg_parser import CLGParser
from extractors.cms_parser import CMSParser
from extractors.mmt_parser import MMTParser
from extractors.neft_parser import NEFTParser
from extractors.rtgs_parser import RTGSParser
from extractors.upi_parser import UPIParser
from models.remark import ParsedRemark
from utils.bank_rules import BankIdentifier
from utils.clean_text import normalize_remark
from utils.regex_patterns import DIALECT_MARKERS

logger = logging.getLogger(__name__)

Dialect = Enum("Dialect", [*DIALECT_MARKERS, ("UNKNOWN", "")])
Dialect.__doc__ = "Remark dialects keyed by their literal prefix marker."


def detect_dialect(remark: str) -> Dialect:
    for dialect in Dialect:
        if dialect.value and remark.startswith(dialect.value):
            return dialect
    return Dialect.UNKNOWN


def get_parser(dialect: Dialect, bank_identifier: Optional[BankIdentifier] = None) -> BaseRemarkParser:
    match dialect:
        case Dialect.CMS:
            return CMSParser(bank_identifier)
        case Dialect.UPI:
            return UPIParser(bank_identifier)
        case Dialect.NEFT:
            return NEFTParser(bank_identifier)
        case Dialect.RTGS:
            return RTGSParser(bank_identifier)
        case Dialect.CLG:
            return CLGParser(bank_identifier)
        case Dialect.MMT:
            return MMTParser(bank_identifier)
        case Dialect.BIL:
            return BILParser(bank_identifier)
        case _:
            return UnknownParser(bank_identifier)


def parse_remark(raw_remark: str, bank_identifier: Optional[BankIdentifier] = None) -> ParsedRemark:
    remark = normalize_remark(raw_remark)
    dialect = detect_dialect(remark)
    logger.debug("remark %r dispatched to %s", remark, dialect.name)
    return get_parser(dialect, bank_identifier).parse(remark)
