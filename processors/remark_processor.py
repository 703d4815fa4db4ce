# processors/remark_processor.py
import logging
from typing import Iterable, List, Mapping, Optional

import pandas as pd

import config
from extractors.parser_router import parse_remark
from models.remark import ParsedRemark
from utils.bank_rules import BankIdentifier
from utils.clean_text import normalize_remark

logger = logging.getLogger(__name__)


def _is_missing(value) -> bool:
    if value is None:
        return True
    return not isinstance(value, str) and bool(pd.isna(value))


class RemarkProcessor:
    def __init__(
        self,
        bank_identifier: Optional[BankIdentifier] = None,
        remarks_column: str = config.REMARKS_COLUMN,
        output_columns=config.OUTPUT_COLUMNS,
    ):
        self.bank_identifier = bank_identifier
        self.remarks_column = remarks_column
        self.output_columns = tuple(output_columns)

    def compose(self, remark) -> ParsedRemark:
        """
        Parse one remark cell.
        Missing or blank cells give empty fields instead of UNKNOWN so that
        "no remark supplied" stays distinguishable from "unparseable".
        """
        if _is_missing(remark):
            return ParsedRemark.empty()
        text = normalize_remark(remark)
        if not text:
            return ParsedRemark.empty()
        return parse_remark(text, self.bank_identifier)

    def augment(self, row: Mapping) -> dict:
        parsed = self.compose(row.get(self.remarks_column))
        out = dict(row)
        out.update(parsed.as_columns(self.output_columns))
        return out

    def process_rows(self, rows: Iterable[Mapping]) -> List[dict]:
        return [self.augment(row) for row in rows]

    def process_frame(self, df: pd.DataFrame) -> pd.DataFrame:
        out = df.copy()
        if self.remarks_column in out.columns:
            parsed = [self.compose(v) for v in out[self.remarks_column].tolist()]
        else:
            logger.warning("column %r not found; writing empty results", self.remarks_column)
            parsed = [ParsedRemark.empty()] * len(out)

        name_col, id_col, bank_col = self.output_columns
        out[name_col] = [p.name for p in parsed]
        out[id_col] = [p.transaction_id for p in parsed]
        out[bank_col] = [p.bank for p in parsed]
        logger.info("processed %d rows", len(out))
        return out
