from pydantic import BaseModel, ConfigDict, Field

from utils.regex_patterns import UNKNOWN


class ParsedRemark(BaseModel):
    """Fields extracted from a single transaction remark."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = UNKNOWN
    transaction_id: str = Field(default=UNKNOWN, alias="transactionId")
    bank: str = UNKNOWN

    @classmethod
    def empty(cls) -> "ParsedRemark":
        # no remark supplied, as opposed to an unparseable one
        return cls(name="", transaction_id="", bank="")

    def as_columns(self, columns) -> dict:
        name_col, id_col, bank_col = columns
        return {name_col: self.name, id_col: self.transaction_id, bank_col: self.bank}


class RemarkRequest(BaseModel):
    remark: str = ""
