import io

import pandas as pd
import pytest

REMARKS = [
    "UPI/123456789012/John Doe/Payment for goods/john@ybl",
    "NEFT-HDFC123456789012-RAVI SHAH",
    "",
    "CASH DEPOSIT",
]


@pytest.fixture
def statement_frame():
    return pd.DataFrame({
        "Value Date": ["01/04/2024", "02/04/2024", "03/04/2024", "04/04/2024"],
        "Transaction Remarks": REMARKS,
        "Amount": ["500.00", "12000.00", "10.00", "250.00"],
    })


@pytest.fixture
def csv_bytes(statement_frame):
    return statement_frame.to_csv(index=False).encode("utf-8")


@pytest.fixture
def xlsx_bytes(statement_frame):
    buf = io.BytesIO()
    statement_frame.to_excel(buf, index=False, sheet_name="Statement")
    return buf.getvalue()
