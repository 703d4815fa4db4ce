import pytest

from extractors.bil_parser import BILParser
from extractors.clg_parser import CLGParser
from extractors.cms_parser import CMSParser
from extractors.mmt_parser import MMTParser
from extractors.neft_parser import NEFTParser
from extractors.rtgs_parser import RTGSParser
from extractors.upi_parser import UPIParser, looks_like_name
from utils.bank_rules import BankIdentifier
from utils.regex_patterns import UNKNOWN


def fields(parsed):
    return parsed.name, parsed.transaction_id, parsed.bank


# CMS

def test_cms_uses_first_underscore_segment():
    assert fields(CMSParser().parse("CMS/REF_12345/OTHERDATA")) == (UNKNOWN, "CMS-REF_12345", UNKNOWN)
    assert CMSParser().parse("CMS/ABC/XY_1/ZZ_2").transaction_id == "CMS-XY_1"


def test_cms_without_underscore():
    assert fields(CMSParser().parse("CMS/123456/ACME CORP")) == (UNKNOWN, UNKNOWN, UNKNOWN)


def test_cms_bank_from_full_remark():
    assert CMSParser().parse("CMS/ICICI_REF_9/X").bank == "ICICI Bank"


# UPI

def test_upi_name_reference_and_handle():
    parsed = UPIParser().parse("UPI/123456789012/John Doe/Payment for goods/john@ybl")
    assert fields(parsed) == ("John Doe", "UPI-123456789012", "ICICI Bank")


def test_upi_falls_back_to_vpa_handle():
    parsed = UPIParser().parse("UPI/Payment from PhonePe/ramesh.k@okaxis/998877")
    assert fields(parsed) == ("ramesh.k", UNKNOWN, "Axis Bank")


def test_upi_long_last_segment_as_reference():
    parsed = UPIParser().parse("UPI/Priya Singh/REFXYZ12345AB")
    assert fields(parsed) == ("Priya Singh", "UPI-REFXYZ12345AB", UNKNOWN)


def test_upi_skips_boilerplate_segments():
    assert UPIParser().parse("UPI/123456789012/Sent from phone/John Doe").name == "John Doe"
    assert UPIParser().parse("UPI/Paid to Shop/Anil Kumar/123456789012").name == "Anil Kumar"


def test_upi_deny_list_rejects_real_names_too():
    parsed = UPIParser().parse("UPI/123456789012/Natasha Roy/natasha@okhdfcbank")
    assert parsed.name == "natasha"
    assert parsed.bank == "HDFC Bank"


def test_upi_marker_only():
    assert fields(UPIParser().parse("UPI/")) == (UNKNOWN, UNKNOWN, UNKNOWN)


@pytest.mark.parametrize("part, expected", [
    ("John Doe", True),
    ("JohnDoe", False),
    ("John Doe 2", False),
    ("john doe@ybl", False),
    ("Fund transfer", False),
    ("Bill Payment", False),
    ("paid via app", False),
    ("Kotak user", False),
    ("State bank", False),
    ("Remark for rent", False),
    ("Booking ref", False),
    ("Request money", False),
    ("P2A transfer", False),
])
def test_looks_like_name(part, expected):
    assert looks_like_name(part) is expected


# NEFT / RTGS

def test_neft_ifsc_prefix_identifies_bank():
    parsed = NEFTParser().parse("NEFT-HDFC123456789012-RAVI SHAH")
    assert fields(parsed) == ("RAVI SHAH", "NEFT-HDFC123456789012", "HDFC Bank")


def test_neft_invalid_length():
    parsed = NEFTParser().parse("NEFT-SBIN12345-ANIL")
    assert fields(parsed) == ("ANIL", UNKNOWN, "State Bank of India")


def test_neft_falls_back_to_full_remark_for_bank():
    parsed = NEFTParser().parse("NEFT-N12345678901234567-KOTAK MAHINDRA BANK-ACME")
    assert parsed.transaction_id == "NEFT-N12345678901234567"
    assert parsed.name == "KOTAK MAHINDRA BANK"
    assert parsed.bank == "Kotak Mahindra Bank"


def test_neft_marker_only():
    assert fields(NEFTParser().parse("NEFT-")) == (UNKNOWN, UNKNOWN, UNKNOWN)


def test_rtgs_requires_long_reference():
    parsed = RTGSParser().parse("RTGS-PUNBR52024061200012345-MEHTA TRADERS")
    assert fields(parsed) == ("MEHTA TRADERS", "RTGS-PUNBR52024061200012345", "Punjab National Bank")

    parsed = RTGSParser().parse("RTGS-PUNB0001234-ABC")
    assert fields(parsed) == ("ABC", UNKNOWN, "Punjab National Bank")


# CLG

def test_clg_bank_code_segment():
    parsed = CLGParser().parse("CLG/RAMESH KUMAR/123456/HDF")
    assert fields(parsed) == ("RAMESH KUMAR", "CLG-123456", "HDFC Bank")
    assert CLGParser().parse("CLG/AMIT/654321/PNB").bank == "Punjab National Bank"


def test_clg_short_cheque_number_and_unknown_code():
    assert fields(CLGParser().parse("CLG/SITA DEVI/12345/XYZ")) == ("SITA DEVI", UNKNOWN, UNKNOWN)


def test_clg_missing_segments():
    assert fields(CLGParser().parse("CLG/SITA DEVI")) == ("SITA DEVI", UNKNOWN, UNKNOWN)


def test_blank_name_segment_is_unknown():
    parsed = CLGParser().parse("CLG/ /123456")
    assert parsed.name == UNKNOWN
    assert parsed.transaction_id == "CLG-123456"


# MMT

def test_mmt_bank_only_from_trailing_segment():
    parsed = MMTParser().parse("MMT/IMPS/123456789012/SBI/SURESH PATEL")
    assert fields(parsed) == ("SURESH PATEL", "IMPS-123456789012", UNKNOWN)


def test_mmt_name_falls_back_to_fourth_segment():
    parsed = MMTParser().parse("MMT/IMPS/123456789012/ANITA SHARMA")
    assert parsed.name == "ANITA SHARMA"
    assert parsed.transaction_id == "IMPS-123456789012"


def test_mmt_reference_requires_imps_and_digits():
    assert MMTParser().parse("MMT/XFER/123456789012/ANITA SHARMA").transaction_id == UNKNOWN
    assert MMTParser().parse("MMT/IMPS/12345678901A/ANITA").transaction_id == UNKNOWN


def test_mmt_trailing_bank():
    assert MMTParser().parse("MMT/IMPS/123456789012/RAVI/HDFC BANK").bank == "HDFC Bank"
    assert fields(MMTParser().parse("MMT/")) == (UNKNOWN, UNKNOWN, UNKNOWN)


# BIL

def test_bil_carrier_reference():
    parsed = BILParser().parse("BIL/INFT/EKW1234567/Rent/RAJ MALHOTRA")
    assert fields(parsed) == ("RAJ MALHOTRA", "INFT-EKW1234567", UNKNOWN)


def test_bil_name_from_fourth_segment_and_bank():
    parsed = BILParser().parse("BIL/ONL/EJF7654321/AXIS CARD")
    assert fields(parsed) == ("AXIS CARD", "INFT-EJF7654321", "Axis Bank")


@pytest.mark.parametrize("ref", ["EJW1234567", "EKW123456", "EKW12345678", "XEKW1234567"])
def test_bil_rejects_other_references(ref):
    assert BILParser().parse(f"BIL/INFT/{ref}/RAJ").transaction_id == UNKNOWN


def test_parsers_accept_injected_bank_table():
    ident = BankIdentifier({"Test Bank": (r"TEST",)})
    assert CLGParser(ident).parse("CLG/AMIT/654321/TEST").bank == "Test Bank"
    assert CLGParser(ident).parse("CLG/AMIT/654321/HDF").bank == UNKNOWN


# boundaries

def test_clg_falls_back_to_full_remark_when_code_is_unknown():
    parsed = CLGParser().parse("CLG/HDFC TRADERS/123456/XYZ")
    assert fields(parsed) == ("HDFC TRADERS", "CLG-123456", "HDFC Bank")


@pytest.mark.parametrize("length, valid", [
    (15, False),
    (16, True),
    (17, False),
    (18, True),
    (21, False),
    (22, True),
    (23, False),
])
def test_neft_reference_lengths(length, valid):
    ref = "1" * length
    expected = f"NEFT-{ref}" if valid else UNKNOWN
    assert NEFTParser().parse(f"NEFT-{ref}-ACME").transaction_id == expected


@pytest.mark.parametrize("length, valid", [
    (21, False),
    (22, True),
    (30, True),
])
def test_rtgs_reference_lengths(length, valid):
    ref = "1" * length
    expected = f"RTGS-{ref}" if valid else UNKNOWN
    assert RTGSParser().parse(f"RTGS-{ref}-ACME").transaction_id == expected


@pytest.mark.parametrize("remark, expected", [
    ("UPI/Ravi Kumar/ABCDEFGHIJ", UNKNOWN),
    ("UPI/Ravi Kumar/ABCDEFGHIJK", "UPI-ABCDEFGHIJK"),
])
def test_upi_last_segment_must_exceed_ten_chars(remark, expected):
    assert UPIParser().parse(remark).transaction_id == expected


def test_upi_without_name_or_reference():
    assert fields(UPIParser().parse("UPI/1234567890/ABCDEFGHIJ")) == (UNKNOWN, UNKNOWN, UNKNOWN)
