"""
Fintech bank codes that Paystack's test mode cannot resolve.

Accounts at these providers get a fixed display name straight away, so the
relay never spends an upstream call (and the daily test-mode quota) on them.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class FintechEntry:
    bank_code: str
    display_name: str
    mock_account_name: str


_FINTECH_ROWS = (
    ("999992", "OPay", "Opay Test User"),
    ("999991", "PalmPay", "Palmpay Test User"),
    ("50515", "MoniePoint", "MoniePoint Test User"),
    ("50211", "Kuda Bank", "Kuda Test User"),
    ("50457", "Carbon", "Carbon Test User"),
    ("51211", "UBA Bank", "UBA Test User"),
)

FINTECH_BANKS = MappingProxyType({
    code: FintechEntry(bank_code=code, display_name=name, mock_account_name=mock)
    for code, name, mock in _FINTECH_ROWS
})


def classify(bank_code: str) -> Optional[FintechEntry]:
    return FINTECH_BANKS.get(bank_code)
