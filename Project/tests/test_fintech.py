"""Tests for the fintech bank code table."""

import pytest

from account_relay.utils.bank.fintech import FINTECH_BANKS, FintechEntry, classify


class TestFintechClassifier:

    @pytest.mark.parametrize(
        "bank_code, display_name, mock_name",
        [
            ("999992", "OPay", "Opay Test User"),
            ("999991", "PalmPay", "Palmpay Test User"),
            ("50515", "MoniePoint", "MoniePoint Test User"),
            ("50211", "Kuda Bank", "Kuda Test User"),
            ("50457", "Carbon", "Carbon Test User"),
            ("51211", "UBA Bank", "UBA Test User"),
        ],
    )
    def test_known_codes(self, bank_code: str, display_name: str, mock_name: str) -> None:
        entry = classify(bank_code)
        assert entry == FintechEntry(bank_code, display_name, mock_name)

    def test_table_has_six_entries(self) -> None:
        assert len(FINTECH_BANKS) == 6

    @pytest.mark.parametrize("bank_code", ["058", "044", "", "99999"])
    def test_unknown_code_is_none(self, bank_code: str) -> None:
        assert classify(bank_code) is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FINTECH_BANKS["058"] = FintechEntry("058", "GTBank", "GT Test User")

    def test_entries_are_frozen(self) -> None:
        entry = classify("999992")
        with pytest.raises(AttributeError):
            entry.mock_account_name = "Someone Else"
