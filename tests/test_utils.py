"""
Unit tests for parsing and formatting helpers
"""
from datetime import datetime
from decimal import Decimal
import pytest

from stock_manager import utils


class TestNumericParsing:
    @pytest.mark.parametrize("text,expected", [
        ("5", 5),
        ("  12", 12),
        ("12abc", 12),
        ("3.9", 3),
        ("-4", -4),
        ("abc", None),
        ("", None),
        ("9" * 5000, None),
    ])
    def test_parse_leading_int(self, text, expected):
        assert utils.parse_leading_int(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("2.5", Decimal("2.5")),
        (".75", Decimal("0.75")),
        ("10.", Decimal("10")),
        ("1e2", Decimal("100")),
        ("3.5kg", Decimal("3.5")),
        ("-", None),
        ("kg", None),
    ])
    def test_parse_leading_decimal(self, text, expected):
        assert utils.parse_leading_decimal(text) == expected


class TestMoney:
    def test_round_half_up(self):
        assert utils.round_money(Decimal("2.345")) == Decimal("2.35")
        assert utils.round_money(Decimal("2.344")) == Decimal("2.34")

    def test_format_money(self):
        assert utils.format_money(Decimal("1399")) == "$1399.00"
        assert utils.format_money(Decimal("0")) == "$0.00"


class TestFilenames:
    def test_safe_text_unchanged(self):
        assert utils.sanitize_filename_part("Ada") == "Ada"

    def test_unsafe_characters_replaced(self):
        assert utils.sanitize_filename_part("a/b\\c:d") == "a_b_c_d"

    def test_blank_becomes_placeholder(self):
        assert utils.sanitize_filename_part("  ") == "_"


def test_format_timestamp():
    assert utils.format_timestamp(datetime(2026, 1, 2, 9, 5, 0)) == "01/02/2026, 09:05:00 AM"
