"""Tests for the keyword quick-entry parser."""

import pytest

from models.transaction import TransactionType
from parsers.quick_entry import detect_category, normalize_digits, parse_amount, parse_quick_entry


class TestParseAmount:

    @pytest.mark.parametrize("text,expected", [
        ("coffee 15", 15.0),
        ("rent 1,200", 1200.0),
        ("lunch 12.75 at cafe", 12.75),
        ("15 then 20", 15.0),
    ])
    def test_first_number_wins(self, text, expected):
        assert parse_amount(text) == expected

    def test_arabic_indic_digits(self):
        assert normalize_digits("٥٠٠٠") == "5000"
        assert parse_amount("راتب ٥٠٠٠") == 5000.0

    def test_no_number(self):
        assert parse_amount("hello there") is None
        assert parse_amount("a, b") is None


class TestDetectCategory:

    @pytest.mark.parametrize("text,category", [
        ("Coffee 15", "food"),
        ("uber 30", "transport"),
        ("кино 500", "entertainment"),
        ("صيدلية 40", "health"),
        ("internet 99", "bills"),
        ("something 5", "other"),
        ("refund 200", "other"),
        ("card fee 5", "other"),
        ("movies 30", "entertainment"),
        ("supermarket 80", "groceries"),
    ])
    def test_keywords(self, text, category):
        assert detect_category(text) == category


class TestParseQuickEntry:

    def test_expense_with_vendor(self):
        entry = parse_quick_entry("coffee 15")
        assert entry.amount == 15.0
        assert entry.type == TransactionType.EXPENSE
        assert entry.category == "food"
        assert entry.vendor == "coffee"

    @pytest.mark.parametrize("text", ["salary 5000", "راتب ٥٠٠٠", "зарплата 80000", "Bonus 300"])
    def test_income_keywords(self, text):
        assert parse_quick_entry(text).type == TransactionType.INCOME

    def test_bare_number_has_no_vendor(self):
        entry = parse_quick_entry("250")
        assert entry.vendor == ""
        assert entry.category == "other"

    @pytest.mark.parametrize("text", ["", "just words", "coffee 0"])
    def test_unparseable(self, text):
        assert parse_quick_entry(text) is None
