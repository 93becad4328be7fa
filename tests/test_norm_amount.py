import pytest
from decimal import Decimal

from common.norm.amounts import (
    currency_for_location,
    format_number,
    normalize_currency,
    parse_number,
    resolve_currency,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (120, Decimal("120")),
        (4.5, Decimal("4.5")),
        ("4.5", Decimal("4.5")),
        (" 120 ", Decimal("120")),
        ("1,234.56", Decimal("1234.56")),
        ("1,200", Decimal("1200")),
        ("4,50", Decimal("4.50")),
        ("$4.50", Decimal("4.50")),
        ("59.99 dollars", Decimal("59.99")),
        ("bad", None),
        ("", None),
        (None, None),
        (True, None),
        ("-3", None),
        ("NaN", None),
        (float("inf"), None),
        ([1, 2], None),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("540.0"), "540"),
        (Decimal("4.50"), "4.5"),
        (Decimal("0"), "0"),
        (Decimal("1E+3"), "1000"),
        (Decimal("0.10"), "0.1"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("usd", "USD"),
        (" eur ", "EUR"),
        (None, None),
        ("", None),
        ("UNK", "UNK"),
    ],
)
def test_normalize_currency(raw, expected):
    assert normalize_currency(raw) == expected


@pytest.mark.parametrize(
    "location,expected",
    [
        ("India", "INR"),
        ("Mumbai, India", "INR"),
        ("Tokyo, Japan", "JPY"),
        ("Berlin, Germany", "EUR"),
        ("Seoul, South Korea", "KRW"),
        ("Beijing, China", "CNY"),
        ("London, UK", "GBP"),
        ("Unknown", None),
        ("coffee shop in Paris", None),
        ("", None),
        (None, None),
    ],
)
def test_currency_for_location(location, expected):
    assert currency_for_location(location) == expected


def test_resolve_currency_priority():
    assert resolve_currency("$", "EUR", "India") == "EUR"
    assert resolve_currency("€", None, "India") == "EUR"
    assert resolve_currency(None, None, "India") == "INR"
    assert resolve_currency(None, None, "Atlantis") == "USD"
    assert resolve_currency("$$", None, None) == "USD"


def test_format_number_beyond_decimal_precision():
    assert format_number(Decimal("1E+30")) == "1" + "0" * 30
    assert format_number(Decimal(10**40)) == str(10**40)
