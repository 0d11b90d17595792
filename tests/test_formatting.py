import pytest

from apps.performance.formatting import (
    format_currency,
    format_field,
    format_grouped,
    format_number,
    format_percent,
    format_signed_percent,
    parse_number,
    to_fixed,
)
from apps.performance.normalizer import UNAVAILABLE


@pytest.mark.parametrize(
    "value,expected",
    [
        (1500, "1.5K"),
        (250000, "2.50 Lakh"),
        (12000000, "1.20 Cr"),
        (500, "500"),
        ("1,500", "1.5K"),
        ("2,50,000", "2.50 Lakh"),
        (999, "999"),
        (1000, "1.0K"),
        (99999, "100.0K"),
        (100000, "1.00 Lakh"),
        (10000000, "1.00 Cr"),
        (256.5, "256.5"),
        (12.34567, "12.346"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_half_values_round_away_from_zero():
    assert format_number(1250) == "1.3K"
    assert to_fixed(0.125, 2) == "0.13"


def test_negative_values_skip_unit_abbreviation():
    assert format_number(-250000) == "-2,50,000"
    assert format_number(-1500) == "-1,500"
    assert format_currency(-12000000) == "₹-1,20,00,000"


def test_format_currency():
    assert format_currency(250000) == "₹2.50 Lakh"
    assert format_currency(12000000) == "₹1.20 Cr"
    assert format_currency(1500) == "₹1.5K"
    assert format_currency(256.5) == "₹256.5"


def test_format_percent():
    assert format_percent(33.456) == "33.5%"
    assert format_percent("40") == "40.0%"
    assert format_percent(-2.25) == "-2.3%"


@pytest.mark.parametrize("formatter", [format_number, format_currency, format_percent, format_grouped])
@pytest.mark.parametrize("value", [None, "-", UNAVAILABLE])
def test_placeholders(formatter, value):
    assert formatter(value) == "-"


@pytest.mark.parametrize("formatter", [format_number, format_currency, format_percent, format_grouped])
def test_unparseable_values_pass_through(formatter):
    assert formatter("N/A") == "N/A"
    assert formatter("") == ""
    assert formatter({"x": 1}) == {"x": 1}


def test_parse_number_reads_leading_numeric_prefix():
    assert parse_number("12 days") == 12
    assert parse_number(" 1,23,456.5") == 123456.5
    assert parse_number("abc") is None
    assert parse_number(float("nan")) is None


def test_format_grouped_uses_indian_grouping():
    assert format_grouped(123456789) == "12,34,56,789"
    assert format_grouped("1000") == "1,000"


def test_format_signed_percent():
    assert format_signed_percent(12.345) == "+12.3%"
    assert format_signed_percent(-4) == "-4.0%"
    assert format_signed_percent(0) == "0.0%"


def test_format_field_selects_rule_by_key():
    assert format_field("total_wages", 250000) == "₹2.50 Lakh"
    assert format_field("avg_wage_rate", 256) == "₹256"
    assert format_field("persondays_generated", 250000) == "2.50 Lakh"
    assert format_field("women_persondays_percent", 52.04) == "52.0%"
    assert format_field("fin_year", "2024-2025") == "2024-2025"
    assert format_field("month", UNAVAILABLE) == "-"


@pytest.mark.parametrize("formatter", [format_number, format_currency, format_percent, format_grouped])
@pytest.mark.parametrize("value", [-1e26, "-1e26", -1.23e26, "1e40", 1e300])
def test_formatters_handle_very_large_values(formatter, value):
    assert isinstance(formatter(value), str)


def test_very_large_values_are_grouped_in_full():
    assert format_grouped(-1e26).startswith("-10,00,00,00,00,00,00,00,0")
    assert format_number("1e40").endswith(" Cr")
    assert format_percent(1e300).endswith(".0%")


def test_booleans_are_not_numbers():
    assert parse_number(True) is None
    assert format_number(True) is True
    assert format_currency(False) is False
