"""Tests for amount, date and timestamp helpers."""

from datetime import date, datetime, timedelta, UTC
from decimal import Decimal

import pytest

from duobalance.utils.amount_parser import parse_amount
from duobalance.utils.date_parser import parse_date
from duobalance.utils.timestamps import from_millis, now, to_millis


@pytest.mark.parametrize(
    "text,expected",
    [
        ("12.50", Decimal("12.50")),
        ("12.50€", Decimal("12.50")),
        ("€ 7", Decimal("7")),
        ("$1,234.56", Decimal("1234.56")),
        ("12,5", Decimal("12.5")),
        ("-3", Decimal("-3")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_date_relative():
    assert parse_date("today") == date.today()
    assert parse_date(" Yesterday ") == date.today() - timedelta(days=1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2024-01-15", date(2024, 1, 15)),
        ("05/03/2024", date(2024, 3, 5)),
        ("March 5, 2024", date(2024, 3, 5)),
    ],
)
def test_parse_date_absolute(text, expected):
    assert parse_date(text) == expected


def test_parse_date_invalid():
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_millis_conversion():
    moment = datetime(2024, 3, 5, 18, 22, 10, 512000, tzinfo=UTC)
    assert to_millis(moment) == 1709662930512
    assert from_millis(1709662930512) == moment


def test_naive_datetimes_are_utc():
    assert to_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000


def test_now_has_millisecond_precision():
    current = now()
    assert current.tzinfo is not None
    assert current.microsecond % 1000 == 0
    assert from_millis(to_millis(current)) == current
