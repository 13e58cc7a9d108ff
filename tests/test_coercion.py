from datetime import date, datetime

import pytest

from riskmark.errors import InvalidDateError, InvalidValueError
from riskmark.models import FieldValue, ValueKind
from riskmark.services.coercion import to_date, to_number
from riskmark.utils.dates import parse_date_literal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("75%", 75.0),
        ("1,234.5 MB", 1234.5),
        ("  12 GB free", 12.0),
        (42, 42.0),
        (3.5, 3.5),
        ("0.25", 0.25),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("raw", ["N/A", "", "1.2.3", ".", None])
def test_to_number_rejects_non_numeric(raw):
    with pytest.raises(InvalidValueError):
        to_number(raw)


def test_to_number_rejects_dates():
    with pytest.raises(InvalidValueError):
        to_number("10/07/2026")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10/07/2026", datetime(2026, 10, 7)),
        ("10/07/2026 3:04 PM", datetime(2026, 10, 7, 15, 4)),
        ("10/07/2026 3:04PM", datetime(2026, 10, 7, 15, 4)),
        ("10/07/2026 15:04:05", datetime(2026, 10, 7, 15, 4, 5)),
        ("Last run: 1/2/2026 08:00 (ok)", datetime(2026, 1, 2, 8, 0)),
        ("2026-10-07 09:30", datetime(2026, 10, 7, 9, 30)),
        (date(2026, 10, 7), datetime(2026, 10, 7)),
    ],
)
def test_to_date(raw, expected):
    assert to_date(raw) == expected


@pytest.mark.parametrize("raw", ["never", "13/45/2026", "", 20261007])
def test_to_date_rejects(raw):
    with pytest.raises(InvalidDateError):
        to_date(raw)


def test_parse_date_literal_returns_none_on_garbage():
    assert parse_date_literal("99/99/9999") is None


def test_field_values_are_tagged_at_ingestion():
    assert FieldValue.from_raw("75").kind is ValueKind.NUMBER
    assert FieldValue.from_raw("75%").kind is ValueKind.TEXT
    assert FieldValue.from_raw("10/07/2026").kind is ValueKind.DATE
    assert FieldValue.from_raw(None).kind is ValueKind.TEXT
    assert FieldValue.from_raw(True).kind is ValueKind.TEXT


def test_signed_text_is_not_tagged_as_number():
    assert FieldValue.from_raw("-75").kind is ValueKind.TEXT
    assert to_number("-75") == to_number("-75%") == 75.0


@pytest.mark.parametrize("raw", [None, [1, 2], {"a": 1}, True, 7, date(2026, 10, 7)])
def test_non_text_values_round_trip(raw):
    assert FieldValue.from_raw(raw).to_json() == raw


def test_text_values_round_trip_as_text():
    assert FieldValue.from_raw("75").to_json() == "75"
