import logging

import pytest

from riskmark.errors import MalformedConditionError
from riskmark.services.condition_parser import (
    Combined,
    Comparison,
    matches,
    parse_age_sentinel,
    parse_condition,
)


def test_single_comparison():
    assert parse_condition("<50") == Comparison(op="<", operand=50.0)


def test_combined_comparison_with_spaces():
    cond = parse_condition(" >= 50 && < 100 ")
    assert cond == Combined(
        left=Comparison(">=", 50.0), join="&&", right=Comparison("<", 100.0)
    )


@pytest.mark.parametrize(
    "text, value, expected",
    [
        (">=50 && <100", 75, True),
        (">=50 && <100", 100, False),
        ("<10 || >90", 95, True),
        ("<10 || >90", 50, False),
        ("==0", 0, True),
        ("!=0", 0, False),
        ("<=-1.5", -2, True),
    ],
)
def test_matches(text, value, expected):
    assert matches(text, value) is expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "50", "=>5", ">=> 5", ">=5 &&", ">1 && <5 && >2", "abc", "> five"],
)
def test_malformed_conditions_raise_on_parse(text):
    with pytest.raises(MalformedConditionError):
        parse_condition(text)


def test_malformed_condition_never_matches(caplog):
    with caplog.at_level(logging.WARNING):
        assert matches(">=> 7", 7) is False
    assert "malformed" in caplog.text.lower()


def test_absent_condition_never_matches():
    assert matches(None, 1) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("olderThan7Days", 7),
        ("olderthan30days", 30),
        (" OlderThan1Day ", 1),
        (">=7", None),
        (None, None),
    ],
)
def test_parse_age_sentinel(text, expected):
    assert parse_age_sentinel(text) == expected
