"""
Threshold evaluator.

Looks up the rule for an (environment, property) pair and maps a raw
value onto a risk bucket. Classification never raises for bad data:
missing rules yield ``UNCLASSIFIED`` and values that cannot be coerced
yield ``INVALID_VALUE`` or ``INVALID_DATE``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from riskmark.errors import InvalidDateError, InvalidValueError
from riskmark.models import Classification
from riskmark.schemas import BandedRule, ExpressionRule, RuleSet
from riskmark.services import banded_engine
from riskmark.services.coercion import to_date, to_number
from riskmark.services.condition_parser import matches, parse_age_sentinel


def _classify_age(value: Any, days: int, now: datetime | None) -> Classification:
    try:
        moment = to_date(value)
    except InvalidDateError:
        return Classification.INVALID_DATE
    if now is None:
        now = datetime.now(moment.tzinfo)
    # Naive datetimes are local time on either side.
    if moment.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone(moment.tzinfo)
    elif moment.tzinfo is None and now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)
    if moment < now - timedelta(days=days):
        return Classification.HIGH
    return Classification.UNCLASSIFIED


def _classify_expression(
    value: Any, rule: ExpressionRule, now: datetime | None
) -> Classification:
    days = parse_age_sentinel(rule.worst)
    if days is not None:
        return _classify_age(value, days, now)

    try:
        number = to_number(value)
    except InvalidValueError:
        return Classification.INVALID_VALUE

    for condition, level in (
        (rule.best, Classification.LOW),
        (rule.middle, Classification.MEDIUM),
        (rule.worst, Classification.HIGH),
    ):
        if matches(condition, number):
            return level
    return Classification.UNCLASSIFIED


def _classify_banded(value: Any, rule: BandedRule) -> Classification:
    try:
        number = to_number(value)
    except InvalidValueError:
        return Classification.INVALID_VALUE
    return banded_engine.evaluate(number, rule)


def classify(
    environment: str,
    property_name: str,
    raw_value: Any,
    rule_set: RuleSet,
    now: datetime | None = None,
) -> Classification:
    """
    Classify *raw_value* for *property_name* in *environment*.

    *now* anchors age rules; it defaults to the current time.
    """
    rule = rule_set.lookup(environment, property_name)
    if rule is None:
        return Classification.UNCLASSIFIED
    if isinstance(rule, BandedRule):
        return _classify_banded(raw_value, rule)
    return _classify_expression(raw_value, rule, now)
