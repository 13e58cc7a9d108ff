"""
Value coercion.

Turns tagged record values into the number or date a rule needs.
Text is coerced permissively: percent signs, units and thousands
separators are dropped, and dates may be embedded in other text.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from riskmark.errors import InvalidDateError, InvalidValueError
from riskmark.models import FieldValue, ValueKind
from riskmark.utils.dates import parse_date_literal
from riskmark.utils.regex_patterns import DATE_PATTERNS, NON_NUMERIC


def to_number(value: Any) -> float:
    """
    Coerce *value* to a float.

    Text keeps only its digits and decimal points before parsing,
    so ``"75%"`` becomes ``75.0`` and ``"N/A"`` is rejected.
    """
    fv = FieldValue.from_raw(value)
    if fv.kind is ValueKind.NUMBER:
        return fv.number
    if fv.kind is ValueKind.DATE:
        raise InvalidValueError(f"expected a number, got date {fv.raw!r}")

    candidate = NON_NUMERIC.sub("", fv.raw)
    try:
        return float(candidate)
    except ValueError:
        raise InvalidValueError(f"not a number: {fv.raw!r}") from None


def to_date(value: Any) -> datetime:
    """Coerce *value* to a datetime, searching text for an embedded literal."""
    fv = FieldValue.from_raw(value)
    if fv.kind is ValueKind.DATE:
        return fv.moment
    if fv.kind is ValueKind.NUMBER:
        raise InvalidDateError(f"expected a date, got number {fv.raw!r}")

    for pattern in DATE_PATTERNS.values():
        for match in pattern.finditer(fv.raw):
            moment = parse_date_literal(match.group())
            if moment is not None:
                return moment
    raise InvalidDateError(f"not a date: {fv.raw!r}")
