"""
Record and classification types.

Records carry tagged field values that are resolved once when the record is
built, so the evaluator never has to guess a field's type again.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from riskmark.config import BANDED_LABELS, DERIVED_FIELD_TEMPLATE, EXPRESSION_LABELS
from riskmark.utils.dates import parse_date_literal
from riskmark.utils.regex_patterns import DATE_PATTERNS, PLAIN_NUMBER

# Marks values that arrived as text; their raw string is the original.
_TEXT = object()


class RuleStyle(str, enum.Enum):
    EXPRESSION = "expression"
    BANDED = "banded"


class Classification(enum.Enum):
    """Risk bucket assigned to a single value, best to worst."""

    UNCLASSIFIED = "unclassified"
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    INVALID_VALUE = "invalid_value"
    INVALID_DATE = "invalid_date"

    @property
    def is_invalid(self) -> bool:
        return self in (Classification.INVALID_VALUE, Classification.INVALID_DATE)

    def label(self, style: RuleStyle = RuleStyle.BANDED) -> str:
        """Render the bucket in the vocabulary of *style*."""
        labels = EXPRESSION_LABELS if style is RuleStyle.EXPRESSION else BANDED_LABELS
        # Expression rules never produce NONE; fall back to the banded name.
        return labels.get(self.name, BANDED_LABELS[self.name])


class ValueKind(str, enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    DATE = "date"


@dataclass(frozen=True)
class FieldValue:
    """A raw record value tagged with the type it resolved to."""

    kind: ValueKind
    raw: str
    number: float | None = None
    moment: datetime | None = None
    original: Any = field(default=_TEXT, compare=False, repr=False)

    @classmethod
    def from_raw(cls, value: Any) -> FieldValue:
        if isinstance(value, FieldValue):
            return value
        if isinstance(value, bool):
            return cls(ValueKind.TEXT, str(value), original=value)
        if isinstance(value, (int, float)):
            return cls(ValueKind.NUMBER, str(value), number=float(value), original=value)
        if isinstance(value, datetime):
            return cls(ValueKind.DATE, value.isoformat(sep=" "), moment=value, original=value)
        if isinstance(value, date):
            moment = datetime(value.year, value.month, value.day)
            return cls(ValueKind.DATE, value.isoformat(), moment=moment, original=value)

        if not isinstance(value, str):
            return cls(ValueKind.TEXT, "" if value is None else str(value), original=value)

        text = value
        if PLAIN_NUMBER.match(text):
            return cls(ValueKind.NUMBER, text, number=float(text))
        stripped = text.strip()
        for pattern in DATE_PATTERNS.values():
            match = pattern.fullmatch(stripped)
            if match:
                moment = parse_date_literal(match.group())
                if moment is not None:
                    return cls(ValueKind.DATE, text, moment=moment)
        return cls(ValueKind.TEXT, text)

    def to_json(self) -> Any:
        if self.original is not _TEXT:
            return self.original
        return self.raw


@dataclass
class Record:
    """One monitored entity: an environment tag and its ordered fields."""

    environment: str
    fields: dict[str, FieldValue] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, environment: str, values: dict[str, Any]) -> Record:
        return cls(
            environment=environment,
            fields={name: FieldValue.from_raw(v) for name, v in values.items()},
        )

    def get(self, name: str) -> FieldValue | None:
        return self.fields.get(name)

    def to_dict(self) -> dict[str, Any]:
        return {name: v.to_json() for name, v in self.fields.items()}


def derived_field_name(property_name: str) -> str:
    """Name of the annotation field for *property_name*."""
    return DERIVED_FIELD_TEMPLATE.format(property_name=property_name)


def is_derived_field(name: str) -> bool:
    prefix = DERIVED_FIELD_TEMPLATE.split("{", 1)[0]
    return name.startswith(prefix)
