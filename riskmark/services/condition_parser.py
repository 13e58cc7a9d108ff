"""
Condition expression parser.

Parses comparison strings such as ``">=50 && <100"`` into a small typed
tree and evaluates it against a single number. The grammar is fixed:
at most two comparisons joined by one ``&&`` or ``||``.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Union

from riskmark.errors import MalformedConditionError
from riskmark.utils.regex_patterns import AGE_SENTINEL, COMPARISON, LOGICAL_JOIN

logger = logging.getLogger(__name__)

_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
}


@dataclass(frozen=True)
class Comparison:
    op: str
    operand: float

    def evaluate(self, value: float) -> bool:
        return _OPERATORS[self.op](value, self.operand)


@dataclass(frozen=True)
class Combined:
    left: Comparison
    join: str  # "&&" or "||"
    right: Comparison

    def evaluate(self, value: float) -> bool:
        if self.join == "&&":
            return self.left.evaluate(value) and self.right.evaluate(value)
        return self.left.evaluate(value) or self.right.evaluate(value)


Condition = Union[Comparison, Combined]


def _parse_comparison(text: str, source: str) -> Comparison:
    match = COMPARISON.match(text)
    if not match:
        raise MalformedConditionError(f"bad comparison {text.strip()!r} in {source!r}")
    return Comparison(op=match.group(1), operand=float(match.group(2)))


def parse_condition(text: str) -> Condition:
    """Parse *text* into a condition tree or raise MalformedConditionError."""
    if not isinstance(text, str) or not text.strip():
        raise MalformedConditionError(f"empty condition: {text!r}")

    parts = LOGICAL_JOIN.split(text)
    if len(parts) == 1:
        return _parse_comparison(parts[0], text)
    if len(parts) == 3:
        left, join, right = parts
        return Combined(
            left=_parse_comparison(left, text),
            join=join,
            right=_parse_comparison(right, text),
        )
    raise MalformedConditionError(f"more than one logical join in {text!r}")


@lru_cache(maxsize=1024)
def _compiled(text: str) -> Condition | None:
    try:
        return parse_condition(text)
    except MalformedConditionError as exc:
        logger.warning("Ignoring malformed condition: %s", exc)
        return None


def matches(text: str | None, value: float) -> bool:
    """
    Return True when *value* satisfies the condition *text*.

    Absent or malformed conditions never match.
    """
    if text is None:
        return False
    condition = _compiled(text)
    if condition is None:
        return False
    return condition.evaluate(value)


def parse_age_sentinel(text: str | None) -> int | None:
    """Return N for an ``olderThanNDays`` token, else None."""
    if not isinstance(text, str):
        return None
    match = AGE_SENTINEL.match(text)
    return int(match.group(1)) if match else None
