"""
Compiled regex patterns for value coercion and condition parsing.

Patterns are anchored where the whole input must match, and
unanchored where a literal may be embedded in surrounding text.
"""

import re

# Everything that is not part of a plain decimal number
NON_NUMERIC = re.compile(r"[^0-9.]")

# An unsigned bare number; text signs are stripped like any other non-digit
PLAIN_NUMBER = re.compile(r"^\s*\d+(?:\.\d+)?\s*$")

DATE_PATTERNS: dict[str, re.Pattern[str]] = {
    "US": re.compile(
        r"(?<!\d)"
        r"\d{1,2}/\d{1,2}/\d{2,4}"                           # month/day/year
        r"(?:\s+\d{1,2}:\d{2}(?::\d{2})?(?:\s*[AaPp][Mm])?)?"  # optional time
        r"(?!\d)"
    ),
    "ISO": re.compile(
        r"(?<!\d)"
        r"\d{4}-\d{2}-\d{2}"                                 # year-month-day
        r"(?:[T\s]\d{2}:\d{2}(?::\d{2})?)?"                  # optional time
        r"(?!\d)"
    ),
}

# One comparison: operator followed by a signed decimal operand
COMPARISON = re.compile(r"^\s*(>=|<=|==|!=|>|<)\s*(-?\d+(?:\.\d+)?)\s*$")

# Logical join between two comparisons
LOGICAL_JOIN = re.compile(r"(&&|\|\|)")

# Date sentinel, e.g. "olderThan7Days"
AGE_SENTINEL = re.compile(r"^\s*olderThan(\d+)Days?\s*$", re.IGNORECASE)
