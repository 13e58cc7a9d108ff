"""
Date-literal parsing shared by record ingestion and value coercion.
"""

from __future__ import annotations

import re
from datetime import datetime

from riskmark.config import DATE_FORMATS

_MERIDIEM = re.compile(r"(\d)\s*([AaPp][Mm])$")


def parse_date_literal(text: str) -> datetime | None:
    """Parse an isolated date literal, or return None."""
    candidate = _MERIDIEM.sub(r"\1 \2", " ".join(text.split()))
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    return None
