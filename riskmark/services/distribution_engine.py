"""
Distribution engine.

Aggregates annotated records into overall and per-property
label frequencies for report grouping.
"""

from __future__ import annotations

from collections import Counter, defaultdict

from riskmark.config import DERIVED_FIELD_TEMPLATE
from riskmark.models import Record, is_derived_field

_PREFIX = DERIVED_FIELD_TEMPLATE.split("{", 1)[0]


def compute_distributions(
    records: list[Record],
) -> tuple[dict[str, int], dict[str, dict[str, int]]]:
    """
    Return ``(level_distribution, property_distribution)``.

    The first is a ``{label: count}`` mapping over every annotation;
    the second is keyed by ``"<environment>/<property>"``.
    """
    level_dist: Counter[str] = Counter()
    property_dist: dict[str, Counter[str]] = defaultdict(Counter)

    for record in records:
        for name, value in record.fields.items():
            if not is_derived_field(name):
                continue
            property_name = name[len(_PREFIX):]
            level_dist[value.raw] += 1
            property_dist[f"{record.environment}/{property_name}"][value.raw] += 1

    return dict(level_dist), {k: dict(v) for k, v in property_dist.items()}
