"""
Record annotation service.

Attaches a ``Risk Level for <PropertyName>`` field to every record
field that has a rule in the record's environment.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from riskmark.models import FieldValue, Record, derived_field_name, is_derived_field
from riskmark.schemas import RuleSet
from riskmark.services.classifier import classify

logger = logging.getLogger(__name__)


def _annotate(
    record: Record, rule_set: RuleSet, now: datetime | None
) -> tuple[Record, int]:
    enriched = Record(environment=record.environment, fields=dict(record.fields))
    invalid = 0
    for name, value in record.fields.items():
        if is_derived_field(name):
            continue
        rule = rule_set.lookup(record.environment, name)
        if rule is None:
            continue
        level = classify(record.environment, name, value, rule_set, now=now)
        if level.is_invalid:
            invalid += 1
            logger.debug(
                "%s/%s: %s for %r", record.environment, name, level.name, value.raw
            )
        enriched.fields[derived_field_name(name)] = FieldValue.from_raw(
            level.label(rule.style)
        )
    return enriched, invalid


def annotate_record(
    record: Record, rule_set: RuleSet, now: datetime | None = None
) -> Record:
    """
    Return a copy of *record* with one derived field per ruled property.

    Fields without a rule are left alone; bad values degrade to an
    ``Invalid*`` label on that field only.
    """
    return _annotate(record, rule_set, now)[0]


def annotate_records(
    records: Iterable[Record], rule_set: RuleSet, now: datetime | None = None
) -> list[Record]:
    """Annotate every record; returns a *new* list (inputs are not mutated)."""
    if now is None:
        now = datetime.now()
    annotated: list[Record] = []
    invalid = 0
    for record in records:
        enriched, bad = _annotate(record, rule_set, now)
        annotated.append(enriched)
        invalid += bad
    if invalid:
        logger.warning("%d field(s) could not be classified", invalid)
    return annotated
