"""
Banded threshold engine.

Evaluates a number against the four cut points of a banded rule.
Cut points are checked worst-first; the first band the value falls
into wins.
"""

from __future__ import annotations

import logging

from riskmark.models import Classification
from riskmark.schemas import BandedRule

logger = logging.getLogger(__name__)


def evaluate(value: float, rule: BandedRule) -> Classification:
    """Return the risk band for *value* under *rule*."""
    direction = rule.risk_direction.strip().casefold()
    levels = rule.levels

    if direction == "high":
        bands = [
            (levels.high, Classification.HIGH),
            (levels.medium, Classification.MEDIUM),
            (levels.low, Classification.LOW),
        ]
        for cut, level in bands:
            if cut is not None and value <= cut:
                return level
        return Classification.NONE

    if direction == "low":
        bands = [
            (levels.none, Classification.NONE),
            (levels.low, Classification.LOW),
            (levels.medium, Classification.MEDIUM),
        ]
        for cut, level in bands:
            if cut is not None and value >= cut:
                return level
        return Classification.HIGH

    logger.warning("Unknown RiskDirection %r; value left unclassified", rule.risk_direction)
    return Classification.UNCLASSIFIED
