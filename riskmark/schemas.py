"""
Pydantic schemas for the threshold configuration and the HTTP API.

Rule models are frozen: a rule set is validated once at load time
and then shared read-only by every classification call.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from riskmark.models import RuleStyle


# ---------------------------------------------------------------------------
# Threshold configuration
# ---------------------------------------------------------------------------

class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BandLevels(_FrozenModel):
    none: float | None = Field(default=None, alias="None")
    low: float | None = Field(default=None, alias="Low")
    medium: float | None = Field(default=None, alias="Medium")
    high: float | None = Field(default=None, alias="High")


class BandedRule(_FrozenModel):
    """Four cut points plus the direction in which risk grows."""

    risk_direction: str = Field(alias="RiskDirection")
    levels: BandLevels = Field(alias="Levels")

    @property
    def style(self) -> RuleStyle:
        return RuleStyle.BANDED


class ExpressionRule(_FrozenModel):
    """Up to three comparison expressions, best bucket first."""

    property_name: str = Field(alias="PropertyName")
    best: str | None = Field(
        default=None, validation_alias=AliasChoices("Green", "Low", "best")
    )
    middle: str | None = Field(
        default=None, validation_alias=AliasChoices("Yellow", "Medium", "middle")
    )
    worst: str | None = Field(
        default=None, validation_alias=AliasChoices("Red", "High", "worst")
    )

    @property
    def style(self) -> RuleStyle:
        return RuleStyle.EXPRESSION


Rule = Union[BandedRule, ExpressionRule]


class RuleSet(_FrozenModel):
    """Environment name → property name → rule."""

    environments: dict[str, dict[str, Rule]] = Field(default_factory=dict)

    def environment(self, name: str) -> dict[str, Rule] | None:
        rules = self.environments.get(name)
        if rules is not None:
            return rules
        folded = name.casefold()
        for key, value in self.environments.items():
            if key.casefold() == folded:
                return value
        return None

    def lookup(self, environment: str, property_name: str) -> Rule | None:
        """Return the rule for *property_name* in *environment*, or None."""
        rules = self.environment(environment)
        if not rules:
            return None
        rule = rules.get(property_name)
        if rule is not None:
            return rule
        folded = property_name.casefold()
        for key, value in rules.items():
            if key.casefold() == folded:
                return value
        return None


# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

class ClassifyRequest(BaseModel):
    environment: str = Field(..., min_length=1)
    property_name: str = Field(..., min_length=1)
    value: str | float | int | None = Field(
        default=None,
        description="Raw value; text may carry units, percent signs or a date.",
    )


class ClassifyResponse(BaseModel):
    classification: str
    label: str
    style: str | None = None


class RecordIn(BaseModel):
    environment: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)


class AnnotateRequest(BaseModel):
    records: list[RecordIn] = Field(..., max_length=50_000)
    default_environment: str | None = None


class RecordOut(BaseModel):
    environment: str
    fields: dict[str, Any]


class AnnotateResponse(BaseModel):
    records: list[RecordOut]
    level_distribution: dict[str, int]
    property_distribution: dict[str, dict[str, int]]


class EnvironmentSummary(BaseModel):
    name: str
    style: str
    properties: list[str]
