"""
Exception hierarchy.

Configuration and record-loading errors are fatal and propagate to the
caller. Value and condition errors are raised by the helpers that detect
them and converted to classifications by the evaluator.
"""

from __future__ import annotations


class RiskmarkError(Exception):
    """Base class for every error raised by riskmark."""


class ConfigError(RiskmarkError):
    """The threshold configuration could not be read or validated."""


class RecordLoadError(RiskmarkError):
    """A record file could not be read."""


class InvalidValueError(RiskmarkError):
    """A value could not be coerced to a number."""


class InvalidDateError(RiskmarkError):
    """A value could not be coerced to a date."""


class MalformedConditionError(RiskmarkError):
    """A condition expression does not follow the comparison grammar."""
