"""
Configuration module for the riskmark threshold service.

Centralizes classification labels, derived-field naming,
date-coercion formats, and service settings.
"""

import os

# ---------------------------------------------------------------------------
# Rule file location (loaded once at startup)
# ---------------------------------------------------------------------------
CONFIG_PATH: str = os.getenv("RISKMARK_CONFIG", "thresholds.json")

# Top-level keys accepted for the threshold object, in lookup order
THRESHOLD_KEYS: tuple[str, ...] = ("thresholds", "Thresholds")

# ---------------------------------------------------------------------------
# Record tagging
# ---------------------------------------------------------------------------
# Fields that identify which environment a record belongs to
ENVIRONMENT_FIELDS: tuple[str, ...] = ("Environment", "TableName")

# Annotation written back onto each record, one per classified property
DERIVED_FIELD_TEMPLATE: str = "Risk Level for {property_name}"

# ---------------------------------------------------------------------------
# Classification labels per rule style
# ---------------------------------------------------------------------------
EXPRESSION_LABELS: dict[str, str] = {
    "UNCLASSIFIED": "none",
    "LOW": "green",
    "MEDIUM": "yellow",
    "HIGH": "red",
    "INVALID_VALUE": "InvalidValue",
    "INVALID_DATE": "InvalidDate",
}

BANDED_LABELS: dict[str, str] = {
    "UNCLASSIFIED": "Unknown",
    "NONE": "None",
    "LOW": "Low",
    "MEDIUM": "Medium",
    "HIGH": "High",
    "INVALID_VALUE": "InvalidValue",
    "INVALID_DATE": "InvalidDate",
}

# ---------------------------------------------------------------------------
# Date coercion (month/day/year first, then ISO)
# ---------------------------------------------------------------------------
DATE_FORMATS: list[str] = [
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%m/%d/%y %I:%M:%S %p",
    "%m/%d/%y %I:%M %p",
    "%m/%d/%y %H:%M:%S",
    "%m/%d/%y %H:%M",
    "%m/%d/%y",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
]

# ---------------------------------------------------------------------------
# HTTP service
# ---------------------------------------------------------------------------
API_HOST: str = os.getenv("RISKMARK_HOST", "127.0.0.1")
API_PORT: int = int(os.getenv("RISKMARK_PORT", "8000"))
