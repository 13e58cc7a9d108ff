"""
Threshold configuration loader.

Reads the JSON rule file once and validates it into an immutable
``RuleSet``. Every failure here is fatal and raised as ``ConfigError``
before any record is processed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from riskmark.config import THRESHOLD_KEYS
from riskmark.errors import ConfigError
from riskmark.schemas import BandedRule, ExpressionRule, Rule, RuleSet

logger = logging.getLogger(__name__)


def _expression_rules(environment: str, entries: list[Any]) -> dict[str, Rule]:
    rules: dict[str, Rule] = {}
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"{environment}[{index}]: expected an object")
        rule = ExpressionRule.model_validate(entry)
        if rule.property_name in rules:
            logger.warning(
                "Duplicate rule for %s/%s ignored", environment, rule.property_name
            )
            continue
        rules[rule.property_name] = rule
    return rules


def _banded_rules(environment: str, entries: dict[str, Any]) -> dict[str, Rule]:
    rules: dict[str, Rule] = {}
    for property_name, entry in entries.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"{environment}.{property_name}: expected an object")
        rules[property_name] = BandedRule.model_validate(entry)
    return rules


def parse_rule_set(document: Any) -> RuleSet:
    """Validate an already-decoded configuration document."""
    if not isinstance(document, dict):
        raise ConfigError("configuration must be a JSON object")

    thresholds = None
    for key in THRESHOLD_KEYS:
        if key in document:
            thresholds = document[key]
            break
    if thresholds is None:
        raise ConfigError("configuration is missing a 'thresholds' object")
    if not isinstance(thresholds, dict):
        raise ConfigError("'thresholds' must be an object keyed by environment")

    environments: dict[str, dict[str, Rule]] = {}
    try:
        for environment, entries in thresholds.items():
            if isinstance(entries, list):
                environments[environment] = _expression_rules(environment, entries)
            elif isinstance(entries, dict):
                environments[environment] = _banded_rules(environment, entries)
            else:
                raise ConfigError(
                    f"{environment}: expected a list of rules or an object of rules"
                )
    except ValidationError as exc:
        raise ConfigError(f"invalid rule in {environment!r}: {exc}") from exc

    return RuleSet(environments=environments)


def load_rule_set(path: str | Path) -> RuleSet:
    """Read and validate the threshold file at *path*."""
    config_path = Path(path)
    try:
        document = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"configuration file not found: {config_path}") from None
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {config_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{config_path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read {config_path}: {exc}") from exc

    rule_set = parse_rule_set(document)
    logger.info(
        "Loaded %d environment(s) from %s", len(rule_set.environments), config_path
    )
    return rule_set
