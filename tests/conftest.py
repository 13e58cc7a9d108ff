import json
from datetime import datetime

import pytest

from riskmark.services.rule_loader import parse_rule_set

CONFIG = {
    "thresholds": {
        "SQLCluster": [
            {"PropertyName": "CPU", "Green": "<50", "Yellow": ">=50 && <100", "Red": ">=100"},
            {"PropertyName": "Disk Free", "Green": ">30", "Yellow": ">10 && <=30", "Red": "<=10"},
            {"PropertyName": "LastBackup", "Red": "olderThan7Days"},
            {"PropertyName": "Broken", "Green": ">=> 5", "Yellow": ">=0"},
        ],
        "Certificates": {
            "DaysToExpiry": {
                "RiskDirection": "High",
                "Levels": {"None": 60, "Low": 30, "Medium": 20, "High": 10},
            },
            "FreeSpacePct": {
                "RiskDirection": "Low",
                "Levels": {"None": 50, "Low": 30, "Medium": 20, "High": 10},
            },
            "Sideways": {
                "RiskDirection": "Diagonal",
                "Levels": {"None": 1, "Low": 2, "Medium": 3, "High": 4},
            },
        },
    }
}


@pytest.fixture
def config_document():
    return json.loads(json.dumps(CONFIG))


@pytest.fixture
def rule_set(config_document):
    return parse_rule_set(config_document)


@pytest.fixture
def config_file(tmp_path, config_document):
    path = tmp_path / "thresholds.json"
    path.write_text(json.dumps(config_document), encoding="utf-8")
    return path


@pytest.fixture
def now():
    return datetime(2026, 10, 17, 12, 0, 0)
