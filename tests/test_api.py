import pytest
from fastapi.testclient import TestClient

from riskmark import main
from riskmark.errors import ConfigError


@pytest.fixture
def client(config_file, monkeypatch):
    monkeypatch.setattr(main, "CONFIG_PATH", str(config_file))
    with TestClient(main.app) as c:
        yield c


def test_environments(client):
    resp = client.get("/environments")
    assert resp.status_code == 200
    by_name = {e["name"]: e for e in resp.json()}
    assert by_name["SQLCluster"]["style"] == "expression"
    assert by_name["Certificates"]["style"] == "banded"
    assert "DaysToExpiry" in by_name["Certificates"]["properties"]


def test_classify_expression_value(client):
    resp = client.post(
        "/classify", json={"environment": "SQLCluster", "property_name": "CPU", "value": "75%"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"classification": "MEDIUM", "label": "yellow", "style": "expression"}


def test_classify_unknown_property(client):
    resp = client.post(
        "/classify", json={"environment": "SQLCluster", "property_name": "Nope", "value": 1}
    )
    assert resp.status_code == 200
    assert resp.json()["classification"] == "UNCLASSIFIED"
    assert resp.json()["style"] is None


def test_classify_requires_environment(client):
    resp = client.post("/classify", json={"environment": "", "property_name": "CPU"})
    assert resp.status_code == 422


def test_annotate_batch(client):
    resp = client.post(
        "/annotate",
        json={
            "records": [
                {"environment": "SQLCluster", "fields": {"CPU": "75%"}},
                {"fields": {"TableName": "Certificates", "DaysToExpiry": 5}},
                {"fields": {"CPU": "N/A"}},
            ],
            "default_environment": "SQLCluster",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["records"][0]["fields"]["Risk Level for CPU"] == "yellow"
    assert body["records"][1]["environment"] == "Certificates"
    assert body["records"][2]["fields"]["Risk Level for CPU"] == "InvalidValue"
    assert body["level_distribution"] == {"yellow": 1, "High": 1, "InvalidValue": 1}


def test_annotate_uses_record_tag_without_default(client):
    resp = client.post(
        "/annotate",
        json={"records": [{"fields": {"TableName": "Certificates", "DaysToExpiry": 5}}]},
    )
    assert resp.status_code == 200
    record = resp.json()["records"][0]
    assert record["environment"] == "Certificates"
    assert record["fields"]["Risk Level for DaysToExpiry"] == "High"


def test_annotate_untagged_record_is_rejected(client):
    resp = client.post("/annotate", json={"records": [{"fields": {"CPU": "1"}}]})
    assert resp.status_code == 400


def test_bad_configuration_aborts_startup(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "CONFIG_PATH", str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError):
        with TestClient(main.app):
            pass
