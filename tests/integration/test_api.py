import pytest
from fastapi.testclient import TestClient

from quickstats.api import health
from quickstats.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_ready(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


def test_summary(client):
    r = client.post("/stats/summary", json={"values": [1, 2, 3, 4, 5]})
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 5
    assert data["sum"] == 15
    assert data["mean"] == 3
    assert data["variance"] == 2
    assert data["stdev"] == pytest.approx(1.41421356)


def test_summary_rounded(client):
    r = client.post("/stats/summary", json={"values": [1, 2, 3, 4, 5], "precision": 3})
    assert r.status_code == 200
    assert r.json()["stdev"] == 1.414


def test_summary_empty_is_bad_request(client):
    r = client.post("/stats/summary", json={"values": []})
    assert r.status_code == 400
    assert "must not be empty" in r.json()["detail"]


@pytest.mark.parametrize(
    "body",
    [
        {"values": ["abc"]},
        {"values": [1, 2], "unexpected": True},
        {},
    ],
)
def test_summary_malformed_is_bad_request(client, body):
    r = client.post("/stats/summary", json=body)
    assert r.status_code == 400


def test_change(client):
    r = client.post("/stats/change", json={"old_value": 50, "new_value": 75})
    assert r.status_code == 200
    assert r.json()["change"] == 0.5


def test_change_from_zero(client):
    r = client.post("/stats/change", json={"old_value": 0, "new_value": 75})
    assert r.status_code == 400
    assert "old_value" in r.json()["detail"]


def test_correlation(client):
    r = client.post("/stats/correlation", json={"xs": [1, 2, 3, 4, 5], "ys": [5, 4, 3, 2, 1]})
    assert r.status_code == 200
    assert r.json()["r"] == pytest.approx(-1.0)


def test_correlation_length_mismatch(client):
    r = client.post("/stats/correlation", json={"xs": [1, 2, 3], "ys": [1, 2]})
    assert r.status_code == 400


def test_zscore(client):
    r = client.post("/stats/zscore", json={"value": 9, "values": [2, 4, 4, 4, 5, 5, 7, 9]})
    assert r.status_code == 200
    assert r.json()["z_score"] == 2.0


def test_round(client):
    r = client.post("/stats/round", json={"value": 2.345, "precision": 2})
    assert r.status_code == 200
    assert r.json()["value"] == 2.35


def test_classification_metrics(client):
    body = {"predicted": [1, 0, 1, 1], "actual": [1, 0, 0, 1], "positive_label": 1}
    r = client.post("/classification/metrics", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["tally"] == {
        "true_positive": 2,
        "false_positive": 1,
        "true_negative": 1,
        "false_negative": 0,
    }
    assert data["precision"] == pytest.approx(2 / 3)
    assert data["recall"] == 1.0
    assert data["accuracy"] == 0.75


def test_classification_empty_is_bad_request(client):
    r = client.post("/classification/metrics", json={"predicted": [], "actual": []})
    assert r.status_code == 400
    assert "empty tally" in r.json()["detail"]


def test_metrics(client):
    client.post("/stats/change", json={"old_value": 0, "new_value": 1})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "quickstats_request_total" in r.text
    assert "quickstats_rejected_input_total" in r.text


def test_summary_overflow_is_bad_request(client):
    r = client.post("/stats/summary", json={"values": [1e308, 1e308]})
    assert r.status_code == 400
    assert "overflows" in r.json()["detail"]


def test_correlation_overflow_is_bad_request(client):
    r = client.post("/stats/correlation", json={"xs": [1e200, 2e200], "ys": [1, 2]})
    assert r.status_code == 400


def test_correlation_constant_input_is_bad_request(client):
    r = client.post("/stats/correlation", json={"xs": [0.3, 0.3, 0.3], "ys": [1, 2, 3]})
    assert r.status_code == 400
    assert "constant" in r.json()["detail"]


def test_not_ready_when_self_check_fails(monkeypatch):
    monkeypatch.setattr(health, "core_self_check", lambda: False)
    with TestClient(create_app()) as c:
        r = c.get("/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not ready"


def test_core_self_check_passes():
    assert health.core_self_check() is True
