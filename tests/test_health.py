from __future__ import annotations

from fastapi.testclient import TestClient

from wabametrics.api import create_app
from wabametrics.settings import settings


def test_health_reports_defaults() -> None:
    client = TestClient(create_app())
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["defaults"]["polarity"] == settings.polarity
    assert data["defaults"]["min_coverage"] == settings.min_coverage


def test_metrics_endpoint(mock_witnesses: list[dict]) -> None:
    client = TestClient(create_app())
    r = client.post("/metrics", json={"witnesses": mock_witnesses, "polarity": "cost"})
    assert r.status_code == 200
    data = r.json()
    assert data["available"] is True
    assert data["global"]["optimal"] == 10
    assert data["global"]["numInS"] == 3
    assert data["atoms"]["a"]["Pi_S"] == 100


def test_metrics_endpoint_without_witnesses() -> None:
    client = TestClient(create_app())
    r = client.post("/metrics", json={"witnesses": []})
    assert r.status_code == 200
    assert r.json() == {"available": False}


def test_metrics_endpoint_rejects_bad_score() -> None:
    client = TestClient(create_app())
    r = client.post("/metrics", json={"witnesses": [{"score": "high"}]})
    assert r.status_code == 422


def test_solver_endpoint() -> None:
    client = TestClient(create_app())
    payload = {
        "Result": "SATISFIABLE",
        "Call": [{"Witnesses": [{"Value": ["in(a)"], "Optimization": [3]}, {"Value": ["in(b)"], "Optimization": [8]}]}],
    }
    r = client.post("/metrics/solver", params={"polarity": "strength"}, json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["global"]["optimal"] == 8
    assert data["context"]["betterDirection"] == "higher"
    assert data["atoms"]["b"]["regret"] == 0


def test_infinite_support_is_explicit_in_response() -> None:
    client = TestClient(create_app())
    payload = {
        "Result": "OPTIMUM FOUND",
        "Call": [{"Witnesses": [{"Value": ["in(a)", "supported_with_weight(a,#sup)"], "Optimization": [1]}]}],
    }
    r = client.post("/metrics/solver", json=payload)
    assert r.status_code == 200
    assert r.json()["atoms"]["a"]["Pi_S"] == "Infinity"
