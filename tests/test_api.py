"""HTTP surface tests using FastAPI's test client."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from server.api import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def _payload_items() -> list:
    return [
        {"id": "A", "category": "tops", "color": "#808080", "fabricType": "cotton", "subCategory": "tshirt"},
        {"id": "B", "category": "bottoms", "color": "#7a7a7a", "fabricType": "denim", "subCategory": "jeans"},
        {"id": "C", "category": "shoes", "color": "#000000", "fabricType": "leather", "subCategory": "loafers"},
        {"id": "S", "category": "shoes", "color": "#c19a6b", "fabricType": "leather", "subCategory": "sandals"},
    ]


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_suggestions_endpoint_ranks_outfits(client: TestClient) -> None:
    response = client.post("/suggestions", json={"items": _payload_items(), "maxResults": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == len(body["suggestions"]) <= 3
    scores = [suggestion["score"] for suggestion in body["suggestions"]]
    assert scores == sorted(scores, reverse=True)
    assert all(suggestion["itemIds"] for suggestion in body["suggestions"])


def test_suggestions_endpoint_applies_season(client: TestClient) -> None:
    response = client.post("/suggestions", json={"items": _payload_items(), "season": "winter", "maxResults": 10})
    assert response.status_code == 200
    body = response.json()
    assert body["season"] == "winter"
    assert body["suggestions"]
    assert not any("S" in suggestion["itemIds"] for suggestion in body["suggestions"])


def test_suggestions_endpoint_empty_pool(client: TestClient) -> None:
    response = client.post("/suggestions", json={"items": []})
    assert response.status_code == 200
    assert response.json()["suggestions"] == []


def test_suggestions_endpoint_rejects_bad_payload(client: TestClient) -> None:
    response = client.post("/suggestions", json={"items": [{"id": "x", "category": "tops", "color": "blue"}]})
    assert response.status_code == 422


def test_validate_endpoint(client: TestClient) -> None:
    blazer_only = [{"id": "Z", "category": "blazers", "color": "#1c2541", "fabricType": "wool"}]
    response = client.post("/outfits/validate", json={"items": blazer_only})
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert any("shirt" in warning for warning in body["warnings"])

    ok = client.post("/outfits/validate", json={"items": _payload_items()[:2]})
    assert ok.json() == {"status": "ok", "warnings": [], "valid": True, "skippedItems": []}
