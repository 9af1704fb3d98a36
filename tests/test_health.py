"""Tests for health endpoints."""

import pytest

pytestmark = pytest.mark.integration


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "portico"


def test_ready_reports_collection_sizes(client):
    client.post("/api/contacts", json={"name": "Jo", "role": "Rep", "clusterId": 1})

    body = client.get("/ready").json()

    assert body == {"status": "ready", "clusters": 4, "contacts": 1, "connections": 1}


def test_live(client):
    assert client.get("/live").json() == {"status": "alive"}
