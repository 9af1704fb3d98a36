"""Tests for /api/connections."""

import pytest

pytestmark = pytest.mark.integration


CONNECTION = {"sourceId": "1", "targetId": "2", "sourceType": "contact", "targetType": "contact"}


def test_create_and_list_connections(client):
    response = client.post("/api/connections", json=CONNECTION)

    assert response.status_code == 201
    assert response.json() == {"id": 1, **CONNECTION}
    assert client.get("/api/connections").json() == [{"id": 1, **CONNECTION}]


@pytest.mark.parametrize(
    "body",
    [
        {**CONNECTION, "sourceType": "person"},
        {**CONNECTION, "sourceId": ""},
        {"sourceId": "1", "targetId": "2", "sourceType": "contact"},
    ],
)
def test_create_connection_rejects_invalid_body(client, body):
    assert client.post("/api/connections", json=body).status_code == 400


def test_delete_connection(client):
    client.post("/api/connections", json=CONNECTION)

    assert client.delete("/api/connections/1").status_code == 204
    assert client.get("/api/connections").json() == []
    assert client.delete("/api/connections/1").status_code == 404
