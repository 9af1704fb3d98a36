"""Tests for /api/clusters."""

import pytest

pytestmark = pytest.mark.integration


def test_list_clusters_returns_seeded_defaults(client):
    response = client.get("/api/clusters")

    assert response.status_code == 200
    body = response.json()
    assert [c["id"] for c in body] == [1, 2, 3, 4]
    assert set(body[0]) == {"id", "name", "color"}


def test_create_cluster_returns_201_with_next_id(client):
    response = client.post("/api/clusters", json={"name": "Sales", "color": "rgba(1,2,3,0.4)"})

    assert response.status_code == 201
    assert response.json() == {"id": 5, "name": "Sales", "color": "rgba(1,2,3,0.4)"}


def test_cluster_ids_strictly_increase(client):
    ids = [
        client.post("/api/clusters", json={"name": f"C{i}", "color": "red"}).json()["id"]
        for i in range(3)
    ]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    assert ids[0] > 4


@pytest.mark.parametrize(
    "body",
    [
        {"color": "red"},
        {"name": "", "color": "red"},
        {"name": "Sales"},
        {"name": "Sales", "color": ""},
    ],
)
def test_create_cluster_rejects_invalid_body(client, body):
    response = client.post("/api/clusters", json=body)

    assert response.status_code == 400
    assert response.json()["message"].startswith("Validation error")
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_cluster_with_duplicate_name_is_conflict(client):
    response = client.post("/api/clusters", json={"name": "  marketing ", "color": "red"})

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "CONFLICT"
    assert body["details"]["existingId"] == 1
    assert "marketing" in body["message"]
    assert len(client.get("/api/clusters").json()) == 4


def test_duplicate_names_allowed_when_rule_disabled(client, monkeypatch):
    from portico.config.settings import settings

    monkeypatch.setattr(settings, "ENFORCE_UNIQUE_CLUSTER_NAMES", False)

    response = client.post("/api/clusters", json={"name": "Marketing", "color": "red"})

    assert response.status_code == 201


def test_get_cluster(client):
    response = client.get("/api/clusters/2")

    assert response.status_code == 200
    assert response.json()["name"] == "Finanzen"


def test_get_unknown_cluster_is_404(client):
    response = client.get("/api/clusters/99")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
    assert "99" in response.json()["message"]


def test_patch_cluster_merges_fields(client):
    response = client.patch("/api/clusters/1", json={"color": "rgba(9,9,9,0.5)"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Marketing", "color": "rgba(9,9,9,0.5)"}


def test_patch_cluster_may_keep_its_own_name(client):
    response = client.patch("/api/clusters/1", json={"name": "MARKETING"})

    assert response.status_code == 200
    assert response.json()["name"] == "MARKETING"


def test_patch_cluster_onto_other_name_is_conflict(client):
    response = client.patch("/api/clusters/1", json={"name": "Finanzen"})

    assert response.status_code == 409


def test_patch_cluster_rejects_null_name(client):
    response = client.patch("/api/clusters/1", json={"name": None})

    assert response.status_code == 400


def test_patch_unknown_cluster_is_404(client):
    response = client.patch("/api/clusters/99", json={"name": "x"})

    assert response.status_code == 404


def test_patch_unknown_cluster_with_taken_name_is_404(client):
    response = client.patch("/api/clusters/999", json={"name": "Marketing"})

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_delete_cluster_returns_204(client):
    response = client.delete("/api/clusters/3")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/clusters/3").status_code == 404


def test_delete_unknown_cluster_is_404(client):
    assert client.delete("/api/clusters/99").status_code == 404
