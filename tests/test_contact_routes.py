"""Tests for /api/contacts."""

import pytest

pytestmark = pytest.mark.integration


def _create(client, **overrides):
    body = {"name": "Jo", "role": "Rep", "clusterId": 1}
    body.update(overrides)
    return client.post("/api/contacts", json=body)


def test_create_contact_returns_full_record(client):
    response = _create(client, email="jo@example.com")

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["clusterId"] == 1
    assert body["email"] == "jo@example.com"
    assert body["phone"] is None
    assert body["emails"] == []
    assert body["socialLinks"] == {}
    assert body["communicationPreferences"] == {}
    assert body["customFields"] == []


def test_create_contact_with_extended_fields(client):
    response = _create(
        client,
        company="ACME",
        tags=["vip"],
        address={"city": "Berlin", "country": "DE"},
        firstContact="2024-03-01",
        relationshipStrength=4,
        communicationPreferences={"email": True, "phone": False},
        customFields=["a", "b"],
    )

    assert response.status_code == 201
    body = response.json()
    assert body["address"] == {"city": "Berlin", "country": "DE"}
    assert body["relationshipStrength"] == 4
    assert body["communicationPreferences"] == {"email": True, "phone": False}


def test_create_contact_with_unknown_cluster_is_400_and_no_mutation(client):
    response = _create(client, clusterId=99)

    assert response.status_code == 400
    assert response.json()["message"] == "Specified cluster does not exist"
    assert client.get("/api/contacts").json() == []
    assert client.get("/api/connections").json() == []


def test_create_contact_missing_name_is_400(client):
    response = client.post("/api/contacts", json={"role": "Rep", "clusterId": 1})

    assert response.status_code == 400
    assert 'Field required at "name"' in response.json()["message"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"relationshipStrength": 6},
        {"relationshipStrength": -1},
        {"customFields": ["1", "2", "3", "4", "5", "6"]},
        {"firstContact": "yesterday"},
    ],
)
def test_create_contact_enforces_field_bounds(client, overrides):
    response = _create(client, **overrides)

    assert response.status_code == 400
    assert client.get("/api/contacts").json() == []


def test_list_contacts_filters_by_cluster(client):
    _create(client, name="A", clusterId=1)
    _create(client, name="B", clusterId=2)
    _create(client, name="C", clusterId=2)

    response = client.get("/api/contacts", params={"clusterId": 2})

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["B", "C"]


def test_get_contact_and_404(client):
    _create(client)

    assert client.get("/api/contacts/1").json()["name"] == "Jo"
    assert client.get("/api/contacts/2").status_code == 404


def test_patch_contact_moves_cluster_edge(client):
    _create(client)

    response = client.patch("/api/contacts/1", json={"clusterId": 3})

    assert response.status_code == 200
    assert response.json()["clusterId"] == 3
    connections = client.get("/api/connections").json()
    assert len(connections) == 1
    assert connections[0]["sourceId"] == "3"
    assert connections[0]["targetId"] == "1"


def test_patch_contact_to_unknown_cluster_is_400(client):
    _create(client)

    response = client.patch("/api/contacts/1", json={"clusterId": 42})

    assert response.status_code == 400
    assert client.get("/api/contacts/1").json()["clusterId"] == 1


def test_patch_contact_only_changes_sent_fields(client):
    _create(client, email="jo@example.com")

    response = client.patch("/api/contacts/1", json={"role": "Lead"})

    assert response.json()["role"] == "Lead"
    assert response.json()["email"] == "jo@example.com"


def test_patch_unknown_contact_is_404(client):
    assert client.patch("/api/contacts/5", json={"role": "x"}).status_code == 404


def test_delete_contact(client):
    _create(client)

    assert client.delete("/api/contacts/1").status_code == 204
    assert client.get("/api/contacts").json() == []
    assert client.get("/api/connections").json() == []
    assert client.delete("/api/contacts/1").status_code == 404
