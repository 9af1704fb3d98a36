"""Tests for the error body format and exception handlers."""

import pytest
from fastapi import APIRouter

from portico.api.main import create_application
from portico.api.middleware.error_handler import format_validation_errors
from portico.shared.core.exceptions import (
    ClusterNotFoundError,
    DuplicateClusterNameError,
    PorticoException,
    ValidationError,
)
from portico.shared.db.store import NetworkStore


def test_exception_to_dict_omits_empty_details():
    assert ClusterNotFoundError(3).to_dict() == {
        "message": "Cluster with id '3' not found",
        "code": "NOT_FOUND",
    }


def test_exception_status_codes():
    assert ValidationError("bad").status_code == 400
    assert ClusterNotFoundError(1).status_code == 404
    assert DuplicateClusterNameError("Sales", 5).status_code == 409
    assert PorticoException("boom").status_code == 500


def test_format_validation_errors_strips_request_section():
    message = format_validation_errors([
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("body", "address", "city"), "msg": "Input should be a valid string"},
    ])

    assert message == (
        'Validation error: Field required at "name"; '
        'Input should be a valid string at "address.city"'
    )


@pytest.mark.integration
def test_malformed_json_is_400(client):
    response = client.post(
        "/api/clusters",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "message" in response.json()


@pytest.mark.integration
def test_non_integer_path_id_is_400(client):
    response = client.get("/api/clusters/abc")

    assert response.status_code == 400


@pytest.mark.integration
def test_unexpected_error_is_generic_500():
    from fastapi.testclient import TestClient

    app = create_application(store=NetworkStore())
    router = APIRouter()

    @router.get("/api/boom")
    async def boom():
        raise RuntimeError("secret internals")

    app.include_router(router)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred", "code": "INTERNAL_ERROR"}
    assert "secret" not in response.text
