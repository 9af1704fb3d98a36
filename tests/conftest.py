"""
Test configuration and fixtures.

Provides:
- A fresh NetworkStore per test (seeded with the four default clusters)
- The FastAPI app built around that store, and a TestClient for it
- An in-memory LayoutStateStore and SessionState
- A small sample network (two clusters, three contacts)
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portico.api.main import create_application
from portico.client.api_client import PorticoClient
from portico.graph.layout_state import LayoutStateStore, SessionState
from portico.shared.db.store import NetworkStore
from portico.shared.schemas.network import NetworkResponse


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without the HTTP stack")
    config.addinivalue_line("markers", "integration: tests that go through the FastAPI app")


# =============================================================================
# Store / App Fixtures
# =============================================================================

@pytest.fixture
def store() -> NetworkStore:
    """Store seeded with the default clusters (ids 1-4)."""
    return NetworkStore(seed_defaults=True)


@pytest.fixture
def empty_store() -> NetworkStore:
    """Store without seed clusters; the next cluster id is still 5."""
    return NetworkStore(seed_defaults=False)


@pytest.fixture
def app(store: NetworkStore) -> FastAPI:
    return create_application(store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client: TestClient) -> PorticoClient:
    """PorticoClient talking to the in-process app."""
    return PorticoClient(client=client)


# =============================================================================
# Layout Fixtures
# =============================================================================

@pytest.fixture
def layout_state() -> LayoutStateStore:
    return LayoutStateStore()


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def sample_store(empty_store: NetworkStore) -> NetworkStore:
    """
    Two clusters and three contacts:

        cluster 5 "Sales"   → Ana García (Account Executive), Jo (Rep)
        cluster 6 "Support" → Max Mustermann (Engineer)
    """
    sales = empty_store.create_cluster({"name": "Sales", "color": "rgba(1, 2, 3, 0.4)"})
    support = empty_store.create_cluster({"name": "Support", "color": "rgba(10, 20, 30, 0.45)"})
    empty_store.create_contact({"name": "Ana García", "role": "Account Executive", "cluster_id": sales.id})
    empty_store.create_contact({"name": "Jo", "role": "Rep", "cluster_id": sales.id})
    empty_store.create_contact({"name": "Max Mustermann", "role": "Engineer", "cluster_id": support.id})
    return empty_store


@pytest.fixture
def sample_network(sample_store: NetworkStore) -> NetworkResponse:
    return NetworkResponse.model_validate(sample_store.get_network_data())
