"""Tests for application settings."""

import pytest

from portico.config.settings import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    s = Settings(_env_file=None)

    assert s.APP_NAME == "Portico"
    assert s.API_PREFIX == "/api"
    assert (s.CANVAS_WIDTH, s.CANVAS_HEIGHT) == (800, 600)
    assert s.NETWORK_REFETCH_INTERVAL_SECONDS == 10
    assert s.NETWORK_STALE_SECONDS == 8
    assert s.SEED_DEFAULT_CLUSTERS is True
    assert s.is_development


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("ENFORCE_UNIQUE_CLUSTER_NAMES", "false")

    s = Settings(_env_file=None)

    assert s.PORT == 9001
    assert s.is_production
    assert s.ENFORCE_UNIQUE_CLUSTER_NAMES is False
