"""Tests for the query cache: staleness, invalidation and polling."""

import httpx
import pytest

from portico.client.api_client import ApiError
from portico.client.query_cache import NETWORK_QUERY, QueryCache

pytestmark = pytest.mark.unit


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class CountingFetcher:
    def __init__(self):
        self.calls = 0
        self.fail_with = None

    def __call__(self):
        if self.fail_with is not None:
            raise self.fail_with
        self.calls += 1
        return {"version": self.calls}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return QueryCache(stale_seconds=8, refetch_interval_seconds=10, clock=clock)


def test_get_serves_cache_until_stale(cache, clock):
    fetcher = CountingFetcher()

    assert cache.get(NETWORK_QUERY, fetcher) == {"version": 1}
    clock.now = 7.9
    assert cache.get(NETWORK_QUERY) == {"version": 1}
    clock.now = 8.0
    assert cache.get(NETWORK_QUERY) == {"version": 2}
    assert cache.entry(NETWORK_QUERY).updated_at == 8.0


def test_unknown_key_raises(cache):
    with pytest.raises(KeyError):
        cache.get("/api/unknown")


def test_placeholder_served_before_first_fetch(cache):
    cache.register(NETWORK_QUERY, CountingFetcher(), placeholder={"nodes": [], "links": []})

    assert cache.entry(NETWORK_QUERY).data == {"nodes": [], "links": []}
    assert cache.is_stale(NETWORK_QUERY)


def test_invalidate_refetches_immediately(cache):
    fetcher = CountingFetcher()
    cache.get(NETWORK_QUERY, fetcher)

    refreshed = cache.invalidate(NETWORK_QUERY, "/api/missing")

    assert refreshed == [NETWORK_QUERY]
    assert cache.entry(NETWORK_QUERY).data == {"version": 2}
    assert not cache.is_stale(NETWORK_QUERY)


def test_invalidate_without_refetch_marks_stale(cache):
    fetcher = CountingFetcher()
    cache.get(NETWORK_QUERY, fetcher)

    assert cache.invalidate(refetch=False) == []
    assert cache.is_stale(NETWORK_QUERY)
    assert cache.get(NETWORK_QUERY) == {"version": 2}


def test_poll_refetches_due_keys(cache, clock):
    network = CountingFetcher()
    clusters = CountingFetcher()
    cache.get(NETWORK_QUERY, network)
    clock.now = 5
    cache.get("/api/clusters", clusters)

    clock.now = 10
    assert cache.poll() == [NETWORK_QUERY]
    clock.now = 15
    assert cache.poll() == ["/api/clusters"]
    assert (network.calls, clusters.calls) == (2, 2)


@pytest.mark.parametrize(
    "error",
    [ApiError(500, "boom"), httpx.ConnectError("refused")],
)
def test_failed_background_refetch_keeps_data(cache, clock, error):
    fetcher = CountingFetcher()
    cache.get(NETWORK_QUERY, fetcher)
    fetcher.fail_with = error
    clock.now = 10

    assert cache.poll() == []
    entry = cache.entry(NETWORK_QUERY)
    assert entry.data == {"version": 1}
    assert entry.error is error


def test_foreground_refetch_propagates_errors(cache):
    fetcher = CountingFetcher()
    cache.register(NETWORK_QUERY, fetcher)
    fetcher.fail_with = ApiError(503, "unavailable")

    with pytest.raises(ApiError):
        cache.get(NETWORK_QUERY)


def test_refetch_interval_minimum(cache):
    cache.set_refetch_interval(0)

    assert cache.refetch_interval_seconds == 1.0


def test_with_api_client(api):
    cache = QueryCache()

    network = cache.get(NETWORK_QUERY, lambda: api.fetch(NETWORK_QUERY))

    assert network["nodes"][0]["id"] == "portico"
