"""Tests for the cluster/contact forms, settings and the contact detail view."""

import pytest

from portico.client.forms import (
    ClusterDetail,
    ClusterFormSession,
    ContactDetail,
    ContactFormSession,
    SettingsFormSession,
)
from portico.client.query_cache import CLUSTERS_QUERY, NETWORK_QUERY, QueryCache
from portico.graph.layout_state import INITIAL_ZOOM_PERFORMED

pytestmark = pytest.mark.integration

COLOR = "rgba(1, 2, 3, 0.4)"


@pytest.fixture
def cache(api) -> QueryCache:
    cache = QueryCache()
    cache.get(NETWORK_QUERY, lambda: api.fetch(NETWORK_QUERY))
    cache.get(CLUSTERS_QUERY, lambda: api.fetch(CLUSTERS_QUERY))
    return cache


@pytest.fixture
def notes():
    return []


def _cluster_form(api, cache, session, notes, cluster=None):
    form = ClusterFormSession(api, cluster=cluster, cache=cache, session=session, on_notify=notes.append)
    form.open()
    return form


# =============================================================================
# Cluster form
# =============================================================================

def test_create_cluster_refreshes_queries_and_closes(api, cache, session, notes):
    session.set(INITIAL_ZOOM_PERFORMED)
    form = _cluster_form(api, cache, session, notes)

    result = form.submit({"name": "Sales", "color": COLOR})

    assert result.ok
    assert result.data.id == 5
    assert not form.is_open
    assert INITIAL_ZOOM_PERFORMED not in session
    assert [n.title for n in notes] == ["Cluster saved"]
    assert cache.entry(NETWORK_QUERY).fetch_count == 2
    assert cache.entry(CLUSTERS_QUERY).fetch_count == 2
    assert any(n["id"] == "cluster-5" for n in cache.entry(NETWORK_QUERY).data["nodes"])


def test_duplicate_name_is_rejected_before_sending(api, cache, session, notes):
    form = _cluster_form(api, cache, session, notes)

    result = form.submit({"name": "  FINANZEN", "color": COLOR})

    assert not result.ok
    assert result.errors == {"name": "Name already exists"}
    assert result.notification.is_error
    assert form.is_open
    assert len(api.list_clusters()) == 4


def test_invalid_values_send_nothing(api, cache, session, notes):
    form = _cluster_form(api, cache, session, notes)

    result = form.submit({"name": "", "color": COLOR})

    assert not result.ok
    assert "name" in result.errors
    assert notes == []
    assert form.is_open
    assert len(api.list_clusters()) == 4


def test_edit_cluster_keeps_own_name(api, cache, session, notes):
    form = _cluster_form(api, cache, session, notes, cluster=api.get_cluster(1))

    assert form.is_edit
    assert form.initial_values() == {"name": "Marketing", "color": "rgba(173, 216, 230, 0.45)"}

    result = form.submit({"name": "marketing", "color": COLOR})

    assert result.ok
    assert api.get_cluster(1).name == "marketing"


def test_edit_cluster_into_existing_name_fails(api, cache, session, notes):
    form = _cluster_form(api, cache, session, notes, cluster=api.get_cluster(1))

    result = form.submit({"name": "Vertrieb"})

    assert not result.ok
    assert api.get_cluster(1).name == "Marketing"


def test_new_cluster_form_defaults(api):
    form = ClusterFormSession(api)

    assert not form.is_edit
    assert form.initial_values() == {"name": "", "color": "rgba(144, 238, 144, 0.45)"}


# =============================================================================
# Contact form
# =============================================================================

def test_create_contact(api, cache, session, notes):
    form = ContactFormSession(api, cache=cache, session=session, on_notify=notes.append)
    form.open()

    result = form.submit({"name": "Ana García", "role": "AE", "clusterId": 2, "relationshipStrength": 4})

    assert result.ok
    assert result.data.relationship_strength == 4
    assert not form.is_open
    assert any(n["id"] == "contact-1" for n in cache.entry(NETWORK_QUERY).data["nodes"])


def test_contact_form_validation(api, notes):
    form = ContactFormSession(api, on_notify=notes.append)

    result = form.submit({"name": "Ana", "role": "AE", "relationshipStrength": 9})

    assert not result.ok
    assert {"clusterId", "relationshipStrength"} <= set(result.errors)
    assert api.list_contacts() == []


def test_server_rejection_keeps_form_open(api, notes):
    form = ContactFormSession(api, on_notify=notes.append)
    form.open()

    result = form.submit({"name": "Ana", "role": "AE", "clusterId": 99})

    assert not result.ok
    assert form.is_open
    assert notes[0].is_error
    assert "Specified cluster does not exist" in notes[0].description


# =============================================================================
# Contact detail / settings
# =============================================================================

def test_contact_detail(api):
    contact = api.create_contact(name="Ana García", role="AE", clusterId=3)

    detail = ContactDetail(contact, api.list_clusters())

    assert detail.initials == "AG"
    assert detail.cluster_name == "Technologie"
    assert detail.cluster_color == "rgba(221, 160, 221, 0.45)"
    assert ContactDetail(contact).cluster_name == "Unknown"

    form = detail.edit_form(api)
    assert form.is_open
    assert form.contact_id == contact.id
    assert form.submit({"role": "Director"}).ok
    assert api.get_contact(contact.id).role == "Director"


def test_contact_detail_from_network_node(api):
    api.create_contact(name="jo", role="Rep", clusterId=1)
    node = next(n for n in api.get_network().nodes if n.id == "contact-1")

    detail = ContactDetail(node, api.list_clusters())

    assert detail.contact_id == 1
    assert detail.initials == "J"
    assert detail.cluster_name == "Marketing"


def test_settings_form(layout_state):
    cache = QueryCache()
    form = SettingsFormSession(layout_state, cache)

    assert form.refresh_interval == 10
    assert form.set_refresh_interval("30") == 30
    assert cache.refetch_interval_seconds == 30
    assert form.set_refresh_interval("abc") == 1
    assert layout_state.load_refresh_interval() == 1


def test_contact_detail_delete(api, cache, session, notes):
    contact = api.create_contact(name="Ana García", role="AE", clusterId=3)
    cache.invalidate()
    session.set(INITIAL_ZOOM_PERFORMED)

    result = ContactDetail(contact).delete(api, cache=cache, session=session, on_notify=notes.append)

    assert result.ok
    assert notes[-1].title == "Contact deleted"
    assert api.list_contacts() == []
    assert not any(n["id"] == "contact-1" for n in cache.entry(NETWORK_QUERY).data["nodes"])
    assert INITIAL_ZOOM_PERFORMED not in session


def test_contact_detail_delete_failure_is_destructive(api, notes):
    contact = api.create_contact(name="Ana", role="AE", clusterId=3)
    api.delete_contact(contact.id)

    result = ContactDetail(contact).delete(api, on_notify=notes.append)

    assert not result.ok
    assert notes[0].is_error
    assert "Contact with id '1' not found" in notes[0].description


# =============================================================================
# Cluster detail
# =============================================================================

@pytest.fixture
def sales_detail(api) -> ClusterDetail:
    sales = api.create_cluster(name="Sales Team", color=COLOR)
    api.create_contact(name="Ana García", role="AE", clusterId=sales.id)
    api.create_contact(name="Jo", role="Rep", clusterId=sales.id)
    api.create_contact(name="Max", role="CTO", clusterId=1)
    return ClusterDetail.from_network(api.get_network(), sales.id)


def test_cluster_detail_from_network(sales_detail):
    assert sales_detail.cluster_id == 5
    assert sales_detail.initials == "ST"
    assert sales_detail.contact_count == 2
    assert [c.name for c in sales_detail.contacts] == ["Ana García", "Jo"]


def test_cluster_detail_missing_cluster(api):
    assert ClusterDetail.from_network(api.get_network(), 42) is None


def test_cluster_detail_filters_contacts_by_name(sales_detail):
    assert [c.name for c in sales_detail.filtered_contacts("GAR")] == ["Ana García"]
    assert len(sales_detail.filtered_contacts("")) == 2
    assert sales_detail.filtered_contacts("zzz") == []


def test_cluster_detail_delete_contact(api, cache, sales_detail, notes):
    jo = sales_detail.filtered_contacts("jo")[0]

    result = sales_detail.delete_contact(api, jo, cache=cache, on_notify=notes.append)

    assert result.ok
    assert sales_detail.contact_count == 1
    assert [c.name for c in api.list_contacts(cluster_id=5)] == ["Ana García"]
    assert not any(n["id"] == "contact-2" for n in cache.entry(NETWORK_QUERY).data["nodes"])


def test_cluster_detail_edit_and_delete(api, cache, sales_detail, notes):
    form = sales_detail.edit_form(api, cache=cache, on_notify=notes.append)
    assert form.is_open
    assert form.initial_values() == {"name": "Sales Team", "color": COLOR}

    result = sales_detail.delete(api, cache=cache, on_notify=notes.append)

    assert result.ok
    assert notes[-1].title == "Cluster deleted"
    assert [c.id for c in api.list_clusters()] == [1, 2, 3, 4]
    assert [c.name for c in api.list_contacts()] == ["Max"]
    assert not any(c["id"] == 5 for c in cache.entry(CLUSTERS_QUERY).data)
