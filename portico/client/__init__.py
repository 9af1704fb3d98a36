"""
Client Module

Python client for the Portico API: HTTP access, query caching, and the
form/detail layer that sits on top of them.

Components:
===========
- api_client: PorticoClient, ApiError
- query_cache: QueryCache (stale window, polling, invalidation)
- forms: ClusterFormSession, ContactFormSession, SettingsFormSession,
         ClusterDetail, ContactDetail, Notification

Usage:
======
    from portico.client import PorticoClient, QueryCache, ClusterFormSession

    api = PorticoClient("http://localhost:8000")
    cache = QueryCache()
    form = ClusterFormSession(api, cache=cache)
    form.open()
    result = form.submit({"name": "Sales", "color": "rgba(1,2,3,0.4)"})
"""

from portico.client.api_client import ApiError, PorticoClient
from portico.client.query_cache import CLUSTERS_QUERY, NETWORK_QUERY, QueryCache, QueryEntry
from portico.client.forms import (
    ClusterFormSession,
    ClusterDetail,
    ContactDetail,
    ContactFormSession,
    FormResult,
    Notification,
    SettingsFormSession,
)

__all__ = [
    "ApiError",
    "PorticoClient",
    "QueryCache",
    "QueryEntry",
    "NETWORK_QUERY",
    "CLUSTERS_QUERY",
    "ClusterFormSession",
    "ContactFormSession",
    "SettingsFormSession",
    "ClusterDetail",
    "ContactDetail",
    "FormResult",
    "Notification",
]
