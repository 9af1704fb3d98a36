"""
Filter / Search

Pure reduction of the network projection to its visible subset.

Visibility Rules:
=================
- The hub is always visible.
- A cluster node is visible when its originalId is active.
- A contact node is visible when its cluster is active AND the search
  term is blank or matches its name or role.
- A link is visible when both endpoints are visible.

``active_cluster_ids=None`` means every cluster is active.

Matching:
=========
Case-insensitive. A term matches a field when it is a substring of the
field, or when it is similar enough (difflib ratio ≥ threshold) to the
whole field or to one of its whitespace-separated words. Accents are
compared as written, so "garcia" reaches "García" through similarity
rather than substring.
"""

from difflib import SequenceMatcher
from typing import Iterable, Optional

from portico.shared.models.enums import NodeType
from portico.shared.models.network import HUB_NODE_ID
from portico.shared.schemas.network import NetworkNodeSchema, NetworkResponse


FUZZY_THRESHOLD = 0.6


def _similar(term: str, text: str, threshold: float) -> bool:
    candidates = [text, *text.split()]
    return any(SequenceMatcher(None, term, c).ratio() >= threshold for c in candidates)


def matches_text(term: str, text: Optional[str], threshold: float = FUZZY_THRESHOLD) -> bool:
    if not text:
        return False
    term = term.strip().casefold()
    text = text.casefold()
    if term in text:
        return True
    return _similar(term, text, threshold)


def matches_search(node: NetworkNodeSchema, term: Optional[str], threshold: float = FUZZY_THRESHOLD) -> bool:
    """Whether ``node`` passes the search term (a blank term passes everything)."""
    if not term or not term.strip():
        return True
    return matches_text(term, node.name, threshold) or matches_text(term, node.role, threshold)


def is_node_visible(
    node: NetworkNodeSchema,
    active_cluster_ids: Optional[set],
    term: Optional[str],
    threshold: float = FUZZY_THRESHOLD,
) -> bool:
    if node.id == HUB_NODE_ID:
        return True
    if node.type == NodeType.CLUSTER:
        return active_cluster_ids is None or node.original_id in active_cluster_ids
    if active_cluster_ids is not None and node.cluster_id not in active_cluster_ids:
        return False
    return matches_search(node, term, threshold)


def filter_network(
    network: NetworkResponse,
    active_cluster_ids: Optional[Iterable[int]] = None,
    search_term: Optional[str] = "",
    threshold: float = FUZZY_THRESHOLD,
) -> NetworkResponse:
    """
    Visible nodes and links of ``network``, in their original order.

    Args:
        network: Full projection
        active_cluster_ids: Cluster ids whose nodes stay visible (None = all)
        search_term: Free-text filter on contact name and role

    Returns:
        A new NetworkResponse; the input is not modified
    """
    active = None if active_cluster_ids is None else set(active_cluster_ids)
    nodes = [n for n in network.nodes if is_node_visible(n, active, search_term, threshold)]
    visible_ids = {n.id for n in nodes}
    links = [l for l in network.links if l.source in visible_ids and l.target in visible_ids]
    return NetworkResponse(nodes=nodes, links=links)
