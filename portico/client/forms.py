"""
Forms and detail views.

Client-side counterparts of the add/edit modals and the contact and
cluster drawers.

Submit Flow (cluster and contact forms):
========================================
    1. Validate values with the shared request schema
       → field errors, no request sent, form stays open
    2. Cluster forms only: best-effort duplicate-name pre-check against
       GET /api/clusters (the server re-checks and answers 409)
    3. Send POST (create) or PATCH (edit)
       → ApiError: destructive notification, form stays open
    4. Invalidate /api/network and /api/clusters, success notification,
       close the form (which also re-arms the initial zoom for the next render)

Notifications are collected on the session and also handed to an optional
``on_notify`` callback.

Deletes from the detail views follow steps 3 and 4 the same way.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from portico.client.api_client import ApiError, PorticoClient
from portico.client.query_cache import CLUSTERS_QUERY, NETWORK_QUERY, QueryCache
from portico.graph.layout_state import INITIAL_ZOOM_PERFORMED, LayoutStateStore, SessionState
from portico.shared.core.logging import get_logger
from portico.shared.models.enums import NodeType
from portico.shared.repositories.cluster_repository import normalize_cluster_name
from portico.shared.schemas.cluster import ClusterCreate, ClusterResponse, ClusterUpdate
from portico.shared.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from portico.shared.schemas.network import NetworkNodeSchema, NetworkResponse

logger = get_logger("portico.client.forms")


CLUSTER_COLOR_OPTIONS = [
    "rgba(173, 216, 230, 0.45)",
    "rgba(144, 238, 144, 0.45)",
    "rgba(221, 160, 221, 0.45)",
    "rgba(255, 255, 224, 0.45)",
    "rgba(255, 182, 193, 0.45)",
    "rgba(240, 230, 140, 0.45)",
    "rgba(176, 224, 230, 0.45)",
    "rgba(255, 218, 185, 0.45)",
]
DEFAULT_CLUSTER_COLOR = "rgba(144, 238, 144, 0.45)"


@dataclass
class Notification:
    """A transient toast."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


@dataclass
class FormResult:
    """Outcome of one submit."""

    ok: bool
    data: Any = None
    errors: Dict[str, str] = field(default_factory=dict)
    notification: Optional[Notification] = None


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Pydantic errors keyed by camelCase field path."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        errors.setdefault(path, error.get("msg", "Invalid value"))
    return errors


def _entity_id(entity: Union[BaseModel, None]) -> Optional[int]:
    if entity is None:
        return None
    if isinstance(entity, NetworkNodeSchema):
        return entity.original_id
    return getattr(entity, "id", None)


class FormSession:
    """Open/close state, notifications and cache invalidation shared by forms."""

    def __init__(
        self,
        api: PorticoClient,
        cache: Optional[QueryCache] = None,
        session: Optional[SessionState] = None,
        on_notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.api = api
        self.cache = cache
        self.session = session
        self.on_notify = on_notify
        self.is_open = False
        self.notifications: List[Notification] = []

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        if self.session is not None:
            self.session.remove(INITIAL_ZOOM_PERFORMED)

    def notify(self, notification: Notification) -> Notification:
        self.notifications.append(notification)
        if self.on_notify is not None:
            self.on_notify(notification)
        return notification

    def _invalidate(self) -> None:
        if self.cache is not None:
            self.cache.invalidate(NETWORK_QUERY, CLUSTERS_QUERY)

    def _failed(self, error: ApiError, what: str, errors: Optional[Dict[str, str]] = None) -> FormResult:
        logger.warning("Form submit failed", form=type(self).__name__, status_code=error.status_code, message=error.message)
        notification = self.notify(
            Notification("Error", f"{what} could not be saved: {error.message}", "destructive")
        )
        return FormResult(ok=False, errors=errors or {}, notification=notification)

    def _succeeded(self, data: Any, title: str, description: str) -> FormResult:
        self._invalidate()
        notification = self.notify(Notification(title, description))
        self.close()
        return FormResult(ok=True, data=data, notification=notification)

    def delete(self, action: Callable[[], None], kind: str, name: str) -> FormResult:
        """
        Run a DELETE call and report it like a submit.

        Args:
            action: Performs the request, e.g. ``lambda: api.delete_contact(3)``
            kind: "contact" or "cluster", used in the notification text
            name: Display name of the deleted entity
        """
        try:
            action()
        except ApiError as e:
            logger.warning("Delete failed", kind=kind, status_code=e.status_code, message=e.message)
            notification = self.notify(
                Notification("Error", f"The {kind} could not be deleted: {e.message}", "destructive")
            )
            return FormResult(ok=False, notification=notification)
        return self._succeeded(None, f"{kind.capitalize()} deleted", f"{name} was removed.")


# ═══════════════════════════════════════════════════════════════════════════════
# CLUSTER FORM
# ═══════════════════════════════════════════════════════════════════════════════


class ClusterFormSession(FormSession):
    """Add or edit a cluster."""

    def __init__(self, api: PorticoClient, cluster: Optional[Union[ClusterResponse, NetworkNodeSchema]] = None, **kwargs):
        super().__init__(api, **kwargs)
        self.cluster = cluster
        self.cluster_id = _entity_id(cluster)

    @property
    def is_edit(self) -> bool:
        return self.cluster_id is not None

    def initial_values(self) -> Dict[str, str]:
        if self.cluster is not None:
            return {"name": self.cluster.name, "color": self.cluster.color or DEFAULT_CLUSTER_COLOR}
        return {"name": "", "color": DEFAULT_CLUSTER_COLOR}

    def submit(self, values: Dict[str, Any]) -> FormResult:
        schema = ClusterUpdate if self.is_edit else ClusterCreate
        try:
            payload = schema.model_validate(values)
        except ValidationError as e:
            return FormResult(ok=False, errors=field_errors(e))

        if payload.name and self.name_taken(payload.name):
            notification = self.notify(
                Notification("Error", f"A cluster named '{payload.name}' already exists.", "destructive")
            )
            return FormResult(ok=False, errors={"name": "Name already exists"}, notification=notification)

        body = payload.model_dump(by_alias=True, exclude_unset=True)
        try:
            if self.is_edit:
                cluster = self.api.update_cluster(self.cluster_id, **body)
            else:
                cluster = self.api.create_cluster(**body)
        except ApiError as e:
            errors = {"name": "Name already exists"} if e.is_conflict else None
            return self._failed(e, "The cluster", errors)

        verb = "updated" if self.is_edit else "added to the network"
        return self._succeeded(cluster, "Cluster saved", f"{cluster.name} was {verb}.")

    def name_taken(self, name: str) -> bool:
        """
        Best-effort duplicate check against the current cluster list.

        Not atomic with the following create; a failed lookup counts as free.
        """
        try:
            clusters = self.api.list_clusters()
        except ApiError as e:
            logger.warning("Duplicate pre-check failed", error=e.message)
            return False
        wanted = normalize_cluster_name(name)
        return any(
            normalize_cluster_name(c.name) == wanted and c.id != self.cluster_id
            for c in clusters
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONTACT FORM
# ═══════════════════════════════════════════════════════════════════════════════


class ContactFormSession(FormSession):
    """Add or edit a contact."""

    def __init__(self, api: PorticoClient, contact: Optional[Union[ContactResponse, NetworkNodeSchema]] = None, **kwargs):
        super().__init__(api, **kwargs)
        self.contact = contact
        self.contact_id = _entity_id(contact)

    @property
    def is_edit(self) -> bool:
        return self.contact_id is not None

    def submit(self, values: Dict[str, Any]) -> FormResult:
        schema = ContactUpdate if self.is_edit else ContactCreate
        try:
            payload = schema.model_validate(values)
        except ValidationError as e:
            return FormResult(ok=False, errors=field_errors(e))

        body = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
        try:
            if self.is_edit:
                contact = self.api.update_contact(self.contact_id, **body)
            else:
                contact = self.api.create_contact(**body)
        except ApiError as e:
            return self._failed(e, "The contact")

        verb = "updated" if self.is_edit else "added to the network"
        return self._succeeded(contact, "Contact saved", f"{contact.name} was {verb}.")


# ═══════════════════════════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════════════════════════


class SettingsFormSession:
    """The refresh interval preference, persisted in the layout state."""

    def __init__(self, layout_state: LayoutStateStore, cache: Optional[QueryCache] = None):
        self.layout_state = layout_state
        self.cache = cache
        if cache is not None:
            cache.set_refetch_interval(self.refresh_interval)

    @property
    def refresh_interval(self) -> int:
        return self.layout_state.load_refresh_interval()

    def set_refresh_interval(self, seconds: Any) -> int:
        """Store the interval (non-numbers and values below 1 become 1)."""
        try:
            value = int(seconds)
        except (TypeError, ValueError):
            value = 1
        value = self.layout_state.save_refresh_interval(value)
        if self.cache is not None:
            self.cache.set_refetch_interval(value)
        return value

# ═══════════════════════════════════════════════════════════════════════════════
# DETAIL VIEWS
# ═══════════════════════════════════════════════════════════════════════════════


UNKNOWN_CLUSTER = "Unknown"

ContactLike = Union[ContactResponse, NetworkNodeSchema]
ClusterLike = Union[ClusterResponse, NetworkNodeSchema]


def name_initials(name: Optional[str]) -> str:
    """First letters of up to two name parts, upper-cased."""
    parts = [p for p in (name or "").split() if p]
    return "".join(p[0] for p in parts[:2]).upper()


@dataclass
class ContactDetail:
    """View model of the contact drawer."""

    contact: ContactLike
    clusters: Sequence[ClusterResponse] = ()

    @property
    def contact_id(self) -> Optional[int]:
        return _entity_id(self.contact)

    @property
    def initials(self) -> str:
        return name_initials(self.contact.name)

    def _cluster(self) -> Optional[ClusterResponse]:
        cluster_id = self.contact.cluster_id
        return next((c for c in self.clusters if c.id == cluster_id), None)

    @property
    def cluster_name(self) -> str:
        cluster = self._cluster()
        return cluster.name if cluster else UNKNOWN_CLUSTER

    @property
    def cluster_color(self) -> Optional[str]:
        cluster = self._cluster()
        return cluster.color if cluster else None

    def edit_form(self, api: PorticoClient, **kwargs) -> ContactFormSession:
        """Open the edit form for this contact."""
        form = ContactFormSession(api, contact=self.contact, **kwargs)
        form.open()
        return form

    def delete(self, api: PorticoClient, **kwargs) -> FormResult:
        """Delete this contact; kwargs are FormSession options (cache, session, on_notify)."""
        contact_id = self.contact_id
        return FormSession(api, **kwargs).delete(
            lambda: api.delete_contact(contact_id), "contact", self.contact.name
        )


@dataclass
class ClusterDetail:
    """
    View model of the cluster drawer: the cluster, its contacts and the
    edit/delete actions for both.
    """

    cluster: ClusterLike
    contacts: Sequence[ContactLike] = ()

    @classmethod
    def from_network(cls, network: NetworkResponse, cluster_id: int) -> Optional["ClusterDetail"]:
        """Build the drawer for ``cluster_id`` from a network projection; None if absent."""
        cluster = next(
            (n for n in network.nodes if n.type == NodeType.CLUSTER and n.original_id == cluster_id),
            None,
        )
        if cluster is None:
            return None
        contacts = [
            n for n in network.nodes
            if n.type == NodeType.CONTACT and n.cluster_id == cluster_id
        ]
        return cls(cluster=cluster, contacts=contacts)

    @property
    def cluster_id(self) -> Optional[int]:
        return _entity_id(self.cluster)

    @property
    def initials(self) -> str:
        return name_initials(self.cluster.name)

    @property
    def contact_count(self) -> int:
        return len(self.contacts)

    def filtered_contacts(self, term: Optional[str] = "") -> List[ContactLike]:
        """Contacts whose name contains ``term`` (case-insensitive)."""
        needle = (term or "").strip().casefold()
        return [c for c in self.contacts if needle in (c.name or "").casefold()]

    def edit_form(self, api: PorticoClient, **kwargs) -> ClusterFormSession:
        form = ClusterFormSession(api, cluster=self.cluster, **kwargs)
        form.open()
        return form

    def contact_form(self, api: PorticoClient, contact: ContactLike, **kwargs) -> ContactFormSession:
        form = ContactFormSession(api, contact=contact, **kwargs)
        form.open()
        return form

    def delete(self, api: PorticoClient, **kwargs) -> FormResult:
        """Delete the cluster; the server cascades to its contacts."""
        cluster_id = self.cluster_id
        return FormSession(api, **kwargs).delete(
            lambda: api.delete_cluster(cluster_id), "cluster", self.cluster.name
        )

    def delete_contact(self, api: PorticoClient, contact: ContactLike, **kwargs) -> FormResult:
        """Delete one of the listed contacts and drop it from this view on success."""
        result = ContactDetail(contact).delete(api, **kwargs)
        if result.ok:
            self.contacts = [c for c in self.contacts if _entity_id(c) != _entity_id(contact)]
        return result
