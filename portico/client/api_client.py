"""
Portico API client - HTTP client for the REST surface.

Provides:
- Typed access to clusters, contacts, connections and the network projection
- ApiError for every non-2xx response, carrying the server's message

The underlying httpx.Client is created lazily from API_BASE_URL, or can be
injected (tests pass a fastapi TestClient, which is an httpx.Client).

Usage:
======
    with PorticoClient() as api:
        cluster = api.create_cluster(name="Sales", color="rgba(1,2,3,0.4)")
        network = api.get_network()
"""

from typing import Any, Dict, List, Optional

import httpx

from portico.config.settings import settings
from portico.shared.core.exceptions import PorticoException
from portico.shared.core.logging import get_logger
from portico.shared.schemas.cluster import ClusterResponse
from portico.shared.schemas.connection import ConnectionResponse
from portico.shared.schemas.contact import ContactResponse
from portico.shared.schemas.network import NetworkResponse

logger = get_logger("portico.client")


class ApiError(PorticoException):
    """A request the server answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=code or "API_ERROR",
            details=details,
        )

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class PorticoClient:
    """
    Client for the Portico REST API.

    Handles:
    - JSON encoding with camelCase keys
    - Mapping error bodies ({"message", "code"}) to ApiError
    - Parsing responses into the shared response schemas
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        api_prefix: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            base_url: Server root. If not provided, uses settings.
            client: Pre-built httpx client; base_url is ignored when given
            api_prefix: Route prefix (default settings.API_PREFIX)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url or settings.API_BASE_URL
        self.api_prefix = settings.API_PREFIX if api_prefix is None else api_prefix
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """Lazy-loaded httpx client."""
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)
        return self._client

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "PorticoClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ═══════════════════════════════════════════════════════════════════════════
    # CLUSTERS
    # ═══════════════════════════════════════════════════════════════════════════

    def list_clusters(self) -> List[ClusterResponse]:
        return [ClusterResponse.model_validate(c) for c in self._request("GET", "/clusters")]

    def get_cluster(self, cluster_id: int) -> ClusterResponse:
        return ClusterResponse.model_validate(self._request("GET", f"/clusters/{cluster_id}"))

    def create_cluster(self, **fields: Any) -> ClusterResponse:
        return ClusterResponse.model_validate(self._request("POST", "/clusters", json=fields))

    def update_cluster(self, cluster_id: int, **fields: Any) -> ClusterResponse:
        return ClusterResponse.model_validate(
            self._request("PATCH", f"/clusters/{cluster_id}", json=fields)
        )

    def delete_cluster(self, cluster_id: int) -> None:
        self._request("DELETE", f"/clusters/{cluster_id}")

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTACTS
    # ═══════════════════════════════════════════════════════════════════════════

    def list_contacts(self, cluster_id: Optional[int] = None) -> List[ContactResponse]:
        params = {"clusterId": cluster_id} if cluster_id is not None else None
        return [ContactResponse.model_validate(c) for c in self._request("GET", "/contacts", params=params)]

    def get_contact(self, contact_id: int) -> ContactResponse:
        return ContactResponse.model_validate(self._request("GET", f"/contacts/{contact_id}"))

    def create_contact(self, **fields: Any) -> ContactResponse:
        return ContactResponse.model_validate(self._request("POST", "/contacts", json=fields))

    def update_contact(self, contact_id: int, **fields: Any) -> ContactResponse:
        return ContactResponse.model_validate(
            self._request("PATCH", f"/contacts/{contact_id}", json=fields)
        )

    def delete_contact(self, contact_id: int) -> None:
        self._request("DELETE", f"/contacts/{contact_id}")

    # ═══════════════════════════════════════════════════════════════════════════
    # CONNECTIONS / NETWORK
    # ═══════════════════════════════════════════════════════════════════════════

    def list_connections(self) -> List[ConnectionResponse]:
        return [ConnectionResponse.model_validate(c) for c in self._request("GET", "/connections")]

    def create_connection(self, **fields: Any) -> ConnectionResponse:
        return ConnectionResponse.model_validate(self._request("POST", "/connections", json=fields))

    def delete_connection(self, connection_id: int) -> None:
        self._request("DELETE", f"/connections/{connection_id}")

    def get_network(self) -> NetworkResponse:
        return NetworkResponse.model_validate(self._request("GET", "/network"))

    def fetch(self, path: str) -> Any:
        """
        GET an API path as raw JSON, e.g. ``/api/network``.

        Used by the query cache, whose keys are full API paths.
        """
        if self.api_prefix and path.startswith(self.api_prefix):
            path = path[len(self.api_prefix):]
        return self._request("GET", path)

    # ═══════════════════════════════════════════════════════════════════════════
    # TRANSPORT
    # ═══════════════════════════════════════════════════════════════════════════

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body (None for 204).

        Raises:
            ApiError: If the server answers with a non-2xx status
        """
        url = f"{self.api_prefix}{path}"
        response = self.client.request(method, url, json=json, params=params)

        if response.status_code >= 400:
            raise self._error_from(response)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_from(response: httpx.Response) -> ApiError:
        message = response.reason_phrase or "Request failed"
        code = None
        details = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or message
            code = body.get("code")
            details = body.get("details")

        logger.warning(
            "API request failed",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            message=message,
        )
        return ApiError(response.status_code, message, code=code, details=details)
