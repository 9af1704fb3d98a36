"""
API Handlers

Route handlers for the Portico API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from portico.api.handlers import (
    cluster_handler,
    connection_handler,
    contact_handler,
    health_handler,
    network_handler,
)

__all__ = [
    "cluster_handler",
    "connection_handler",
    "contact_handler",
    "health_handler",
    "network_handler",
]
