"""
Enums used across the application.
"""

from enum import Enum


class EndpointType(str, Enum):
    """Kind of entity a Connection endpoint (or network node) refers to."""

    CLUSTER = "cluster"
    CONTACT = "contact"


# The projection reuses the endpoint vocabulary for node types
NodeType = EndpointType
