"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from portico.shared.core.logging import logger, get_logger
    from portico.shared.core.exceptions import PorticoException, NotFoundError

    logger.info("Starting operation", cluster_id=cluster_id)
"""

from portico.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from portico.shared.core.exceptions import (
    PorticoException,
    NotFoundError,
    ClusterNotFoundError,
    ContactNotFoundError,
    ConnectionNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    DuplicateClusterNameError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "PorticoException",
    "NotFoundError",
    "ClusterNotFoundError",
    "ContactNotFoundError",
    "ConnectionNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "DuplicateClusterNameError",
]
