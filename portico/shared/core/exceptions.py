"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    PorticoException (base)
       │
       ├── ValidationError (400)        ← Invalid input, unknown referenced entity
       ├── NotFoundError (404)          ← Resource not found
       │      ├── ClusterNotFoundError
       │      ├── ContactNotFoundError
       │      └── ConnectionNotFoundError
       └── ConflictError (409)          ← Resource already exists
              └── DuplicateResourceError
                     └── DuplicateClusterNameError

Usage:
======
    from portico.shared.core.exceptions import NotFoundError, ValidationError

    raise ClusterNotFoundError(cluster_id)
    # Results in: {"message": "Cluster with id '7' not found", "code": "NOT_FOUND"}

    raise ValidationError("Specified cluster does not exist", details={"clusterId": 99})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "message": "Cluster with id '7' not found",
        "code": "NOT_FOUND"
    }
"""

from typing import Any, Optional


class PorticoException(Exception):
    """
    Base exception for all Portico application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with message, code and (when present) details
        """
        body: dict[str, Any] = {
            "message": self.message,
            "code": self.error_code,
        }
        if self.details:
            body["details"] = self.details
        return body


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PorticoException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation or references an entity
    that does not exist.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(PorticoException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Contact", 12)
        # Message: "Contact with id '12' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ClusterNotFoundError(NotFoundError):
    """Cluster not found error."""

    def __init__(self, cluster_id: int) -> None:
        super().__init__(resource="Cluster", resource_id=cluster_id)


class ContactNotFoundError(NotFoundError):
    """Contact not found error."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(resource="Contact", resource_id=contact_id)


class ConnectionNotFoundError(NotFoundError):
    """Connection not found error."""

    def __init__(self, connection_id: int) -> None:
        super().__init__(resource="Connection", resource_id=connection_id)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(PorticoException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


class DuplicateClusterNameError(DuplicateResourceError):
    """A cluster with the same (case-insensitive) name already exists."""

    def __init__(self, name: str, existing_id: int) -> None:
        super().__init__(
            message=f"A cluster named '{name}' already exists",
            details={"name": name, "existingId": existing_id},
        )
