"""
Error types for resource stores.

The sync layer raises none of these on its own account except for invalid
input; transport failures pass through it untouched.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ResourceStoreException(Exception):
    """Base exception for resource stores."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class TransportError(ResourceStoreException):
    """Failure reported by the transport: network, server or decoding."""

    def __init__(self, endpoint: str, message: str = "Transport error", details: Optional[Dict[str, Any]] = None):
        super().__init__("TRANSPORT_ERROR", f"{endpoint}: {message}", details)
        self.endpoint = endpoint

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")


class EntityNotFoundError(TransportError):
    """The server answered 404 for an entity URL."""

    def __init__(self, endpoint: str, entity_id: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(endpoint, f"entity {entity_id!r} not found", {"status_code": 404, **(details or {})})
        self.code = "ENTITY_NOT_FOUND"
        self.entity_id = entity_id


class ValidationError(ResourceStoreException):
    """Invalid command payload or malformed entity."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class MissingListError(ResourceStoreException):
    """A list index operation needed an established sequence and found none."""

    def __init__(self, group_key: str):
        super().__init__(
            "MISSING_LIST_ERROR",
            f"No list established for group key {group_key!r}",
            {"group_key": group_key}
        )
        self.group_key = group_key
