"""Error kinds raised by the pantry manager and its storage."""
from typing import Any, Mapping, Optional


class PantryError(Exception):
    """Base class for recoverable pantry errors.

    Attributes:
        message: human-readable message, safe to show in a notice
        details: optional mapping with extra context (field errors, ids)
        http_status: suggested HTTP status code for the API layer
    """

    http_status = 400

    def __init__(self, message: str = "Pantry error", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ValidationError(PantryError):
    """Raised when a required item field is missing or malformed."""

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details)


class NotFoundError(PantryError):
    """Raised when an operation targets an item id that does not exist."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details)


class PersistenceError(PantryError):
    """Raised when the key-value store rejects a write (quota, I/O)."""

    http_status = 507

    def __init__(self, message: str = "Storage write failed", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details)
