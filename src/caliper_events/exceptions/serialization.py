"""Serialization exceptions: unsupported values and unresolved filter ids."""

from typing import Optional

from .base import CaliperError


class SerializationError(CaliperError):
    """Raised when a value cannot be rendered as JSON."""

    def __init__(self, message: str, path: Optional[str] = None):
        details = {"path": path} if path else None
        super().__init__(message, details=details)
        self.path = path


class UnknownFilterError(SerializationError):
    """Raised when an object names a filter id with no registered policy."""

    def __init__(self, filter_id: str, path: Optional[str] = None):
        super().__init__(f"No filter policy registered for id '{filter_id}'", path=path)
        self.details["filter_id"] = filter_id
        self.filter_id = filter_id
