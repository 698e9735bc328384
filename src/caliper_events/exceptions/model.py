"""Event model exceptions: missing fields, unknown verbs."""

from .base import CaliperError


class ModelError(CaliperError):
    """Base class for errors raised while building model objects."""

    pass


class MissingFieldError(ModelError):
    """Raised when a required field is absent at construction time."""

    def __init__(self, type_name: str, field_name: str):
        super().__init__(
            f"{type_name} requires '{field_name}'",
            details={"type": type_name, "field": field_name},
        )
        self.type_name = type_name
        self.field_name = field_name


class UnknownActionError(ModelError):
    """Raised when a verb string does not name a known action."""

    def __init__(self, value: str):
        super().__init__(f"Unknown action: {value!r}", details={"value": value})
        self.value = value
