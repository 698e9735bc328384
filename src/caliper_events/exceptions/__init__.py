"""Exception hierarchy for caliper-events."""

from .base import CaliperError
from .config import ConfigurationError, InvalidConfigError
from .fixtures import (
    FixtureError,
    FixtureFormatError,
    FixtureNotFoundError,
    JsonMismatchError,
)
from .model import MissingFieldError, ModelError, UnknownActionError
from .serialization import SerializationError, UnknownFilterError

__all__ = [
    "CaliperError",
    "ModelError",
    "MissingFieldError",
    "UnknownActionError",
    "SerializationError",
    "UnknownFilterError",
    "FixtureError",
    "FixtureNotFoundError",
    "FixtureFormatError",
    "JsonMismatchError",
    "ConfigurationError",
    "InvalidConfigError",
]
