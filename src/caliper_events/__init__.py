"""
caliper-events - Caliper-style analytics events

Immutable event and entity models, JSON serialization with named field
filters, and structural JSON comparison for fixture-driven tests.
"""

__version__ = "0.1.0"

from .actions import Action
from .compare import CompareMode, assert_json_equals, compare_json
from .config import CaliperConfig, load_config
from .context import JsonldContext, JsonldStringContext
from .entities import Document, Entity, Person, SoftwareApplication
from .events import Event, build_archive_extensions
from .serialization import SERIALIZE_ALL, EventSerializer, FilterProvider, Inclusion

__all__ = [
    "Event",
    "build_archive_extensions",
    "Action",
    "JsonldContext",
    "JsonldStringContext",
    "Entity",
    "Person",
    "SoftwareApplication",
    "Document",
    "EventSerializer",
    "FilterProvider",
    "Inclusion",
    "SERIALIZE_ALL",
    "CompareMode",
    "compare_json",
    "assert_json_equals",
    "CaliperConfig",
    "load_config",
]
