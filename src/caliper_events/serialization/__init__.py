"""Event serialization: inclusion rules, date rendering and named filters."""

from .dates import format_date, format_datetime
from .filters import (
    SERIALIZE_ALL,
    ExcludePolicy,
    FilterPolicy,
    FilterProvider,
    IncludeOnlyPolicy,
    NamedFilter,
    SerializeAllPolicy,
)
from .serializer import EventSerializer, Inclusion

__all__ = [
    "EventSerializer",
    "Inclusion",
    "FilterPolicy",
    "FilterProvider",
    "NamedFilter",
    "SerializeAllPolicy",
    "IncludeOnlyPolicy",
    "ExcludePolicy",
    "SERIALIZE_ALL",
    "format_datetime",
    "format_date",
]
