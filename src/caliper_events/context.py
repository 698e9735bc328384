"""JSON-LD context handles.

The context is carried through to ``@context`` verbatim; nothing here
fetches or expands it.
"""

from __future__ import annotations

from dataclasses import dataclass

CALIPER_V1P1_CONTEXT = "http://purl.imsglobal.org/ctx/caliper/v1p1"


class JsonldContext:
    """Marker base for anything that can sit in an event's ``@context``."""

    def to_json_value(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class JsonldStringContext(JsonldContext):
    """A context given as a single IRI string."""

    iri: str

    @classmethod
    def default(cls) -> JsonldStringContext:
        return cls(CALIPER_V1P1_CONTEXT)

    def to_json_value(self) -> str:
        return self.iri
