"""Digital resources.

A run of ``Document`` instances sharing a base IRI but carrying distinct
``version`` labels describes the revision history of one resource.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from .base import Entity, EntityRef


@dataclass(frozen=True)
class DigitalResource(Entity):
    TYPE: ClassVar[str] = "DigitalResource"

    media_type: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    is_part_of: Optional[EntityRef] = None
    date_published: Optional[datetime] = None
    version: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "keywords", tuple(self.keywords))


@dataclass(frozen=True)
class Document(DigitalResource):
    TYPE: ClassVar[str] = "Document"
