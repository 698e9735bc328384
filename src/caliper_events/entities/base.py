"""Base entity types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Optional, Union

from ..exceptions import MissingFieldError
from ..fields import freeze, hidden_field, payload_field


@dataclass(frozen=True)
class Entity:
    """Anything an event can point at: people, applications, resources.

    ``filter_id`` names the filter policy that decides which properties are
    written when the entity is serialized. It is never written itself.
    """

    TYPE: ClassVar[str] = "Entity"

    id: str = ""
    name: Optional[str] = None
    description: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    extensions: Optional[Mapping[str, Any]] = payload_field()
    filter_id: Optional[str] = hidden_field()

    def __post_init__(self) -> None:
        if not self.id:
            raise MissingFieldError(self.TYPE, "id")
        if self.extensions is not None:
            object.__setattr__(self, "extensions", freeze(self.extensions))

    @property
    def type(self) -> str:
        return self.TYPE


# An entity slot may hold the entity itself or just its IRI.
EntityRef = Union[Entity, str]
