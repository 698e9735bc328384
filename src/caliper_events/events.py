"""The Caliper event record.

An event is assembled once from keyword arguments and never mutated:

    event = Event(
        id="urn:uuid:...",
        actor=Person(id="https://example.edu/users/554433"),
        action=Action.MODIFIED,
        object=document,
        event_time=datetime(2016, 11, 15, 10, 15, tzinfo=timezone.utc),
        extensions=build_archive_extensions([v2, v1]),
    )
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Optional, Union

from .actions import Action
from .context import JsonldContext, JsonldStringContext
from .entities import Entity, EntityRef, SoftwareApplication
from .exceptions import MissingFieldError, UnknownActionError
from .fields import freeze, json_field, payload_field

ARCHIVE_KEY = "archive"


@dataclass(frozen=True)
class Event:
    """A record of an actor performing an action on an object at a point in time."""

    TYPE: ClassVar[str] = "Event"
    REQUIRED: ClassVar[tuple[str, ...]] = ("id", "actor", "action", "object", "event_time")

    context: JsonldContext = json_field(
        "@context", default_factory=JsonldStringContext.default
    )
    id: Optional[str] = None
    actor: Optional[EntityRef] = None
    action: Optional[Union[Action, str]] = None
    object: Optional[EntityRef] = None
    event_time: Optional[datetime] = None
    target: Optional[EntityRef] = None
    generated: Optional[EntityRef] = None
    ed_app: Optional[Union[SoftwareApplication, str]] = None
    extensions: Optional[Mapping[str, Any]] = payload_field()

    def __post_init__(self) -> None:
        for name in self.REQUIRED:
            if getattr(self, name) in (None, ""):
                raise MissingFieldError(self.TYPE, name)
        if isinstance(self.action, str):
            object.__setattr__(self, "action", Action.from_value(self.action))
        elif not isinstance(self.action, Action):
            raise UnknownActionError(repr(self.action))
        if self.extensions is not None:
            object.__setattr__(self, "extensions", freeze(self.extensions))

    @property
    def type(self) -> str:
        return self.TYPE


def build_archive_extensions(revisions: Sequence[Entity]) -> dict[str, Any]:
    """Wrap prior revisions of a resource as an ``archive`` extension.

    Revisions are kept in the order given, conventionally newest first.
    """
    return {ARCHIVE_KEY: list(revisions)}
