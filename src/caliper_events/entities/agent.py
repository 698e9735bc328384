"""Agents: the actors of an event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .base import Entity


@dataclass(frozen=True)
class Agent(Entity):
    TYPE: ClassVar[str] = "Agent"


@dataclass(frozen=True)
class Person(Agent):
    """A human actor. Usually just an identifier."""

    TYPE: ClassVar[str] = "Person"


@dataclass(frozen=True)
class SoftwareApplication(Agent):
    """The platform or tool an event originated from."""

    TYPE: ClassVar[str] = "SoftwareApplication"

    version: Optional[str] = None
