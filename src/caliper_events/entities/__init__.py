"""Entity model: agents and resources."""

from .agent import Agent, Person, SoftwareApplication
from .base import Entity, EntityRef
from .resource import DigitalResource, Document

__all__ = [
    "Entity",
    "EntityRef",
    "Agent",
    "Person",
    "SoftwareApplication",
    "DigitalResource",
    "Document",
]
