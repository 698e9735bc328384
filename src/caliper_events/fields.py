"""Dataclass field helpers shared by the event and entity models.

Serialized property names are derived from attribute names
(``date_created`` -> ``dateCreated``). Field metadata overrides the name
or hides a field from JSON output entirely.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import Field, field
from types import MappingProxyType
from typing import Any

JSON_NAME = "json_name"
SERIALIZE = "serialize"


def json_field(name: str, *, default: Any = None, **kwargs: Any) -> Any:
    """Declare a field whose JSON property name is not its camelCased attribute name."""
    if "default_factory" not in kwargs:
        kwargs["default"] = default
    return field(metadata={JSON_NAME: name}, **kwargs)


def hidden_field(default: Any = None) -> Any:
    """Declare a field that never appears in serialized output."""
    return field(default=default, compare=False, metadata={SERIALIZE: False})


def payload_field() -> Any:
    """Declare a free-form payload field (frozen on construction, unhashable)."""
    return field(default=None, hash=False)


def json_name(f: Field) -> str:
    override = f.metadata.get(JSON_NAME)
    if override:
        return override
    head, *rest = f.name.split("_")
    return head + "".join(part.title() for part in rest)


def is_serialized(f: Field) -> bool:
    return f.metadata.get(SERIALIZE, True)


def freeze(value: Any) -> Any:
    """Return a read-only copy of a JSON-like payload.

    Mappings become read-only mappings and lists become tuples; element
    order is kept as given.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value
