"""JSON serialization for events and entities.

Rules applied to every object graph:
- Properties are written in field declaration order, with ``type`` right
  after ``id``.
- Empty values are dropped according to the ``Inclusion`` policy.
- Datetimes are written as ISO-8601 UTC strings with millisecond precision.
- Objects carrying a ``filter_id`` are written through the matching policy
  of the ``FilterProvider``.
- Entities nested in free-form payloads are written as plain JSON objects.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from ..context import JsonldContext
from ..exceptions import SerializationError
from ..fields import is_serialized, json_name
from ..logging_config import get_logger
from .dates import format_date, format_datetime
from .filters import SERIALIZE_ALL, FilterPolicy, FilterProvider

if TYPE_CHECKING:
    from ..config import CaliperConfig

logger = get_logger(__name__)

ROOT_PATH = "$"
# Never subject to filter policies
IDENTITY_PROPERTIES = frozenset({"id", "type"})


class Inclusion(Enum):
    NON_EMPTY = "non_empty"
    NON_NULL = "non_null"
    ALWAYS = "always"


class EventSerializer:
    """Converts events, entities and nested payloads to JSON.

    Args:
        filter_provider: Registry of named filter policies
        inclusion: Which empty values are dropped
        indent: JSON text indentation (None = compact)
    """

    def __init__(
        self,
        filter_provider: Optional[FilterProvider] = None,
        inclusion: Inclusion = Inclusion.NON_EMPTY,
        indent: Optional[int] = None,
    ):
        self.filter_provider = filter_provider if filter_provider is not None else FilterProvider()
        self.inclusion = inclusion
        self.indent = indent

    @classmethod
    def from_config(
        cls, config: CaliperConfig, filter_provider: Optional[FilterProvider] = None
    ) -> EventSerializer:
        """Build a serializer from configuration.

        Without an explicit provider, one is created with the ``serializeAll``
        filter registered and the configured unknown-id behavior.
        """
        if filter_provider is None:
            filter_provider = FilterProvider(
                fail_on_unknown_id=config.fail_on_unknown_filter_id
            ).add_named(SERIALIZE_ALL)
        return cls(
            filter_provider=filter_provider,
            inclusion=Inclusion(config.inclusion),
            indent=config.json_indent,
        )

    def to_dict(self, value: Any) -> Any:
        """Convert ``value`` to plain JSON-compatible Python data."""
        logger.debug("Serializing %s", type(value).__name__)
        return self._convert(value, ROOT_PATH)

    def to_json(self, value: Any) -> str:
        """Convert ``value`` to JSON text."""
        data = self.to_dict(value)
        if self.indent is None:
            return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(data, ensure_ascii=False, indent=self.indent)

    # ── Conversion ──────────────────────────────────────────────────────

    def _convert(self, value: Any, path: str) -> Any:
        if value is None or isinstance(value, (str, bool, int)):
            return value
        if isinstance(value, float):
            if value != value or value in (float("inf"), float("-inf")):
                raise SerializationError(f"Non-finite number {value!r}", path=path)
            return value
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, JsonldContext):
            return value.to_json_value()
        # datetime before date: datetime is a date subclass
        if isinstance(value, datetime):
            return format_datetime(value)
        if isinstance(value, date):
            return format_date(value)
        if is_dataclass(value) and not isinstance(value, type):
            return self._convert_object(value, path)
        if isinstance(value, Mapping):
            return self._convert_mapping(value, path)
        if isinstance(value, (list, tuple)):
            return [self._convert(item, f"{path}[{i}]") for i, item in enumerate(value)]
        raise SerializationError(f"Cannot serialize value of type {type(value).__name__}", path=path)

    def _convert_object(self, obj: Any, path: str) -> dict[str, Any]:
        policy = self._policy_for(obj, path)
        type_name = getattr(type(obj), "TYPE", None)

        result: dict[str, Any] = {}
        for f in fields(obj):
            if not is_serialized(f):
                continue
            name = json_name(f)
            if policy is not None and name not in IDENTITY_PROPERTIES and not policy.include(name):
                continue
            converted = self._convert(getattr(obj, f.name), f"{path}.{name}")
            if self._keep(converted):
                result[name] = converted
            if name == "id" and type_name:
                result["type"] = type_name

        if type_name and "type" not in result:
            result = {"type": type_name, **result}
        return result

    def _convert_mapping(self, mapping: Mapping, path: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in mapping.items():
            if not isinstance(key, str):
                raise SerializationError(f"Mapping key {key!r} is not a string", path=path)
            converted = self._convert(item, f"{path}.{key}")
            if self._keep(converted):
                result[key] = converted
        return result

    def _policy_for(self, obj: Any, path: str) -> Optional[FilterPolicy]:
        filter_id = getattr(obj, "filter_id", None)
        if filter_id is None:
            return None
        return self.filter_provider.resolve(filter_id, path=path)

    def _keep(self, value: Any) -> bool:
        if self.inclusion is Inclusion.ALWAYS:
            return True
        if value is None:
            return False
        if self.inclusion is Inclusion.NON_EMPTY:
            return not (isinstance(value, (str, dict, list)) and len(value) == 0)
        return True
