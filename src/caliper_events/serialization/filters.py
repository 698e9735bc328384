"""Named property filters.

An object opts into filtering by carrying a ``filter_id``. At serialization
time the id is looked up in a ``FilterProvider``; the policy found there
decides which JSON properties of the object are written. Looking up an id
that was never registered is an error unless the provider is told
otherwise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from ..exceptions import UnknownFilterError
from ..logging_config import get_logger

logger = get_logger(__name__)


class FilterPolicy(ABC):
    """Decides, per JSON property name, whether the property is written."""

    @abstractmethod
    def include(self, name: str) -> bool:
        ...


class SerializeAllPolicy(FilterPolicy):
    def include(self, name: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "SerializeAllPolicy()"


class IncludeOnlyPolicy(FilterPolicy):
    """Write only the listed properties."""

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)

    def include(self, name: str) -> bool:
        return name in self.names

    def __repr__(self) -> str:
        return f"IncludeOnlyPolicy({sorted(self.names)})"


class ExcludePolicy(FilterPolicy):
    """Write everything except the listed properties."""

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)

    def include(self, name: str) -> bool:
        return name not in self.names

    def __repr__(self) -> str:
        return f"ExcludePolicy({sorted(self.names)})"


@dataclass(frozen=True)
class NamedFilter:
    """A policy paired with the id objects use to refer to it."""

    id: str
    policy: FilterPolicy


SERIALIZE_ALL = NamedFilter("serializeAll", SerializeAllPolicy())


class FilterProvider:
    """Registry mapping filter ids to policies.

    Args:
        fail_on_unknown_id: Raise ``UnknownFilterError`` for unregistered ids
        default_policy: Policy for unregistered ids when not failing
            (None = write every property)
    """

    def __init__(
        self,
        fail_on_unknown_id: bool = True,
        default_policy: Optional[FilterPolicy] = None,
    ):
        self.fail_on_unknown_id = fail_on_unknown_id
        self.default_policy = default_policy
        self._policies: dict[str, FilterPolicy] = {}

    def add_filter(self, filter_id: str, policy: FilterPolicy) -> FilterProvider:
        self._policies[filter_id] = policy
        return self

    def add_named(self, named: NamedFilter) -> FilterProvider:
        return self.add_filter(named.id, named.policy)

    def find_policy(self, filter_id: str) -> Optional[FilterPolicy]:
        return self._policies.get(filter_id)

    def resolve(self, filter_id: str, path: Optional[str] = None) -> Optional[FilterPolicy]:
        """Return the policy for ``filter_id``.

        Raises:
            UnknownFilterError: If the id is unregistered and the provider fails on unknown ids
        """
        policy = self._policies.get(filter_id)
        if policy is not None:
            return policy
        if self.fail_on_unknown_id:
            raise UnknownFilterError(filter_id, path=path)
        logger.warning("No filter registered for id '%s' at %s; using default", filter_id, path)
        return self.default_policy

    def __contains__(self, filter_id: str) -> bool:
        return filter_id in self._policies

    def __len__(self) -> int:
        return len(self._policies)
