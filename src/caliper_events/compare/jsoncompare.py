"""Structural comparison of JSON documents.

Objects are compared key by key regardless of key order. Arrays are
compared element by element and must have the same length and order.
``CompareMode.NON_EXTENSIBLE`` additionally rejects object keys present in
the actual document but absent from the expected one; ``LENIENT`` accepts
them, so the expected document only has to be a subset.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..exceptions import JsonMismatchError
from ..logging_config import get_logger

logger = get_logger(__name__)

_MISSING = object()


class CompareMode(Enum):
    NON_EXTENSIBLE = "non_extensible"
    LENIENT = "lenient"

    @property
    def extensible(self) -> bool:
        return self is CompareMode.LENIENT


@dataclass
class FieldFailure:
    """One difference between the expected and actual documents."""

    path: str
    kind: str  # "missing" | "unexpected" | "mismatch" | "length"
    expected: Any = None
    actual: Any = None

    def describe(self) -> str:
        where = self.path or "$"
        if self.kind == "missing":
            return f"{where}: expected {_render(self.expected)} but none found"
        if self.kind == "unexpected":
            return f"{where}: unexpected {_render(self.actual)}"
        if self.kind == "length":
            return f"{where}: expected {self.expected} values but got {self.actual}"
        return f"{where}: expected {_render(self.expected)} but got {_render(self.actual)}"


@dataclass
class JsonCompareResult:
    mode: CompareMode
    failures: list[FieldFailure] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.failures]

    @property
    def message(self) -> str:
        if self.passed:
            return "JSON documents match"
        lines = [f"{len(self.failures)} difference(s) ({self.mode.value}):"]
        lines.extend(f"  {f.describe()}" for f in self.failures)
        return "\n".join(lines)


def compare_json(
    expected: Any, actual: Any, mode: CompareMode = CompareMode.NON_EXTENSIBLE
) -> JsonCompareResult:
    """Compare two JSON documents given as text or parsed values.

    Raises:
        ValueError: If either argument is text that is not valid JSON
    """
    result = JsonCompareResult(mode=mode)
    _compare("", _parse(expected), _parse(actual), mode, result.failures)
    logger.debug("Compared JSON (%s): %d difference(s)", mode.value, len(result.failures))
    return result


def assert_json_equals(
    expected: Any, actual: Any, mode: CompareMode = CompareMode.NON_EXTENSIBLE
) -> JsonCompareResult:
    """Like ``compare_json`` but raise ``JsonMismatchError`` on any difference."""
    result = compare_json(expected, actual, mode)
    if not result.passed:
        raise JsonMismatchError(result)
    return result


def _parse(document: Any) -> Any:
    if isinstance(document, (str, bytes)):
        return json.loads(document)
    return document


def _compare(path: str, expected: Any, actual: Any, mode: CompareMode, out: list[FieldFailure]) -> None:
    if isinstance(expected, dict):
        if not isinstance(actual, dict):
            out.append(FieldFailure(path, "mismatch", expected, actual))
            return
        for key, value in expected.items():
            child = _key_path(path, key)
            other = actual.get(key, _MISSING)
            if other is _MISSING:
                out.append(FieldFailure(child, "missing", expected=value))
            else:
                _compare(child, value, other, mode, out)
        if not mode.extensible:
            for key, value in actual.items():
                if key not in expected:
                    out.append(FieldFailure(_key_path(path, key), "unexpected", actual=value))
        return

    if isinstance(expected, list):
        if not isinstance(actual, list):
            out.append(FieldFailure(path, "mismatch", expected, actual))
            return
        if len(expected) != len(actual):
            out.append(FieldFailure(path, "length", len(expected), len(actual)))
            return
        for i, (left, right) in enumerate(zip(expected, actual)):
            _compare(f"{path}[{i}]", left, right, mode, out)
        return

    if not _scalars_equal(expected, actual):
        out.append(FieldFailure(path, "mismatch", expected, actual))


def _scalars_equal(expected: Any, actual: Any) -> bool:
    # bool is an int subclass; True must not equal 1
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    if isinstance(actual, (dict, list)):
        return False
    return expected == actual


def _key_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _render(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
