"""Structural JSON comparison for fixture-based tests."""

from .jsoncompare import (
    CompareMode,
    FieldFailure,
    JsonCompareResult,
    assert_json_equals,
    compare_json,
)

__all__ = [
    "CompareMode",
    "FieldFailure",
    "JsonCompareResult",
    "compare_json",
    "assert_json_equals",
]
