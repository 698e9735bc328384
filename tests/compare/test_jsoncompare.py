"""Tests for structural JSON comparison."""

import pytest

from caliper_events.compare import CompareMode, assert_json_equals, compare_json
from caliper_events.exceptions import JsonMismatchError

EXPECTED = {
    "id": "urn:event",
    "extensions": {
        "archive": [
            {"id": "urn:doc?version=2", "version": "2"},
            {"id": "urn:doc?version=1", "version": "1"},
        ]
    },
}


def _copy(value):
    if isinstance(value, dict):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(v) for v in value]
    return value


class TestMatching:
    def test_identical(self):
        assert compare_json(EXPECTED, _copy(EXPECTED)).passed

    def test_key_order_ignored(self):
        assert compare_json('{"a": 1, "b": 2}', '{"b": 2, "a": 1}').passed

    def test_text_and_values_mix(self):
        assert compare_json('{"a": [1, 2]}', {"a": [1, 2]}).passed

    def test_int_equals_float(self):
        assert compare_json({"n": 1}, {"n": 1.0}).passed

    def test_bool_not_number(self):
        result = compare_json({"flag": True}, {"flag": 1})
        assert result.paths == ["flag"]


class TestFailures:
    def test_value_mismatch_path(self):
        actual = _copy(EXPECTED)
        actual["extensions"]["archive"][1]["version"] = "9"
        result = compare_json(EXPECTED, actual)
        assert not result.passed
        assert result.paths == ["extensions.archive[1].version"]
        assert result.failures[0].kind == "mismatch"

    def test_missing_field(self):
        actual = _copy(EXPECTED)
        del actual["extensions"]["archive"][0]["version"]
        result = compare_json(EXPECTED, actual)
        assert [(f.path, f.kind) for f in result.failures] == [
            ("extensions.archive[0].version", "missing")
        ]

    def test_extra_field_rejected_when_non_extensible(self):
        actual = _copy(EXPECTED)
        actual["extensions"]["archive"][1]["dateModified"] = "2016-11-13T11:00:00.000Z"
        result = compare_json(EXPECTED, actual, CompareMode.NON_EXTENSIBLE)
        assert [(f.path, f.kind) for f in result.failures] == [
            ("extensions.archive[1].dateModified", "unexpected")
        ]

    def test_extra_field_accepted_when_lenient(self):
        actual = _copy(EXPECTED)
        actual["extra"] = True
        assert compare_json(EXPECTED, actual, CompareMode.LENIENT).passed

    def test_array_order_matters(self):
        actual = _copy(EXPECTED)
        actual["extensions"]["archive"].reverse()
        result = compare_json(EXPECTED, actual, CompareMode.LENIENT)
        assert "extensions.archive[0].version" in result.paths

    def test_extra_array_element(self):
        actual = _copy(EXPECTED)
        actual["extensions"]["archive"].append({"id": "urn:doc?version=0"})
        result = compare_json(EXPECTED, actual, CompareMode.LENIENT)
        assert [(f.path, f.kind) for f in result.failures] == [("extensions.archive", "length")]

    def test_type_mismatch(self):
        result = compare_json({"a": {"b": 1}}, {"a": [1]})
        assert result.failures[0].kind == "mismatch"

    def test_root_mismatch_path(self):
        result = compare_json([1], {"a": 1})
        assert "$: expected" in result.message

    def test_message_lists_each_path(self):
        result = compare_json({"a": 1, "b": 2}, {"a": 3})
        assert "2 difference(s)" in result.message
        assert "a: expected 1 but got 3" in result.message
        assert "b: expected 2 but none found" in result.message

    def test_invalid_text(self):
        with pytest.raises(ValueError):
            compare_json("{not json", {})


class TestAssertJsonEquals:
    def test_passes(self):
        assert assert_json_equals(EXPECTED, _copy(EXPECTED)).passed

    def test_raises_assertion_error(self):
        with pytest.raises(AssertionError) as exc_info:
            assert_json_equals({"a": 1}, {"a": 2})
        assert isinstance(exc_info.value, JsonMismatchError)
        assert exc_info.value.result.paths == ["a"]
        assert "a: expected 1 but got 2" in str(exc_info.value)
