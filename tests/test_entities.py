"""Tests for the entity models."""

import dataclasses
from datetime import datetime, timezone

import pytest

from caliper_events.context import CALIPER_V1P1_CONTEXT, JsonldStringContext
from caliper_events.entities import (
    DigitalResource,
    Document,
    Entity,
    Person,
    SoftwareApplication,
)
from caliper_events.exceptions import MissingFieldError


class TestEntity:
    def test_type_labels(self):
        assert Person(id="urn:p").type == "Person"
        assert Document(id="urn:d").type == "Document"
        assert DigitalResource(id="urn:r").type == "DigitalResource"
        assert SoftwareApplication(id="urn:a").type == "SoftwareApplication"

    def test_person_needs_only_id(self):
        person = Person(id="https://example.edu/users/554433")
        assert person.name is None
        assert person.date_created is None

    def test_missing_id_raises(self):
        with pytest.raises(MissingFieldError) as exc_info:
            Document(version="1")
        assert exc_info.value.type_name == "Document"
        assert exc_info.value.field_name == "id"

    def test_frozen(self):
        doc = Document(id="urn:d", version="1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.version = "2"

    def test_extensions_are_read_only(self):
        entity = Entity(id="urn:e", extensions={"tags": ["a", "b"]})
        assert entity.extensions["tags"] == ("a", "b")
        with pytest.raises(TypeError):
            entity.extensions["tags"] = []

    def test_filter_id_not_part_of_equality(self):
        assert Document(id="urn:d", filter_id="serializeAll") == Document(id="urn:d")

    def test_revision_history(self):
        created = datetime(2016, 11, 12, 7, 15, tzinfo=timezone.utc)
        revisions = [
            Document(id=f"urn:doc?version={v}", date_created=created, version=str(v))
            for v in (3, 2, 1)
        ]
        assert [r.version for r in revisions] == ["3", "2", "1"]
        assert len({r.id.split("?")[0] for r in revisions}) == 1

    def test_keywords_become_tuple(self):
        doc = Document(id="urn:d", keywords=["syllabus", "fall"])
        assert doc.keywords == ("syllabus", "fall")


class TestJsonldContext:
    def test_default(self):
        assert JsonldStringContext.default().to_json_value() == CALIPER_V1P1_CONTEXT

    def test_custom(self):
        assert JsonldStringContext("urn:ctx").to_json_value() == "urn:ctx"
