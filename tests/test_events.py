"""Tests for the Event record."""

import dataclasses

import pytest

from caliper_events.actions import Action
from caliper_events.context import JsonldStringContext
from caliper_events.entities import Person
from caliper_events.events import ARCHIVE_KEY, Event, build_archive_extensions
from caliper_events.exceptions import MissingFieldError, UnknownActionError

from conftest import EVENT_ID, utc


def _event(**overrides):
    fields = dict(
        id=EVENT_ID,
        actor=Person(id="https://example.edu/users/554433"),
        action=Action.MODIFIED,
        object="https://example.edu/resources/123",
        event_time=utc(2016, 11, 15, 10, 15),
    )
    fields.update(overrides)
    return Event(**fields)


class TestEventConstruction:
    def test_holds_given_fields(self, modified_event, actor, syllabus):
        assert modified_event.id == EVENT_ID
        assert modified_event.actor == actor
        assert modified_event.action is Action.MODIFIED
        assert modified_event.object == syllabus
        assert modified_event.event_time == utc(2016, 11, 15, 10, 15)
        assert modified_event.type == "Event"

    def test_default_context(self):
        assert _event().context == JsonldStringContext.default()

    def test_action_from_verb_string(self):
        assert _event(action="Modified").action is Action.MODIFIED

    def test_unknown_verb_string(self):
        with pytest.raises(UnknownActionError):
            _event(action="Exploded")

    @pytest.mark.parametrize("action", [5, Action, object()])
    def test_non_action_value(self, action):
        with pytest.raises(UnknownActionError):
            _event(action=action)

    @pytest.mark.parametrize("name", ["id", "actor", "action", "object", "event_time"])
    def test_required_fields(self, name):
        with pytest.raises(MissingFieldError) as exc_info:
            _event(**{name: None})
        assert exc_info.value.field_name == name

    def test_optional_slots_default_to_none(self):
        event = _event()
        assert event.target is None
        assert event.generated is None
        assert event.ed_app is None
        assert event.extensions is None

    def test_immutable(self, modified_event):
        with pytest.raises(dataclasses.FrozenInstanceError):
            modified_event.action = Action.DELETED


class TestExtensions:
    def test_archive_order_preserved(self, modified_event, archive):
        assert list(modified_event.extensions[ARCHIVE_KEY]) == archive

    def test_payload_frozen(self, modified_event):
        with pytest.raises(TypeError):
            modified_event.extensions["extra"] = 1

    def test_caller_list_mutation_does_not_leak(self, archive):
        payload = build_archive_extensions(archive)
        event = _event(extensions=payload)
        payload[ARCHIVE_KEY].clear()
        assert len(event.extensions[ARCHIVE_KEY]) == 2

    def test_build_archive_extensions(self, archive):
        assert build_archive_extensions(archive) == {"archive": archive}
