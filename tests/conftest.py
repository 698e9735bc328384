"""Shared test fixtures for caliper-events."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from caliper_events.actions import Action
from caliper_events.context import JsonldStringContext
from caliper_events.entities import Document, Person
from caliper_events.events import Event, build_archive_extensions
from caliper_events.serialization import SERIALIZE_ALL

TESTS_DIR = Path(__file__).parent

BASE_IRI = "https://example.edu"
SECTION_IRI = f"{BASE_IRI}/terms/201601/courses/7/sections/1"
EVENT_ID = "urn:uuid:5973dcd9-3126-4dcc-8fd8-8153a155361c"


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user-level config files and CALIPER_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("CALIPER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def tests_dir():
    return TESTS_DIR


@pytest.fixture
def actor():
    return Person(id=f"{BASE_IRI}/users/554433")


@pytest.fixture
def syllabus():
    """Current revision of the course syllabus."""
    return Document(
        id=f"{SECTION_IRI}/resources/123?version=3",
        name="Course Syllabus",
        date_created=utc(2016, 11, 12, 7, 15),
        date_modified=utc(2016, 11, 15, 10, 15),
        version="3",
    )


@pytest.fixture
def archive():
    """Prior revisions, newest first."""
    doc2 = Document(
        id=f"{SECTION_IRI}/resources/123?version=2",
        date_created=utc(2016, 11, 12, 7, 15),
        date_modified=utc(2016, 11, 13, 11, 0),
        version="2",
        filter_id=SERIALIZE_ALL.id,
    )
    doc1 = Document(
        id=f"{SECTION_IRI}/resources/123?version=1",
        date_created=utc(2016, 11, 12, 7, 15),
        version="1",
        filter_id=SERIALIZE_ALL.id,
    )
    return [doc2, doc1]


@pytest.fixture
def modified_event(actor, syllabus, archive):
    return Event(
        context=JsonldStringContext.default(),
        id=EVENT_ID,
        actor=actor,
        action=Action.MODIFIED,
        object=syllabus,
        event_time=utc(2016, 11, 15, 10, 15),
        extensions=build_archive_extensions(archive),
    )
