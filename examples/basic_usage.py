#!/usr/bin/env python3
"""
Example: Build a Modified event with an archive of prior revisions and print its JSON
"""

from datetime import datetime, timezone

from caliper_events import (
    SERIALIZE_ALL,
    Action,
    Document,
    Event,
    EventSerializer,
    FilterProvider,
    Person,
    build_archive_extensions,
)
from caliper_events.logging_config import setup_logging

setup_logging(verbose=True)

section = "https://example.edu/terms/201601/courses/7/sections/1"
created = datetime(2016, 11, 12, 7, 15, tzinfo=timezone.utc)

revisions = [
    Document(
        id=f"{section}/resources/123?version=2",
        date_created=created,
        date_modified=datetime(2016, 11, 13, 11, 0, tzinfo=timezone.utc),
        version="2",
        filter_id=SERIALIZE_ALL.id,
    ),
    Document(
        id=f"{section}/resources/123?version=1",
        date_created=created,
        version="1",
        filter_id=SERIALIZE_ALL.id,
    ),
]

event = Event(
    id="urn:uuid:5973dcd9-3126-4dcc-8fd8-8153a155361c",
    actor=Person(id="https://example.edu/users/554433"),
    action=Action.MODIFIED,
    object=Document(
        id=f"{section}/resources/123?version=3",
        name="Course Syllabus",
        date_created=created,
        date_modified=datetime(2016, 11, 15, 10, 15, tzinfo=timezone.utc),
        version="3",
    ),
    event_time=datetime(2016, 11, 15, 10, 15, tzinfo=timezone.utc),
    extensions=build_archive_extensions(revisions),
)

serializer = EventSerializer(
    filter_provider=FilterProvider(fail_on_unknown_id=True).add_named(SERIALIZE_ALL),
    indent=2,
)
print(serializer.to_json(event))
