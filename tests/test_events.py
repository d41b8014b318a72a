import dataclasses

import pytest

from eventcal.clock import Time
from eventcal.dates import Date
from eventcal.events import Event, EventType


def test_str_without_time():
    event = Event(Date(13, 2, 2027), EventType.OTHER, 5, "Team building", "Fun activities together")
    assert str(event) == (
        "Event: Team building\n"
        "Date: 13 Feb 2027\n"
        "Type: Other\n"
        "Priority: 5\n"
        "Description: Fun activities together\n"
    )


def test_str_with_time_includes_time_line():
    event = Event(
        Date(12, 1, 2025), EventType.MEETING, 1, "Project meeting",
        "Discuss project status", Time(12, 23, 5),
    )
    text = str(event)
    assert f"Time: {Time(12, 23, 5)}\n" in text
    assert text.index("Date:") < text.index("Time:") < text.index("Type:")
    assert "Type: Meeting\n" in text


def test_has_time():
    with_time = Event(Date(1, 1, 2025), EventType.TASK, 2, "a", "b", Time(0, 0, 1))
    without_time = Event(Date(1, 1, 2025), EventType.TASK, 2, "a", "b")
    assert with_time.has_time is True
    assert without_time.has_time is False


def test_too_many_hours_rejected():
    with pytest.raises(ValueError):
        Event(Date(1, 1, 2025), EventType.TASK, 1, "t", "d", Time(0, 0, 25))


def test_twenty_four_hours_allowed():
    event = Event(Date(1, 1, 2025), EventType.TASK, 1, "t", "d", Time(0, 0, 24))
    assert event.time.hours == 24


def test_type_names():
    assert Event.event_type_name(EventType.IMPORTANT) == "Important date"
    assert Event.event_type_name(EventType.CELEBRATION) == "Celebration"


def test_integer_type_is_coerced():
    event = Event(Date(1, 1, 2025), 4, 1, "t", "d")
    assert event.type is EventType.IMPORTANT
    assert event.type_name == "Important date"


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Event(Date(1, 1, 2025), 42, 1, "t", "d")


def test_events_are_immutable_and_comparable():
    first = Event(Date(1, 1, 2025), EventType.TASK, 1, "t", "d")
    second = Event(Date(1, 1, 2025), EventType.TASK, 1, "t", "d")
    assert first == second
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.title = "other"