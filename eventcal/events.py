"""Calendar events with a date, an optional time, a type and a priority."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .clock import Time
from .dates import Date

_MAX_HOURS = 24


class EventType(IntEnum):
    MEETING = 0
    REMINDER = 1
    TASK = 2
    CELEBRATION = 3
    IMPORTANT = 4
    OTHER = 5


_TYPE_NAMES = {
    EventType.MEETING: "Meeting",
    EventType.REMINDER: "Reminder",
    EventType.TASK: "Task",
    EventType.CELEBRATION: "Celebration",
    EventType.IMPORTANT: "Important date",
    EventType.OTHER: "Other",
}


@dataclass(frozen=True)
class Event:
    """Something that happens on a date, optionally at a given time."""

    date: Date
    type: EventType
    priority: int
    title: str
    description: str
    time: Time | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", EventType(self.type))
        if self.time is not None and self.time.hours > _MAX_HOURS:
            raise ValueError("Day has only 24 hours (unfortunately)")

    @property
    def has_time(self) -> bool:
        return self.time is not None

    @property
    def type_name(self) -> str:
        return self.event_type_name(self.type)

    @staticmethod
    def event_type_name(type: EventType) -> str:
        """Human-readable name of an event type."""
        return _TYPE_NAMES[EventType(type)]

    def __str__(self) -> str:
        lines = [f"Event: {self.title}", f"Date: {self.date}"]
        if self.time is not None:
            lines.append(f"Time: {self.time}")
        lines += [
            f"Type: {self.type_name}",
            f"Priority: {self.priority}",
            f"Description: {self.description}",
        ]
        return "\n".join(lines) + "\n"