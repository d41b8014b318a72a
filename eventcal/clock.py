"""Time of day as hours, minutes and seconds."""

from __future__ import annotations

from functools import total_ordering

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 3600
_HOURS_PER_DAY = 24
_SECONDS_PER_DAY = _SECONDS_PER_HOUR * _HOURS_PER_DAY


@total_ordering
class Time:
    """An immutable time value; surplus seconds and minutes carry upward.

    Hours are not wrapped by the constructor, so a value may exceed a day.
    """

    __slots__ = ("_hours", "_minutes", "_seconds")

    def __init__(self, seconds: int = 0, minutes: int = 0, hours: int = 0) -> None:
        if seconds < 0 or minutes < 0 or hours < 0:
            raise ValueError("Time components must not be negative")
        carried_minutes = minutes + seconds // _SECONDS_PER_MINUTE
        self._hours = hours + carried_minutes // 60
        self._minutes = carried_minutes % 60
        self._seconds = seconds % _SECONDS_PER_MINUTE

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    def with_hours(self, hours: int) -> Time:
        """Return the time with the hours replaced."""
        if hours < 0:
            raise ValueError("Time components must not be negative")
        result = Time(self._seconds, self._minutes)
        result._hours = hours
        return result

    def with_minutes(self, minutes: int) -> Time:
        """Return the time with the minutes replaced, carrying any overflow."""
        return Time(self._seconds, minutes, self._hours)

    def with_seconds(self, seconds: int) -> Time:
        """Return the time with the seconds replaced, carrying any overflow."""
        return Time(seconds, self._minutes, self._hours)

    def to_seconds(self) -> int:
        return self._seconds + self._minutes * 60 + self._hours * _SECONDS_PER_HOUR

    @classmethod
    def from_seconds(cls, seconds: int) -> Time:
        """Build a time of day from a second count, wrapping at a full day."""
        if seconds < 0:
            raise ValueError("Seconds must not be negative")
        return cls(
            seconds % 60,
            (seconds // 60) % 60,
            (seconds // _SECONDS_PER_HOUR) % _HOURS_PER_DAY,
        )

    def next_second(self) -> Time:
        return self.with_seconds(self._seconds + 1)

    def previous_second(self) -> Time:
        return self.from_seconds((self.to_seconds() - 1) % _SECONDS_PER_DAY)

    def __add__(self, seconds: int) -> Time:
        if not isinstance(seconds, int):
            return NotImplemented
        if seconds < 0:
            raise ValueError("Seconds to add must not be negative")
        return Time(self._seconds + seconds, self._minutes, self._hours)

    def __sub__(self, seconds: int) -> Time:
        if not isinstance(seconds, int):
            return NotImplemented
        if seconds < 0:
            raise ValueError("Seconds to subtract must not be negative")
        total = self.to_seconds()
        if total < seconds:
            raise ValueError("Cannot subtract more seconds than the time holds")
        return self.from_seconds(total - seconds)

    def _key(self) -> tuple[int, int, int]:
        return (self._hours, self._minutes, self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Time({self._seconds}, {self._minutes}, {self._hours})"

    def __str__(self) -> str:
        return f"{self._hours}h:{self._minutes}m:{self._seconds}s"