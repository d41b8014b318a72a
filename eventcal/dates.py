"""Calendar dates counted from the start of 1970."""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

EPOCH_YEAR = 1970
_EPOCH_DAYS = 719527
_MONTHS_PER_YEAR = 12
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_WEEKDAY_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


@total_ordering
class Date:
    """An immutable day, month and year no earlier than 1 Jan 1970.

    A zero for any part of the constructor takes that part from 1 Jan 1970.
    """

    __slots__ = ("_day", "_month", "_year")

    def __init__(self, day: int = 0, month: int = 0, year: int = 0) -> None:
        day = day or 1
        month = int(month) or Month.JAN
        year = year or EPOCH_YEAR
        if not 1 <= month <= _MONTHS_PER_YEAR:
            raise ValueError("Invalid month")
        if day < 1 or day > Date.number_of_days(month, year) or year < EPOCH_YEAR:
            raise ValueError("Invalid day for the month")
        self._day = day
        self._month = int(month)
        self._year = year

    @classmethod
    def _normalized(cls, day: int, month: int, year: int) -> Date:
        """Build a date, carrying surplus days and months forward."""
        if day < 1 or month < 1 or year < EPOCH_YEAR:
            raise ValueError("Invalid date")
        year += (month - 1) // _MONTHS_PER_YEAR
        month = (month - 1) % _MONTHS_PER_YEAR + 1

        while day > 365 + cls.is_leap_year(year):
            day -= 365 + cls.is_leap_year(year)
            year += 1

        while day > cls.number_of_days(month, year):
            day -= cls.number_of_days(month, year)
            month += 1
            if month > _MONTHS_PER_YEAR:
                month = 1
                year += 1

        date = cls.__new__(cls)
        date._day = day
        date._month = month
        date._year = year
        return date

    @property
    def day(self) -> int:
        return self._day

    @property
    def month(self) -> int:
        return self._month

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self._month - 1]

    @property
    def leap_year(self) -> bool:
        return self.is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        return self.number_of_days(self._month, self._year)

    def to_days(self) -> int:
        """Day count relative to 1 Jan 1970."""
        y = self._year
        year_days = y * 365 + y // 4 - y // 100 + y // 400
        return (
            year_days
            + _DAYS_BEFORE_MONTH[self._month - 1]
            + int(self.leap_year)
            + (self._day - 1)
            - _EPOCH_DAYS
        )

    def with_day(self, day: int) -> Date:
        """Return the date with the day replaced, normalizing any overflow."""
        return self._normalized(day, self._month, self._year)

    def with_month(self, month: int) -> Date:
        """Return the date with the month replaced, normalizing any overflow."""
        return self._normalized(self._day, int(month), self._year)

    def with_year(self, year: int) -> Date:
        """Return the date with the year replaced, normalizing any overflow."""
        return self._normalized(self._day, self._month, year)

    def next_day(self) -> Date:
        return self.with_day(self._day + 1)

    def previous_day(self) -> Date:
        if self._day != 1:
            return self.with_day(self._day - 1)
        if self._month == Month.JAN:
            shifted = self.with_year(self._year - 1).with_month(Month.DEC)
        else:
            shifted = self.with_month(self._month - 1)
        return shifted.with_day(shifted.days_in_month)

    def __add__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        if days < 0:
            raise ValueError("Days to add must not be negative")
        return self._normalized(self._day + days, self._month, self._year)

    def __sub__(self, days: int) -> Date:
        if not isinstance(days, int):
            return NotImplemented
        if days < 0:
            raise ValueError("Days to subtract must not be negative")
        return self._normalized(1 + self.to_days() - days, Month.JAN, EPOCH_YEAR)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Date({self._day}, {self._month}, {self._year})"

    def __str__(self) -> str:
        return f"{self._day} {self.month_name} {self._year}"

    @staticmethod
    def number_of_days(month: int, year: int) -> int:
        """Number of days in ``month`` of ``year``."""
        if month in (Month.APR, Month.JUN, Month.SEP, Month.NOV):
            return 30
        if month == Month.FEB:
            return 28 + Date.is_leap_year(year)
        if month in (Month.JAN, Month.MAR, Month.MAY, Month.JUL,
                     Month.AUG, Month.OCT, Month.DEC):
            return 31
        raise ValueError("Invalid month")

    @staticmethod
    def day_of_week(day: int, month: int, year: int) -> int:
        """Weekday of a date, 0 being Sunday."""
        y = year - (month < 3)
        return (y + y // 4 - y // 100 + y // 400 + _WEEKDAY_OFFSETS[month - 1] + day) % 7

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return year % 4 == 0