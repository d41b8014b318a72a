"""Month-by-month event calendar covering a window of years."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Callable, Iterator

from .dates import EPOCH_YEAR, MONTH_NAMES, Date
from .events import Event, EventType
from .sequence import Sequence

MAX_YEARS = 10
SEMESTER_LENGTH = 12
MONTH_AMOUNT = 12
SEP = "\n============================\n"

_INITIAL_CAPACITY = 10
_WEEK_HEADER = "Su  Mo  Tu  We  Th  Fr  Sa\n"
_DAYS_PER_WEEK = 7
_MARK = "\033[31m"
_RESET = "\033[0m"

Predicate = Callable[[Event, int], bool]


def current_year() -> int:
    """The current year in local time."""
    return datetime.now().year


class FilterType(IntEnum):
    TYPE = 0
    PRIORITY = 1
    MONTH = 2


FILTERS: dict[FilterType, Predicate] = {
    FilterType.TYPE: lambda event, query: event.type == query,
    FilterType.PRIORITY: lambda event, query: event.priority == query,
    FilterType.MONTH: lambda event, query: event.date.month == query,
}


class CalendarMonth:
    """Events of one month and the days they fall on."""

    def __init__(self, month: int, days_amount: int) -> None:
        self.month = month
        self.days_amount = days_amount
        self._marked = [False] * days_amount
        self._events: Sequence[Event] = Sequence(_INITIAL_CAPACITY)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __getitem__(self, index: int) -> Event:
        return self._events[index]

    def is_day_marked(self, day: int) -> bool:
        if day < 1 or day > self.days_amount:
            raise IndexError("Day must be in range [1, 31]")
        return self._marked[day - 1]

    def add_event(self, event: Event) -> None:
        self._marked[event.date.day - 1] = True
        self._events.add(event)

    def filter(self, predicate: Predicate, query: int) -> Sequence[Event]:
        """Events for which ``predicate(event, query)`` holds."""
        found: Sequence[Event] = Sequence(_INITIAL_CAPACITY)
        for event in self._events:
            if predicate(event, query):
                found.add(event)
        return found

    def filter_by_timespan(self, start: Date, end: Date) -> Sequence[Event]:
        """Events dated between ``start`` and ``end``, both inclusive."""
        found: Sequence[Event] = Sequence(_INITIAL_CAPACITY)
        for event in self._events:
            if start <= event.date <= end:
                found.add(event)
        return found

    def render(self, year: int) -> str:
        """Month grid with marked days highlighted."""
        first = Date.day_of_week(1, self.month, year)
        parts = [f"{MONTH_NAMES[self.month - 1]}\n", _WEEK_HEADER, "    " * first]
        for day in range(1, self.days_amount + 1):
            if self._marked[day - 1]:
                parts.append(f"{_MARK}{day}{_RESET}  ")
            else:
                parts.append(f"{day:>2}  ")
            if (day + first) % _DAYS_PER_WEEK == 0:
                parts.append("\n")
        return "".join(parts)


class CalendarYear:
    """Twelve lazily created months of one year."""

    def __init__(self, year: int, this_year: int | None = None) -> None:
        if this_year is None:
            this_year = current_year()
        if year < EPOCH_YEAR or year > this_year + MAX_YEARS:
            raise ValueError(
                f"Year must be in range [{EPOCH_YEAR}, {this_year + MAX_YEARS}]"
            )
        self.year = year
        self._months: dict[int, CalendarMonth] = {}

    def __getitem__(self, month: int) -> CalendarMonth:
        if month < 1 or month > MONTH_AMOUNT:
            raise IndexError("Month must be in range [1, 12]")
        if month not in self._months:
            self._months[month] = CalendarMonth(month, Date.number_of_days(month, self.year))
        return self._months[month]

    def add_event(self, event: Event) -> None:
        self[event.date.month].add_event(event)

    def __str__(self) -> str:
        return str(self.year)


class Calendar:
    """Calendar of the current year and the following ones, with a month cursor."""

    def __init__(self, this_year: int | None = None) -> None:
        self._this_year = current_year() if this_year is None else this_year
        self._years: list[CalendarYear | None] = [None] * MAX_YEARS
        self._offset = 0
        self._month = 1
        self._touch()

    def _year_at(self, offset: int) -> CalendarYear:
        year = self._years[offset]
        if year is None:
            year = CalendarYear(self._this_year + offset, self._this_year)
            self._years[offset] = year
        return year

    def _touch(self) -> None:
        self._year_at(self._offset)[self._month]

    @property
    def current_year(self) -> CalendarYear:
        return self._year_at(self._offset)

    @property
    def current_month(self) -> CalendarMonth:
        return self.current_year[self._month]

    def filter(self, filter_type: int, query: int) -> Sequence[Event]:
        """Events of the current month matching the chosen filter."""
        try:
            kind = FilterType(filter_type)
        except ValueError:
            raise IndexError("Filter type must be in range [0, 2]") from None
        return self.current_month.filter(FILTERS[kind], query)

    def filter_by_timespan(self, start: Date, end: Date) -> Sequence[Event]:
        """Events between two dates, inclusive, in calendar order."""
        if start > end:
            raise ValueError("First date must be earlier than the second one")
        first = (start.year, start.month)
        last = (end.year, end.month)
        found: Sequence[Event] = Sequence(_INITIAL_CAPACITY)
        for offset in range(MAX_YEARS):
            year = self._this_year + offset
            for month in range(1, MONTH_AMOUNT + 1):
                if not first <= (year, month) <= last:
                    continue
                for event in self._year_at(offset)[month].filter_by_timespan(start, end):
                    found.add(event)
        return found

    @staticmethod
    def semester_end_date(start: Date) -> Date:
        return start + SEMESTER_LENGTH * _DAYS_PER_WEEK

    def add_event(self, event: Event) -> None:
        """Store an event and move the cursor to its month."""
        year = event.date.year
        if year >= self._this_year + MAX_YEARS:
            raise IndexError("You can't travel that far into the future!")
        if year < self._this_year:
            raise IndexError("You can't travel into the past!")
        self._offset = year - self._this_year
        self._month = event.date.month
        self.current_year.add_event(event)

    def mark_date(self, date: Date) -> None:
        self.add_event(Event(date, EventType.IMPORTANT, 1, "", ""))

    def next_month(self) -> None:
        if self._month == MONTH_AMOUNT:
            if self._offset >= MAX_YEARS - 1:
                raise IndexError("You can't travel that far into the future!")
            self._offset += 1
            self._month = 1
        else:
            self._month += 1
        self._touch()

    def previous_month(self) -> None:
        if self._month == 1:
            if self._offset == 0:
                raise IndexError("You can't travel into the past!")
            self._offset -= 1
            self._month = MONTH_AMOUNT
        else:
            self._month -= 1
        self._touch()

    def next_year(self) -> None:
        if self._offset < MAX_YEARS - 1:
            self._offset += 1
        self._touch()

    def previous_year(self) -> None:
        if self._offset > 0:
            self._offset -= 1
        self._touch()

    def go_to_month(self, month: int) -> None:
        if month < 1 or month > MONTH_AMOUNT:
            raise IndexError("Month must be in range [1, 12]")
        self._month = int(month)
        self._touch()

    def clear(self) -> None:
        """Forget every stored event."""
        self._years = [None] * MAX_YEARS
        self._touch()

    def __str__(self) -> str:
        year = self.current_year
        return (
            f"{SEP}Current year is: {year}"
            f"\nCurrent month is: {self.current_month.render(year.year)}{SEP}"
        )