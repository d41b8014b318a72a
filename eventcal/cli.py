"""Command that walks through the calendar and screen features."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .clock import Time
from .dates import Date, Month
from .events import Event, EventType
from .planner import Calendar, FilterType
from .screen import Screen

DEFAULT_FILLER = "filler.txt"
_SCREEN_HEIGHT = 12


def run_calendar_demo(out: TextIO | None = None, this_year: int | None = None) -> Calendar:
    """Build a calendar with sample events, printing each step."""
    out = sys.stdout if out is None else out
    print("Tasks from 1-5:", file=out)
    d1 = Date(12, 1, 2025)
    d2 = Date(15, 1, 2026)
    t = Time(12, 23, 5)

    e = Event(d1, EventType.MEETING, 1, "Project meeting", "Discuss project status", t)
    e2 = Event(Date(13, 2, 2027), EventType.OTHER, 5, "Team building", "Fun activities together")

    print(f"Date d1(12, 1, 2025): {d1}", file=out)
    print(f"Date d2(15, 1, 2026): {d2}", file=out)
    print(f"Time t(12, 23, 5): {t}\n", file=out)

    print(f"e(d1,t, ...): \n{e}", file=out)
    print(f"e2({{13, 2, 2027}}, ...): \n{e2}", file=out)

    calendar = Calendar(this_year)

    steps = [
        ("Added event e to calendar:", lambda: calendar.add_event(e)),
        ("Added event e2 to calendar:", lambda: calendar.add_event(e2)),
        ("Marked date d1 in calendar:", lambda: calendar.mark_date(d1)),
        ("Marked date d2 in calendar:", lambda: calendar.mark_date(d2)),
        ("Moved to next month:", calendar.next_month),
        ("Moved to previous month:", calendar.previous_month),
    ]
    for caption, action in steps:
        action()
        print(caption, file=out)
        print(calendar, file=out)

    print("Events of type Important:", file=out)
    for event in calendar.filter(FilterType.TYPE, EventType.IMPORTANT):
        print(event, file=out)

    birthdays = [
        ("Marked my BDay:", Date(9, Month.MAY, 2025), "My BD"),
        ("Marked Valentin's BDay", Date(25, Month.APR, 2025), "Valentine's Bday"),
        ("Marked Bjorn Stroustrup's BDay", Date(30, Month.DEC, 2025), "Bjorn Stroustrup's Bday"),
        ("Marked Linus Torvalds' BDay", Date(28, Month.DEC, 2025), "Linus Torvalds BDay"),
    ]
    for caption, date, title in birthdays:
        print(caption, file=out)
        calendar.add_event(Event(date, EventType.IMPORTANT, 1, title, ""))
        print(calendar, file=out)

    print("Events in timespan from 01.01.2025 to 1.01.2026:", file=out)
    for event in calendar.filter_by_timespan(Date(1, 1, 2025), Date(13, 12, 2026)):
        print(event, file=out)

    return calendar


def run_screen_demo(out: TextIO | None = None, path: str = DEFAULT_FILLER) -> Screen:
    """Load a screen, edit it, copy it, and print each step."""
    out = sys.stdout if out is None else out
    screen = Screen.from_file(path, _SCREEN_HEIGHT)
    print("Initial screen screen(12) 12 - number of rows:", file=out)
    print(screen, file=out)

    screen.set_cursor(1, 1)
    screen.replace("A")
    print("Moved cursor to 1,1 and replaced char to A:", file=out)
    print(screen, file=out)

    screen2 = screen.copy()
    print("Screen2 (screen's copy):", file=out)
    print(screen2, file=out)

    screen.set_cursor(5, 3)
    screen.replace("S")
    print("Moved cursor to 5,3 and replaced char to S:", file=out)
    print(screen, file=out)

    screen3 = screen.copy()
    print("Screen3 (screen's move):", file=out)
    print(screen3, file=out)
    return screen3


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eventcal",
        description="Show the calendar and screen features on sample data.",
    )
    parser.add_argument(
        "--filler", default=DEFAULT_FILLER,
        help="file with the screen's rows (default: %(default)s)",
    )
    parser.add_argument(
        "--year", type=int, default=None,
        help="year the calendar starts from (default: the current year)",
    )
    args = parser.parse_args(argv)
    try:
        run_calendar_demo(sys.stdout, args.year)
        run_screen_demo(sys.stdout, args.filler)
    except (OSError, ValueError, IndexError) as error:
        print(f"eventcal: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())