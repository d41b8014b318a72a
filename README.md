# eventcal

A small event calendar for the terminal. A calendar covers a window of ten
years that starts with a given year, by default the current one. It prints
each month as a grid and highlights the days that have events. Events can be
filtered by type, priority or month, or collected between two dates. The
package also has a fixed-size text screen buffer with a cursor and a scroll
window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
eventcal [--year YEAR] [--filler PATH]
```

This runs a demonstration with sample data. It adds events from 2025 to 2027
to a calendar, marks dates, moves to the next month and back, and prints the
calendar after each step. It then lists the events of type "Important date"
in the current month and the events between 1 Jan 2025 and 13 Dec 2026.
After that it loads a screen from the filler file, changes two characters,
copies it, and prints each state.

- `--year YEAR`: the first year of the calendar's window. The default is the
  current year. The sample events start in 2025, so in a later year use
  `--year 2025`.
- `--filler PATH`: the file the screen's rows are read from. The default is
  `filler.txt` in the current directory.

If a date falls outside the window or the filler file cannot be read, the
command prints `eventcal: <message>` to standard error and exits with status 1.

## Library use

```python
from eventcal.dates import Date, Month
from eventcal.clock import Time
from eventcal.events import Event, EventType
from eventcal.planner import Calendar, FilterType

meeting = Event(Date(12, Month.JAN, 2030), EventType.MEETING, 1,
                "Project meeting", "Discuss project status",
                Time(0, 30, 14))

cal = Calendar(2030)           # window 2030 to 2039
cal.add_event(meeting)         # also moves the cursor to Jan 2030
cal.mark_date(Date(15, Month.JAN, 2030))
print(cal)                     # current year and month grid

for event in cal.filter(FilterType.TYPE, EventType.IMPORTANT):
    print(event)

for event in cal.filter_by_timespan(Date(1, 1, 2030), Date(31, 12, 2030)):
    print(event)

print(Calendar.semester_end_date(Date(1, 9, 2030)))   # 84 days later
```

### Dates and times

`eventcal.dates.Date(day, month, year)` is immutable and valid from
1 Jan 1970. A zero for any part is taken from 1 Jan 1970, and a date that
does not exist raises `ValueError`. `date + n` and `date - n` give new
dates, `with_day`, `with_month` and `with_year` carry any overflow forward,
and `next_day()` and `previous_day()` step by one day. Dates compare in
calendar order. Every year divisible by four counts as a leap year.
`Date.day_of_week` returns 0 for Sunday.

`eventcal.clock.Time(seconds, minutes, hours)` carries surplus seconds into
minutes and minutes into hours, so `Time(75, 0, 1)` prints as `1h:1m:15s`.
`Time.from_seconds` and subtraction wrap at a full day. Subtracting more
seconds than the time holds raises `ValueError`.

### Events and the calendar

`eventcal.events.Event` is a frozen dataclass with `date`, `type`
(an `EventType`), `priority`, `title`, `description` and an optional `time`.
A time of more than 24 hours raises `ValueError`.

`eventcal.planner.Calendar` keeps a cursor on one month. `add_event` raises
`IndexError` for a year outside the window. `next_month` and
`previous_month` raise `IndexError` at the window's edges. `next_year` and
`previous_year` stop at the edges. `go_to_month` picks a month of the
current year. `clear` forgets every event. `current_year` and
`current_month` give a `CalendarYear` and a `CalendarMonth`. A
`CalendarMonth` can be indexed and iterated, and `render(year)` draws its
grid.

### Sequence

`eventcal.sequence.Sequence` is a list with an explicit capacity. When it
is full it grows by five. An index out of range raises `IndexError`.
`str()` shows the items, the size and the capacity.

### Screen

`eventcal.screen.Screen` holds 24 rows of 81 characters and shows `height`
of them at a time. `from_file` reads whole rows of 81 bytes. The cursor is
set in absolute positions with `set_cursor(x, y)`, and `left`, `right`,
`up` and `down` move it by one. A position out of range raises
`IndexError`. `replace` overwrites the character under the cursor, and
`scroll_down` and `scroll_up` move the visible window. `render()` and
`str()` return the visible rows with the cursor's character highlighted.

```python
from eventcal.screen import Screen

screen = Screen.from_file("filler.txt", 12)
screen.set_cursor(1, 1)
screen.replace("A")
print(screen.render())
```

## What it does not do

Events live only in memory. Nothing is saved to or loaded from disk, apart
from the screen's rows read by `Screen.from_file`. The command runs a fixed
demonstration and does not take interactive input or let you edit events.