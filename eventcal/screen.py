"""A fixed-size text screen with a cursor and a vertical scroll window."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

ROW_LENGTH = 81
ROW_COUNT = 24

_BLANK = "\0"
_CURSOR = "\033[32m"
_RESET = "\033[0m"


class Screen:
    """Rows of text of which ``height`` rows are shown at once.

    The cursor is given in absolute row and column positions.
    """

    __slots__ = ("_height", "_content", "_cursor_x", "_cursor_y", "_scroll")

    def __init__(self, height: int, rows: Iterable[str] = ()) -> None:
        if not 0 <= height <= ROW_COUNT:
            raise ValueError(f"Screen height must be in range [0, {ROW_COUNT}]")
        rows = list(rows)
        if len(rows) > ROW_COUNT:
            raise ValueError(f"A screen holds at most {ROW_COUNT} rows")
        self._height = height
        self._content = [list(row[:ROW_LENGTH].ljust(ROW_LENGTH, _BLANK)) for row in rows]
        self._content.extend([_BLANK] * ROW_LENGTH for _ in range(ROW_COUNT - len(rows)))
        self._cursor_x = 0
        self._cursor_y = 0
        self._scroll = 0

    @classmethod
    def from_file(cls, path: str | Path, height: int) -> Screen:
        """Load rows of ``ROW_LENGTH`` bytes each from a file.

        A trailing partial row is ignored, as are rows past ``ROW_COUNT``.
        """
        text = Path(path).read_bytes().decode("latin-1")
        whole = min(len(text) // ROW_LENGTH, ROW_COUNT)
        rows = [
            text[start:start + ROW_LENGTH]
            for start in range(0, whole * ROW_LENGTH, ROW_LENGTH)
        ]
        return cls(height, rows)

    def copy(self) -> Screen:
        """An independent screen with the same content, cursor and scroll."""
        other = Screen(self._height)
        other._content = [list(row) for row in self._content]
        other._cursor_x = self._cursor_x
        other._cursor_y = self._cursor_y
        other._scroll = self._scroll
        return other

    @property
    def height(self) -> int:
        return self._height

    @property
    def cursor(self) -> tuple[int, int]:
        """Cursor position as ``(x, y)``."""
        return (self._cursor_x, self._cursor_y)

    @property
    def scroll(self) -> int:
        """Index of the first visible row."""
        return self._scroll

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self._content)

    def set_cursor(self, x: int, y: int) -> None:
        if not 0 <= x < ROW_LENGTH or not 0 <= y <= self._height or y >= ROW_COUNT:
            raise IndexError("Cursor position out of range")
        self._cursor_x = x
        self._cursor_y = y

    def replace(self, char: str) -> None:
        """Overwrite the character under the cursor."""
        if len(char) != 1:
            raise ValueError("Exactly one character is required")
        self._content[self._cursor_y][self._cursor_x] = char

    def left(self) -> None:
        self.set_cursor(self._cursor_x - 1, self._cursor_y)

    def right(self) -> None:
        self.set_cursor(self._cursor_x + 1, self._cursor_y)

    def up(self) -> None:
        self.set_cursor(self._cursor_x, self._cursor_y - 1)

    def down(self) -> None:
        self.set_cursor(self._cursor_x, self._cursor_y + 1)

    def scroll_down(self) -> None:
        if self._scroll + self._height < ROW_COUNT:
            self._scroll += 1

    def scroll_up(self) -> None:
        if self._scroll > 0:
            self._scroll -= 1

    def render(self) -> str:
        """The visible rows, with the cursor's character highlighted."""
        end = self._scroll + self._height
        parts = [f"Lines from {self._scroll} to {end}\n"]
        for y, row in enumerate(self._content[self._scroll:end], start=self._scroll):
            for x, char in enumerate(row):
                if (x, y) == (self._cursor_x, self._cursor_y):
                    parts.append(f"{_CURSOR}{char}{_RESET}")
                else:
                    parts.append(char)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()