"""A growable sequence with explicit capacity and bounds-checked access."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_GROWTH_STEP = 5


class Sequence(Generic[T]):
    """Ordered container that grows its capacity in fixed steps when full."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Capacity must not be negative")
        self._items: list[T] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of items the sequence can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    @property
    def empty(self) -> bool:
        return not self._items

    @property
    def full(self) -> bool:
        return len(self._items) == self._capacity

    def __contains__(self, item: object) -> bool:
        return any(existing == item for existing in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError("Index out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def clear(self) -> Sequence[T]:
        """Drop every item, keeping the capacity."""
        self._items.clear()
        return self

    def add(self, item: T) -> Sequence[T]:
        """Append an item at the end."""
        return self._insert_at(len(self._items), item)

    def insert(self, index: int, item: T) -> Sequence[T]:
        """Insert an item before position ``index`` (``index == len`` appends)."""
        if index < 0 or index > len(self._items):
            raise IndexError("Index out of range")
        return self._insert_at(index, item)

    def remove(self, index: int) -> Sequence[T]:
        """Remove the item at ``index``, shifting later items left."""
        self._check_index(index)
        del self._items[index]
        return self

    def cut(self) -> Sequence[T]:
        """Drop the last item."""
        if self.empty:
            raise IndexError("Trying to operate an empty sequence")
        self._items.pop()
        return self

    def _insert_at(self, index: int, item: T) -> Sequence[T]:
        if self.full:
            self._capacity += _GROWTH_STEP
        self._items.insert(index, item)
        return self

    def __repr__(self) -> str:
        return f"Sequence({self._items!r}, capacity={self._capacity})"

    def __str__(self) -> str:
        body = ",".join(str(item) for item in self._items)
        return f"[{body}] Sequence size: {len(self)}, capacity: {self._capacity}"