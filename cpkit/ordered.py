"""Order-statistic multiset and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sortedcontainers import SortedList


class OrderedMultiset:
    """Sorted multiset with rank and select queries."""

    def __init__(self, values: Iterable = ()) -> None:
        self._items = SortedList(values)

    def add(self, value) -> None:
        """Insert value; duplicates are kept."""
        self._items.add(value)

    def order_of_key(self, value) -> int:
        """Number of stored elements strictly less than value."""
        return self._items.bisect_left(value)

    def find_by_order(self, index: int):
        """The element at position index (0-based) in sorted order."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} elements")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items


def count_smaller(nums: Iterable[int]) -> list[int]:
    """For each element, how many later elements are strictly smaller."""
    seen = SortedList()
    counts = []
    for value in reversed(list(nums)):
        counts.append(seen.bisect_left(value))
        seen.add(value)
    counts.reverse()
    return counts