"""Range-sum segment trees (point assignment, lazy range add) and a min sparse table."""

from __future__ import annotations

from collections.abc import Iterable


def _check_range(left: int, right: int, size: int) -> None:
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] outside 0..{size - 1}")


class SegmentTree:
    """Sums over inclusive index ranges with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = [0] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the element at index to value."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        i = index + self._n
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]
            i //= 2

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from left to right inclusive."""
        _check_range(left, right, self._n)
        total = 0
        lo, hi = left + self._n, right + self._n + 1
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total


class LazySegmentTree:
    """Sums over inclusive index ranges with range addition."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        capacity = 4 * max(self._n, 1)
        self._sum = [0] * capacity
        self._lazy = [0] * capacity
        if self._n:
            self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, v: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sum[v] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * v, lo, mid, items)
        self._build(2 * v + 1, mid + 1, hi, items)
        self._sum[v] = self._sum[2 * v] + self._sum[2 * v + 1]

    def _apply(self, v: int, lo: int, hi: int, value: int) -> None:
        self._sum[v] += value * (hi - lo + 1)
        self._lazy[v] += value

    def _push(self, v: int, lo: int, hi: int) -> None:
        pending = self._lazy[v]
        if pending:
            mid = (lo + hi) // 2
            self._apply(2 * v, lo, mid, pending)
            self._apply(2 * v + 1, mid + 1, hi, pending)
            self._lazy[v] = 0

    def _add(self, v: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(v, lo, hi, value)
            return
        self._push(v, lo, hi)
        mid = (lo + hi) // 2
        self._add(2 * v, lo, mid, left, right, value)
        self._add(2 * v + 1, mid + 1, hi, left, right, value)
        self._sum[v] = self._sum[2 * v] + self._sum[2 * v + 1]

    def _query(self, v: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[v]
        self._push(v, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * v, lo, mid, left, right) + self._query(
            2 * v + 1, mid + 1, hi, left, right
        )

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every element from left to right inclusive."""
        _check_range(left, right, self._n)
        self._add(1, 0, self._n - 1, left, right, value)

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from left to right inclusive."""
        _check_range(left, right, self._n)
        return self._query(1, 0, self._n - 1, left, right)


class SparseTable:
    """Range-minimum queries over an immutable sequence in O(1)."""

    def __init__(self, values: Iterable) -> None:
        self._levels = [list(values)]
        n = len(self._levels[0])
        width = 1
        while 2 * width <= n:
            prev = self._levels[-1]
            self._levels.append(
                [min(a, b) for a, b in zip(prev[: n - 2 * width + 1], prev[width:])]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, left: int, right: int):
        """Minimum of the elements from left to right inclusive."""
        _check_range(left, right, len(self))
        k = (right - left + 1).bit_length() - 1
        level = self._levels[k]
        return min(level[left], level[right - (1 << k) + 1])