"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements 0..n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._parent):
            raise IndexError(f"element {v} out of range")

    def root(self, v: int) -> int:
        """Representative of v's set."""
        self._check(v)
        top = v
        while self._parent[top] != top:
            top = self._parent[top]
        while self._parent[v] != top:
            parent = self._parent[v]
            self._parent[v] = top
            v = parent
        return top

    def connected(self, p: int, q: int) -> bool:
        """True if p and q are in the same set."""
        return self.root(p) == self.root(q)

    def merge(self, p: int, q: int) -> bool:
        """Join the sets of p and q; return False if they were already joined."""
        i, j = self.root(p), self.root(q)
        if i == j:
            return False
        if self._size[i] < self._size[j]:
            i, j = j, i
        self._parent[j] = i
        self._size[i] += self._size[j]
        return True

    def size(self, v: int) -> int:
        """Number of elements in v's set."""
        return self._size[self.root(v)]