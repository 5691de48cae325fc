"""Offline subtree colour-frequency queries using an Euler tour and Mo's ordering."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from math import isqrt


@dataclass(frozen=True)
class SubtreeQuery:
    """A query over the Euler-tour positions left..right, asking for frequency >= k."""

    left: int
    right: int
    k: int
    index: int


class CountBuckets:
    """Counters over 0..size-1 with point updates and suffix sums in O(sqrt(size))."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._block = isqrt(size) + 1
        self._values = [0] * size
        self._blocks = [0] * (size // self._block + 1)

    def __len__(self) -> int:
        return self._size

    def add(self, index: int, delta: int) -> None:
        """Add delta to the counter at index."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} outside 0..{self._size - 1}")
        self._values[index] += delta
        self._blocks[index // self._block] += delta

    def suffix_sum(self, start: int) -> int:
        """Sum of the counters at start and above; a negative start counts from 0."""
        start = max(start, 0)
        if start >= self._size:
            return 0
        block_index = start // self._block
        block_end = (block_index + 1) * self._block
        return sum(self._values[start:block_end]) + sum(self._blocks[block_index + 1 :])


def euler_tour(
    n: int, edges: Iterable[tuple[int, int]], root: int = 0
) -> tuple[list[int], list[int], list[int]]:
    """Depth-first tour listing each reached node on entry and on exit.

    Returns (order, entry, exit): order has every reached node twice, and
    entry[v], exit[v] are the positions of v in order (-1 if v is unreached).
    The subtree of v is exactly the slice order[entry[v]:exit[v] + 1].
    """
    if not 0 <= root < n:
        raise IndexError(f"root {root} outside 0..{n - 1}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) outside 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    order: list[int] = []
    entry = [-1] * n
    exit_ = [-1] * n
    visited = [False] * n

    visited[root] = True
    entry[root] = 0
    order.append(root)
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                entry[neighbour] = len(order)
                order.append(neighbour)
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            exit_[node] = len(order)
            order.append(node)
    return order, entry, exit_


def _mo_key(block: int):
    def key(query: SubtreeQuery) -> tuple[int, int]:
        group = query.left // block
        return (group, -query.right if group % 2 == 0 else query.right)

    return key


def count_colors_at_least(
    colors: Sequence[Hashable],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer (v, k) queries on a tree rooted at node 0.

    Each answer is the number of distinct colours occurring at least k times
    in the subtree of v. For k == 0 every colour of the whole tree counts.
    """
    colors = list(colors)
    n = len(colors)
    queries = list(queries)
    if n == 0:
        if queries:
            raise IndexError("queries given for an empty tree")
        return []

    order, entry, exit_ = euler_tour(n, edges, 0)

    planned = []
    for position, (node, k) in enumerate(queries):
        if not 0 <= node < n:
            raise IndexError(f"node {node} outside 0..{n - 1}")
        if entry[node] < 0:
            raise ValueError(f"node {node} is not connected to the root")
        if k < 0:
            raise ValueError("k must be non-negative")
        planned.append(SubtreeQuery(entry[node], exit_[node], k, position))

    ids: dict[Hashable, int] = {}
    color_id = [ids.setdefault(color, len(ids)) for color in colors]
    tour_colors = [color_id[node] for node in order]

    buckets = CountBuckets(n + 1)
    buckets.add(0, len(ids))
    frequency = [0] * len(ids)
    appearances = [0] * len(ids)

    def move(color: int, step: int) -> None:
        buckets.add(frequency[color], -1)
        frequency[color] += step
        buckets.add(frequency[color], 1)

    def add(position: int) -> None:
        color = tour_colors[position]
        appearances[color] += 1
        if appearances[color] % 2 == 0:
            move(color, 1)

    def remove(position: int) -> None:
        color = tour_colors[position]
        appearances[color] -= 1
        if appearances[color] % 2 == 1:
            move(color, -1)

    answers = [0] * len(planned)
    cur_l, cur_r = 0, -1
    for query in sorted(planned, key=_mo_key(max(1, isqrt(n)))):
        while cur_l > query.left:
            cur_l -= 1
            add(cur_l)
        while cur_r < query.right:
            cur_r += 1
            add(cur_r)
        while cur_l < query.left:
            remove(cur_l)
            cur_l += 1
        while cur_r > query.right:
            remove(cur_r)
            cur_r -= 1
        answers[query.index] = buckets.suffix_sum(query.k)
    return answers