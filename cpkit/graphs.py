"""Tree ancestor queries, path search and functional-graph cycle analysis."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence


class AncestorTable:
    """Binary-lifting table over a tree with nodes 0..n-1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if not 0 <= root < n:
            raise IndexError(f"root {root} outside 0..{n - 1}")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            adjacency[u].append(v)
            adjacency[v].append(u)
        self._n = n
        parent = [-1] * n
        self._depth = [0] * n
        self._reached = [False] * n
        self._reached[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not self._reached[neighbour]:
                    self._reached[neighbour] = True
                    parent[neighbour] = node
                    self._depth[neighbour] = self._depth[node] + 1
                    stack.append(neighbour)
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[p] if p != -1 else -1 for p in prev])

    def _check(self, node: int) -> None:
        if not 0 <= node < self._n:
            raise IndexError(f"node {node} outside 0..{self._n - 1}")

    def depth(self, node: int) -> int:
        """Number of edges between node and the root."""
        self._check(node)
        return self._depth[node]

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """The ancestor k steps above node, or None if there is none."""
        self._check(node)
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self._depth[node]:
            return None
        level = 0
        while k:
            if k & 1:
                node = self._up[level][node]
            k >>= 1
            level += 1
        return node

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        self._check(u)
        self._check(v)
        if not (self._reached[u] and self._reached[v]):
            raise ValueError("both nodes must be connected to the root")
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        u = self.kth_ancestor(u, self._depth[u] - self._depth[v])
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between u and v."""
        ancestor = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]


def find_path(
    adjacency: Mapping[Hashable, Iterable] | Sequence[Iterable],
    source: Hashable,
    target: Hashable,
) -> list | None:
    """A path from source to target found by depth-first search, or None."""
    if source == target:
        return [source]
    visited = {source}
    path = [source]
    frontier = [iter(adjacency[source])]
    while frontier:
        for neighbour in frontier[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                if neighbour == target:
                    return path
                frontier.append(iter(adjacency[neighbour]))
                break
        else:
            frontier.pop()
            path.pop()
    return None


def path_value_query(
    values: Sequence[int], edges: Iterable[tuple[int, int]], a: int, b: int
) -> int:
    """Minimum plus maximum plus lower median of the values on the path from a to b."""
    adjacency: list[list[int]] = [[] for _ in values]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    path = find_path(adjacency, a, b)
    if path is None:
        raise ValueError(f"no path between {a} and {b}")
    chosen = sorted(values[node] for node in path)
    return chosen[0] + chosen[-1] + chosen[(len(chosen) + 1) // 2 - 1]


def maximum_invitations(favorite: Sequence[int]) -> int:
    """Largest group seatable at a round table where everyone sits by their favourite."""
    n = len(favorite)
    for person, liked in enumerate(favorite):
        if not 0 <= liked < n or liked == person:
            raise ValueError(f"invalid favourite {liked} for person {person}")
    indegree = [0] * n
    for liked in favorite:
        indegree[liked] += 1
    chain = [0] * n
    queue = deque(person for person in range(n) if indegree[person] == 0)
    while queue:
        person = queue.popleft()
        liked = favorite[person]
        chain[liked] = max(chain[liked], chain[person] + 1)
        indegree[liked] -= 1
        if indegree[liked] == 0:
            queue.append(liked)
    longest_cycle = 0
    paired_total = 0
    for start in range(n):
        if indegree[start] == 0:
            continue
        length = 0
        person = start
        while indegree[person]:
            indegree[person] = 0
            length += 1
            person = favorite[person]
        if length == 2:
            paired_total += chain[start] + chain[favorite[start]] + 2
        else:
            longest_cycle = max(longest_cycle, length)
    return max(longest_cycle, paired_total)