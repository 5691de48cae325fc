# cpkit

Classic algorithms and data structures in plain Python: string matching,
tries, modular combinatorics, order statistics, disjoint sets, range
queries, tree ancestry and offline subtree queries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cpkit.strings` | `prefix_function`, `kmp_search`, `manacher_odd`, `manacher`, `RollingHash`, `rabin_karp_search` |
| `cpkit.tries` | `Trie`, `WordTrie`, `TrieNode`, `XorTrie` |
| `cpkit.numbers` | `modular_inverses`, `Combinatorics`, `sieve`, `primes_up_to` |
| `cpkit.ordered` | `OrderedMultiset`, `count_smaller` |
| `cpkit.unionfind` | `UnionFind` |
| `cpkit.rangequery` | `SegmentTree`, `LazySegmentTree`, `SparseTable` |
| `cpkit.graphs` | `AncestorTable`, `find_path`, `path_value_query`, `maximum_invitations` |
| `cpkit.subtree` | `euler_tour`, `CountBuckets`, `SubtreeQuery`, `count_colors_at_least` |

## Examples

Pattern matching (overlapping matches are reported):

```python
from cpkit.strings import kmp_search, rabin_karp_search, manacher, RollingHash

kmp_search("aba", "abababa")         # [0, 2, 4]
rabin_karp_search("aba", "abababa")  # [0, 2, 4]
manacher("abcbcba")                  # palindrome radii at every character and gap

h = RollingHash("abcabc")
h.get_hash(0, 2) == h.get_hash(3, 5)  # True
```

`RollingHash` maps lowercase letters to 1..26, so it is meant for lowercase
text.

Tries:

```python
from cpkit.tries import Trie, WordTrie, XorTrie

trie = Trie()
trie.insert("apple")
trie.search("apple")      # True
trie.starts_with("app")   # True

words = WordTrie()
words.insert("card")
words.node("car").word    # "car"

xt = XorTrie()
for n in (3, 10, 5, 25, 2, 8):
    xt.insert(n)
xt.find_max(5)            # 28, the largest 5 ^ x over inserted x
```

`XorTrie` works on 32-bit two's-complement values and returns -1 when
nothing has been inserted.

Combinatorics modulo a prime:

```python
from cpkit.numbers import Combinatorics, primes_up_to

comb = Combinatorics(1000, 1_000_000_007)
comb.ncr(6, 3)            # 20
primes_up_to(20)          # [2, 3, 5, 7, 11, 13, 17, 19]
```

Order statistics with repeated values:

```python
from cpkit.ordered import OrderedMultiset, count_smaller

ms = OrderedMultiset()
for v in (5, 5, 4, 4, 1, 2, 6):
    ms.add(v)
ms.order_of_key(6)        # 6 values are smaller than 6
ms.find_by_order(1)       # 2

count_smaller([5, 2, 6, 1])  # [2, 1, 1, 0]
```

Disjoint sets:

```python
from cpkit.unionfind import UnionFind

uf = UnionFind(4)
uf.merge(0, 1)            # True
uf.connected(0, 1)        # True
uf.size(1)                # 2
```

Range queries (zero-based, inclusive bounds):

```python
from cpkit.rangequery import SegmentTree, LazySegmentTree, SparseTable

st = SegmentTree([1, 3, 5])
st.sum_range(0, 2)        # 9
st.update(1, 2)
st.sum_range(0, 2)        # 8

lazy = LazySegmentTree([0, 0, 0, 0])
lazy.add(1, 2, 5)
lazy.sum_range(0, 3)      # 10

SparseTable([4, 2, 7, 1]).query(0, 2)  # 2
```

Trees and graphs (tree nodes are numbered 0..n-1):

```python
from cpkit.graphs import AncestorTable, find_path, maximum_invitations

tree = AncestorTable(5, [(0, 1), (0, 2), (2, 3), (2, 4)], 0)
tree.lca(3, 4)            # 2
tree.distance(1, 4)       # 3
tree.kth_ancestor(4, 2)   # 0

find_path({"a": ["b"], "b": ["c"], "c": []}, "a", "c")  # ["a", "b", "c"]
maximum_invitations([2, 2, 1, 2])                       # 3
```

Offline subtree colour queries on a tree rooted at node 0; each answer is
the number of distinct colours seen at least `k` times in the subtree:

```python
from cpkit.subtree import count_colors_at_least

count_colors_at_least(["r", "g", "r"], [(0, 1), (0, 2)], [(0, 2), (1, 1)])  # [1, 1]
```

Out-of-range indices raise `IndexError`; invalid arguments such as a
negative `k` raise `ValueError`.

## What it does not do

cpkit is a library only. It has no command-line program and does not read
problem input from standard input; every routine takes ordinary Python
values and returns its result.