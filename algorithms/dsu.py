"""
dsu.py — Disjoint Set Union (Union-Find)
=========================================
Partition tracker used by Kruskal to reject cycle-forming edges.

    find(x)      – root of x's set; every element on the search path is
                   re-parented straight onto the root (path compression)
    union(x, y)  – lower-rank root goes under the higher-rank root; on a
                   tie the second root goes under the first, whose rank grows

Both optimisations together give amortised ~O(α(n)) per call.

Elements are the contiguous indices 0..n-1.  Graph node ids are sparse
and opaque, so `for_ids()` builds the id → index table once per run.
A DSU is created fresh for each run and thrown away afterwards.
"""

from typing import Dict, Hashable, Iterable, List, Tuple

from graph.errors import IllegalStateError


class DisjointSetUnion:
    """
    Attributes:
        size : Number of elements (fixed at construction).
    """

    __slots__ = ("size", "_parent", "_rank", "_sets")

    def __init__(self, size: int):
        if size < 0:
            raise IllegalStateError(f"DSU size must be >= 0, got {size}")
        self.size:    int       = size
        self._parent: List[int] = list(range(size))
        self._rank:   List[int] = [0] * size
        self._sets:   int       = size

    @classmethod
    def for_ids(cls, ids: Iterable[Hashable]) -> Tuple["DisjointSetUnion", Dict[Hashable, int]]:
        """Fresh DSU over `ids` plus the id → index lookup table."""
        index = {}
        for nid in ids:
            index.setdefault(nid, len(index))
        return cls(len(index)), index

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def find(self, x: int) -> int:
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y.  Returns False when they already share one."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        self._sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def set_count(self) -> int:
        return self._sets

    @property
    def parent(self) -> Tuple[int, ...]:
        return tuple(self._parent)

    @property
    def rank(self) -> Tuple[int, ...]:
        return tuple(self._rank)

    def _check(self, x) -> None:
        if not isinstance(x, int) or isinstance(x, bool) or not 0 <= x < self.size:
            raise IllegalStateError(f"DSU index {x!r} out of range 0..{self.size - 1}")

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"DisjointSetUnion(size={self.size}, sets={self._sets})"
