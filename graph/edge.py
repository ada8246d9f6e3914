"""
edge.py — Graph Edge
====================
Connects two nodes.  Undirected: the edge u–v is the same edge as v–u,
so identity is the unordered pair {u, v}, not the insertion direction.

Design decisions:
  - `u` and `v` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - `weight` is None on unweighted graphs; MST algorithms refuse such edges.
"""

from typing import Optional, FrozenSet


class Edge:
    """
    Attributes:
        u, v   : IDs of the two endpoints (order = insertion order only).
        weight : Positive number, or None for unweighted graphs.
    """

    __slots__ = ("u", "v", "weight")

    def __init__(self, u: str, v: str, weight: Optional[float] = None):
        self.u:      str             = u
        self.v:      str             = v
        self.weight: Optional[float] = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> FrozenSet[str]:
        """Unordered endpoint pair — the uniqueness key inside a graph."""
        return frozenset((self.u, self.v))

    def connects(self, node_a: str, node_b: str) -> bool:
        return self.key == frozenset((node_a, node_b))

    def touches(self, node_id: str) -> bool:
        return node_id == self.u or node_id == self.v

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.u:
            return self.v
        if node_id == self.v:
            return self.u
        return None

    def as_tuple(self) -> tuple:
        return (self.u, self.v, self.weight)

    def copy(self) -> "Edge":
        return Edge(self.u, self.v, self.weight)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "u":      self.u,
            "v":      self.v,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(u=str(data["u"]), v=str(data["v"]), weight=data.get("weight"))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.u} ↔ {self.v}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
