"""
model.py — Graph Model & Read-only Snapshot
===========================================
Single source of truth for the graph the user is editing.  The editor
writes to it, algorithms read a frozen `GraphSnapshot` of it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / delete / start node)
  2. Run-lock: every mutation is refused while playback is RUNNING
  3. Snapshotting for algorithm runs        (deep copy, never aliased)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in insertion-ordered dicts, so every algorithm
    sees the same neighbour order for the same edit history.
  - Edges are keyed by their unordered endpoint pair: u–v and v–u collide.
  - The model never imports the playback engine; it is handed any object
    with an `is_running` attribute via `bind_playback()`.
"""

import logging
import numbers
import random
from dataclasses import dataclass
from typing import (
    Any, Dict, FrozenSet, Hashable, Iterable, List, Optional, Sequence, Tuple
)

from graph.node import Node, new_node_id
from graph.edge import Edge
from graph.errors import IllegalStateError, InvalidInputError

logger = logging.getLogger(__name__)

# random weights handed out when a weighted graph gets a new edge
DEFAULT_WEIGHT_RANGE: Tuple[int, int] = (1, 15)

GraphView = Tuple[List[Node], List[Edge]]


# ---------------------------------------------------------------------------
# Snapshot — what algorithms consume
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphSnapshot:
    """
    Frozen copy of a graph taken at run start.

    Attributes:
        nodes      : Node copies in insertion order.
        edges      : Edge copies in insertion order.
        start_node : Designated traversal root, or None.
    """

    nodes:      Tuple[Node, ...]       = ()
    edges:      Tuple[Edge, ...]       = ()
    start_node: Optional[Hashable]     = None

    @classmethod
    def from_edges(
        cls,
        node_ids: Iterable[Hashable],
        edges: Iterable[Sequence[Any]],
        start_node: Optional[Hashable] = None,
    ) -> "GraphSnapshot":
        """
        Build a snapshot from plain data: ids plus (u, v) or (u, v, weight)
        tuples.  Labels default to str(id).
        """
        nodes = tuple(Node(label=str(nid), node_id=nid) for nid in node_ids)
        built = []
        for item in edges:
            if len(item) not in (2, 3):
                raise InvalidInputError(f"Edge must be (u, v) or (u, v, weight), got {item!r}")
            weight = item[2] if len(item) == 3 else None
            built.append(Edge(item[0], item[1], weight))
        return cls(nodes=nodes, edges=tuple(built), start_node=start_node)

    # ------------------------------------------------------------------
    def node_ids(self) -> List[Hashable]:
        return [n.id for n in self.nodes]

    def label_of(self, node_id: Hashable) -> str:
        for n in self.nodes:
            if n.id == node_id:
                return n.label
        return str(node_id)

    def index_map(self) -> Dict[Hashable, int]:
        """node id → contiguous 0..n-1 index (insertion order)."""
        return {nid: i for i, nid in enumerate(self.node_ids())}

    def adjacency(self) -> Dict[Hashable, List[Tuple[Hashable, Edge]]]:
        """{node_id: [(neighbour_id, edge), …]} in edge insertion order."""
        adj: Dict[Hashable, List[Tuple[Hashable, Edge]]] = {nid: [] for nid in self.node_ids()}
        for e in self.edges:
            adj[e.u].append((e.v, e))
            adj[e.v].append((e.u, e))
        return adj

    def validate(self, require_weights: bool = False) -> None:
        """Fail fast on anything that would produce a misleading Step."""
        ids = self.node_ids()
        known = set(ids)
        if len(known) != len(ids):
            raise InvalidInputError("Duplicate node ids in graph")
        seen: set = set()
        for e in self.edges:
            for end in (e.u, e.v):
                if end not in known:
                    raise InvalidInputError(f"Edge {e.u}–{e.v} references unknown node '{end}'")
            if e.u == e.v:
                raise InvalidInputError(f"Self-loop on node '{e.u}' is not allowed")
            if e.key in seen:
                raise InvalidInputError(f"Duplicate edge {e.u}–{e.v}")
            seen.add(e.key)
            if e.weight is not None and not _is_positive_number(e.weight):
                raise InvalidInputError(f"Edge {e.u}–{e.v} has invalid weight {e.weight!r}")
            if require_weights and e.weight is None:
                raise InvalidInputError(f"Edge {e.u}–{e.v} has no weight")
        if self.start_node is not None and self.start_node not in known:
            raise InvalidInputError(f"Start node '{self.start_node}' is not in the graph")


# ---------------------------------------------------------------------------
# GraphModel — the editable graph
# ---------------------------------------------------------------------------
class GraphModel:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : {frozenset({u, v}): Edge}
        start_node : node id used as traversal root, or None
        weighted   : whether new edges get a random weight
    """

    def __init__(
        self,
        weighted: bool = True,
        weight_range: Tuple[int, int] = DEFAULT_WEIGHT_RANGE,
        seed: Optional[int] = None,
    ):
        self.nodes:        Dict[str, Node]            = {}
        self.edges:        Dict[FrozenSet[str], Edge] = {}
        self.start_node:   Optional[str]              = None
        self.weighted:     bool                       = weighted
        self.weight_range: Tuple[int, int]            = weight_range
        self._rng          = random.Random(seed)
        self._playback     = None

    # ==================================================================
    # RUN LOCK
    # ==================================================================
    def bind_playback(self, playback) -> None:
        """Attach the controller whose RUNNING state locks this model."""
        self._playback = playback

    @property
    def is_locked(self) -> bool:
        return self._playback is not None and bool(self._playback.is_running)

    def _ensure_editable(self, action: str) -> None:
        if self.is_locked:
            raise IllegalStateError(f"Cannot {action} while an algorithm is running")

    # ==================================================================
    # NODE OPS
    # ==================================================================
    def add_node(self, x: float, y: float, node_id: Optional[str] = None) -> GraphView:
        """Create a node at (x, y); its label is the current node count."""
        self._ensure_editable("add a node")
        if node_id is None:
            node_id = new_node_id()
            while node_id in self.nodes:
                node_id = new_node_id()
        elif node_id in self.nodes:
            raise InvalidInputError(f"Node id '{node_id}' already exists")
        node = Node(x=x, y=y, label=str(len(self.nodes)), node_id=node_id)
        self.nodes[node.id] = node
        return self.view()

    def delete_node(self, node_id: str) -> GraphView:
        """Remove the node and every edge touching it.  Unknown ids are ignored."""
        self._ensure_editable("delete a node")
        if node_id not in self.nodes:
            return self.view()
        for key in [k for k, e in self.edges.items() if e.touches(node_id)]:
            del self.edges[key]
        del self.nodes[node_id]
        if self.start_node == node_id:
            self.start_node = None
        return self.view()

    def set_start_node(self, node_id: str) -> GraphView:
        self._ensure_editable("change the start node")
        if node_id not in self.nodes:
            raise InvalidInputError(f"Unknown node '{node_id}'")
        self.start_node = node_id
        return self.view()

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE OPS
    # ==================================================================
    def add_edge(self, u: str, v: str, weight: Optional[float] = None) -> GraphView:
        """
        Link u and v.  A second edge on the same unordered pair is a no-op.
        Weighted models draw a random weight when none is given.
        """
        self._ensure_editable("add an edge")
        for end in (u, v):
            if end not in self.nodes:
                raise InvalidInputError(f"Unknown node '{end}'")
        if u == v:
            raise InvalidInputError("An edge needs two different nodes")
        if frozenset((u, v)) in self.edges:
            logger.debug("edge %s–%s already exists, ignoring", u, v)
            return self.view()
        if weight is None and self.weighted:
            weight = self._rng.randint(*self.weight_range)
        self._insert_edge(u, v, weight)
        return self.view()

    def _insert_edge(self, u: str, v: str, weight: Optional[float]) -> None:
        self.edges[frozenset((u, v))] = _checked_edge(u, v, weight)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        return self.edges.get(frozenset((a, b)))

    # ==================================================================
    # BULK
    # ==================================================================
    def clear(self) -> GraphView:
        self._ensure_editable("clear the graph")
        self.nodes.clear()
        self.edges.clear()
        self.start_node = None
        return self.view()

    def load(self, nodes: Iterable[Node], edges: Iterable[Edge], start_node: Optional[str] = None) -> GraphView:
        """
        Replace the whole graph (sample graphs, session restore).
        Everything is checked before the model changes, so a bad graph
        leaves the current one untouched.
        """
        self._ensure_editable("load a graph")
        new_nodes: Dict[str, Node] = {}
        for n in nodes:
            new_nodes[n.id] = n.copy()
        new_edges: Dict[FrozenSet[str], Edge] = {}
        for e in edges:
            if e.u not in new_nodes or e.v not in new_nodes or e.u == e.v:
                raise InvalidInputError(f"Edge {e.u}–{e.v} does not join two known nodes")
            if e.key not in new_edges:
                new_edges[e.key] = _checked_edge(e.u, e.v, e.weight)
        if start_node is not None and start_node not in new_nodes:
            raise InvalidInputError(f"Unknown node '{start_node}'")
        self.nodes = new_nodes
        self.edges = new_edges
        self.start_node = start_node
        return self.view()

    # ==================================================================
    # READ
    # ==================================================================
    def view(self) -> GraphView:
        """Fresh (nodes, edges) lists for the caller to re-render."""
        return list(self.nodes.values()), list(self.edges.values())

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            nodes=tuple(n.copy() for n in self.nodes.values()),
            edges=tuple(e.copy() for e in self.edges.values()),
            start_node=self.start_node,
        )

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "weighted":   self.weighted,
            "start_node": self.start_node,
            "nodes":      [n.to_dict() for n in self.nodes.values()],
            "edges":      [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict, seed: Optional[int] = None) -> "GraphModel":
        g = cls(weighted=data.get("weighted", True), seed=seed)
        g.load(
            [Node.from_dict(nd) for nd in data.get("nodes", [])],
            [Edge.from_dict(ed) for ed in data.get("edges", [])],
            start_node=data.get("start_node"),
        )
        return g

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()}, start={self.start_node})"


def _is_positive_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and value > 0


def _checked_edge(u: str, v: str, weight) -> Edge:
    if weight is not None and not _is_positive_number(weight):
        raise InvalidInputError(f"Edge weight must be a positive number, got {weight!r}")
    return Edge(u, v, weight)
