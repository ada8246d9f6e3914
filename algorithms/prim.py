"""
prim.py — Prim's Minimum Spanning Tree
======================================
Grows one tree from the start node: the cheapest edge leaving the tree is
popped from a min-heap (heapq) and kept if it reaches a new node.  Heap
entries whose far end already joined the tree are rejected as stale.

When the heap runs dry while nodes remain, a new tree is started from the
next unvisited node, giving a minimum spanning forest.

Heap ties break on edge insertion order, so runs are deterministic.
"""

import heapq
from typing import Dict, Generator, Hashable, List, Optional, Tuple

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot, root_order


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                     # 0
    "    tree ← {start};  pq ← edges(start)",      # 1
    "    while pq is not empty:",                  # 2
    "        (w, u, v) ← pq.pop_min()",            # 3
    "        if v in tree: reject (stale)",        # 4
    "        tree.add(v);  mst.add(u, v)",         # 5
    "        pq.push(edges(v) leaving tree)",      # 6
    "    return mst",                              # 7
]


def prim(graph, start: Optional[Hashable] = None) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph, require_weights=True)
    adj   = snap.adjacency()
    label = {n.id: n.label for n in snap.nodes}
    seq   = {e.key: i for i, e in enumerate(snap.edges)}
    start = start if start is not None else snap.start_node
    roots = root_order(snap.node_ids(), start)

    sb = StepBuilder(trees=0, accepted=0, rejected=0)
    in_tree = set()
    heap: List[Tuple] = []
    accepted: List[Tuple] = []
    rejected: List[Tuple] = []
    total = 0

    def state(current) -> Dict:
        return {
            "edge":         current,
            "tree":         frozenset(in_tree),
            "frontier":     [(u, v, w) for w, _, u, v in sorted(heap)],
            "accepted":     list(accepted),
            "rejected":     list(rejected),
            "total_weight": total,
        }

    def push_edges(node) -> None:
        for nbr, edge in adj[node]:
            if nbr not in in_tree:
                heapq.heappush(heap, (edge.weight, seq[edge.key], node, nbr))

    for root in roots:
        if root in in_tree:
            continue

        in_tree.add(root)
        sb.count("trees")
        push_edges(root)
        yield sb.build(
            StepType.VISIT, state(None), f"Start growing a tree from Node {label[root]}",
            line=1, tag="component_started",
            tree=[root], root=[root],
        )

        while heap:
            w, _, u, v = heapq.heappop(heap)
            edge = (u, v, w)
            if v in in_tree:
                rejected.append(edge)
                sb.count("rejected")
                yield sb.build(
                    StepType.DELETE, state(edge),
                    f"✗ Rejected: Edge ({label[u]}, {label[v]}): Node {label[v]} is already in the tree",
                    line=4, tag="rejected",
                    current=[u, v], accepted=[(a, b) for a, b, _ in accepted],
                )
                continue

            in_tree.add(v)
            total += w
            accepted.append(edge)
            sb.count("accepted")
            push_edges(v)
            yield sb.build(
                StepType.INSERT, state(edge),
                f"✓ Accepted: Edge ({label[u]}, {label[v]}) - Total MST weight: {total}",
                line=5, tag="accepted",
                current=[u, v], accepted=[(a, b) for a, b, _ in accepted],
            )

    yield sb.build(
        StepType.SEARCH, state(None),
        f"✓ Prim's Complete! MST Total Weight: {total}",
        line=7, tag="complete", is_terminal=True,
        accepted=[(a, b) for a, b, _ in accepted],
    )
