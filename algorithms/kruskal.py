"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Sort every edge by weight, then take them cheapest-first, keeping an edge
only if its endpoints are still in different DSU sets.

Yields:
  1. SORTED "edges_sorted"  – the edge order the run will follow
  2. Per edge, in sorted order:
       INSERT "accepted"    – find(u) != find(v): union, add the weight
       DELETE "rejected"    – would close a cycle
  3. Terminal SEARCH "complete" with the total weight

Equal weights keep their insertion order (sorted() is stable), so the
same graph always produces the same run.  On a disconnected graph the
result is a minimum spanning forest.
"""

from typing import Dict, Generator, List, Tuple

from algorithms.dsu import DisjointSetUnion
from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                         # 0
    "    sort edges by weight",                    # 1
    "    dsu ← make_set(v) for every node",        # 2
    "    for (u, v, w) in sorted edges:",          # 3
    "        if find(u) != find(v):",              # 4
    "            union(u, v);  mst.add(u, v)",     # 5
    "        else: reject (cycle)",                # 6
    "    return mst",                              # 7
]


def kruskal(graph) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph, require_weights=True)
    label = {n.id: n.label for n in snap.nodes}

    # DSU is per run: fresh parent/rank over the contiguous index space
    dsu, index = DisjointSetUnion.for_ids(snap.node_ids())
    ordered = [e.as_tuple() for e in sorted(snap.edges, key=lambda e: e.weight)]

    sb = StepBuilder(accepted=0, rejected=0)
    accepted: List[Tuple] = []
    rejected: List[Tuple] = []
    total = 0

    def state(current) -> Dict:
        return {
            "edge":         current,
            "sorted_edges": ordered,
            "accepted":     list(accepted),
            "rejected":     list(rejected),
            "total_weight": total,
        }

    yield sb.build(
        StepType.SORTED, state(None),
        "Sorting all edges by weight: " + ", ".join(f"({label[u]},{label[v]}):{w}" for u, v, w in ordered),
        line=1, tag="edges_sorted",
        sorted_edges=[(u, v) for u, v, _ in ordered],
    )

    for edge in ordered:
        u, v, w = edge
        root_u = dsu.find(index[u])
        root_v = dsu.find(index[v])

        if root_u != root_v:
            dsu.union(root_u, root_v)
            total += w
            accepted.append(edge)
            sb.count("accepted")
            yield sb.build(
                StepType.INSERT, state(edge),
                f"✓ Accepted: Edge ({label[u]}, {label[v]}) - Total MST weight: {total}",
                line=5, tag="accepted",
                current=[u, v], accepted=[(a, b) for a, b, _ in accepted],
            )
        else:
            rejected.append(edge)
            sb.count("rejected")
            yield sb.build(
                StepType.DELETE, state(edge),
                f"✗ Rejected: Edge ({label[u]}, {label[v]}) forms a cycle",
                line=6, tag="rejected",
                current=[u, v], accepted=[(a, b) for a, b, _ in accepted],
            )

    yield sb.build(
        StepType.SEARCH, state(None),
        f"✓ Kruskal's Complete! MST Total Weight: {total}",
        line=7, tag="complete", is_terminal=True,
        accepted=[(a, b) for a, b, _ in accepted],
    )
