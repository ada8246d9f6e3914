"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest paths using a min-heap (heapq) with lazy deletion.

Yields a Step at:
  1. Initialise distances / push source   → SEARCH "init"
  2. Pop a stale heap entry                → DELETE "stale"
  3. Pop minimum-distance node             → VISIT  "settled"
  4. Each relaxation attempt               → INSERT "relaxed" or COMPARE "no_improvement"
  5. Heap empty                            → terminal SEARCH "complete"

Snapshot exposes:
  • "distances" – {node_id: distance}; None for nodes not reached yet
  • "previous"  – {node_id: parent on the best known path}
  • "queue"     – [(node_id, dist)] priority queue, cheapest first

Weights are validated positive, so the Dijkstra guarantee holds.
"""

import heapq
from typing import Dict, Generator, Hashable, List, Optional

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot, root_order


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    pq ← [(0, source)]",                      # 3
    "    parent ← {}",                             # 4
    "    while pq is not empty:",                  # 5
    "        (d, node) ← pq.pop_min()",            # 6
    "        if d > dist[node]: continue",         # 7
    "        settled.add(node)",                   # 8
    "        for (neighbour, w) in adj(node):",    # 9
    "            new_dist ← dist[node] + w",       # 10
    "            if new_dist < dist[neighbour]:",  # 11
    "                dist[neighbour] ← new_dist",  # 12
    "                parent[neighbour] = node",    # 13
    "                pq.push((new_dist, nbr))",    # 14
    "    return dist, parent",                     # 15
]


def dijkstra(graph, start: Optional[Hashable] = None) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph, require_weights=True)
    adj   = snap.adjacency()
    label = {n.id: n.label for n in snap.nodes}
    start = start if start is not None else snap.start_node
    roots = root_order(snap.node_ids(), start)

    sb = StepBuilder(settled=0, relaxations=0)
    dist:   Dict[Hashable, Optional[float]]    = {nid: None for nid in roots}
    parent: Dict[Hashable, Optional[Hashable]] = {nid: None for nid in roots}
    settled = set()
    heap: List = []
    seq = 0

    def state(active) -> Dict:
        return {
            "distances": dict(dist),
            "previous":  dict(parent),
            "settled":   frozenset(settled),
            "queue":     [(n, d) for d, _, n in sorted(heap)],
            "active":    active,
        }

    if roots:
        source = roots[0]
        dist[source] = 0
        heapq.heappush(heap, (0, seq, source))
        yield sb.build(
            StepType.SEARCH, state(None),
            f"Initialise: every distance is ∞ except source Node {label[source]} = 0",
            line=2, tag="init",
            root=[source],
        )

    while heap:
        d, _, node = heapq.heappop(heap)

        if node in settled:
            yield sb.build(
                StepType.DELETE, state(node),
                f"Pop ({label[node]}, {d}): stale entry, best is already {dist[node]}. Skip.",
                line=7, tag="stale",
                settled=settled, active=[node],
            )
            continue

        settled.add(node)
        sb.count("settled")
        yield sb.build(
            StepType.VISIT, state(node),
            f"Pop Node {label[node]} with distance {d}: this distance is now final",
            line=8, tag="settled",
            settled=settled, active=[node],
        )

        for nbr, edge in adj[node]:
            if nbr in settled:
                continue
            new_dist = d + edge.weight
            current = dist[nbr]
            if current is None or new_dist < current:
                dist[nbr] = new_dist
                parent[nbr] = node
                seq += 1
                heapq.heappush(heap, (new_dist, seq, nbr))
                sb.count("relaxations")
                shown = "∞" if current is None else current
                yield sb.build(
                    StepType.INSERT, state(node),
                    f"Relax {label[node]}→{label[nbr]}: {d} + {edge.weight} = {new_dist} < {shown}. Update!",
                    line=12, tag="relaxed",
                    settled=settled, active=[node], edge=[node, nbr],
                )
            else:
                yield sb.build(
                    StepType.COMPARE, state(node),
                    f"Edge {label[node]}→{label[nbr]}: {d} + {edge.weight} = {new_dist} ≥ {current}. No improvement.",
                    line=11, tag="no_improvement",
                    settled=settled, active=[node], edge=[node, nbr],
                )

    reached = sum(1 for v in dist.values() if v is not None)
    yield sb.build(
        StepType.SEARCH, state(None),
        f"Dijkstra complete: {reached} of {len(dist)} node(s) reachable.",
        line=15, tag="complete", is_terminal=True,
        settled=settled, tree=[(p, n) for n, p in parent.items() if p is not None],
    )


def shortest_path(distances, previous, target: Hashable) -> List[Hashable]:
    """Walk a "previous" map back from `target`; [] when it was never reached."""
    if distances.get(target) is None:
        return []
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path
