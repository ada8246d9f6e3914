"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Single-source shortest paths by relaxing every edge, round after round.

Structure:
  • Up to V-1 rounds of relaxing every edge in both directions.
    A round with no improvement ends the loop early.
  • One final check pass that would flag a negative cycle.  Weights are
    validated positive, so the check always comes back clean here.

Yields a Step for:
  1. Initialisation                         → SEARCH "init"
  2. Start of each round                    → SEARCH "round"
  3. Each relaxation attempt                → INSERT "relaxed" or COMPARE "no_improvement"
  4. A round without updates                → SEARCH "converged"
  5. The check pass                         → SEARCH "cycle_check"
  6. Done                                   → terminal SEARCH "complete"

Snapshot:
  • "round"          – current round number (1-indexed, 0 before the first)
  • "distances"      – {node_id: distance}; None for unreached nodes
  • "negative_cycle" – set on the terminal step
"""

from typing import Dict, Generator, Hashable, List, Optional

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot, root_order


PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, source):",             # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    parent ← {}",                             # 3
    "    for i in 1 … |V|-1:",                     # 4
    "        for each edge (u, v, w):",            # 5
    "            if dist[u] + w < dist[v]:",       # 6
    "                dist[v] ← dist[u] + w",       # 7
    "                parent[v] = u",               # 8
    "        if nothing changed: break",           # 9
    "    for each edge (u, v, w):",                # 10
    "        if dist[u] + w < dist[v]:",           # 11
    "            return NEGATIVE CYCLE",           # 12
    "    return dist, parent",                     # 13
]


def bellman_ford(graph, start: Optional[Hashable] = None) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph, require_weights=True)
    label = {n.id: n.label for n in snap.nodes}
    start = start if start is not None else snap.start_node
    roots = root_order(snap.node_ids(), start)

    # undirected: every edge can be relaxed both ways
    arcs = []
    for e in snap.edges:
        arcs.append((e.u, e.v, e.weight))
        arcs.append((e.v, e.u, e.weight))

    sb = StepBuilder(rounds=0, comparisons=0, relaxations=0)
    dist:   Dict[Hashable, Optional[float]]    = {nid: None for nid in roots}
    parent: Dict[Hashable, Optional[Hashable]] = {nid: None for nid in roots}
    round_no = 0

    def state(arc, negative_cycle=None) -> Dict:
        return {
            "round":          round_no,
            "distances":      dict(dist),
            "previous":       dict(parent),
            "edge":           arc,
            "negative_cycle": negative_cycle,
        }

    if roots:
        source = roots[0]
        dist[source] = 0
        yield sb.build(
            StepType.SEARCH, state(None),
            f"Initialise: every distance is ∞ except source Node {label[source]} = 0",
            line=2, tag="init",
            root=[source],
        )

    for round_no in range(1, len(roots)):
        sb.count("rounds")
        yield sb.build(
            StepType.SEARCH, state(None),
            f"Round {round_no} of {len(roots) - 1}: relax every edge",
            line=4, tag="round",
        )

        changed = False
        for u, v, w in arcs:
            if dist[u] is None:
                continue
            sb.count("comparisons")
            new_dist = dist[u] + w
            current = dist[v]
            if current is None or new_dist < current:
                dist[v] = new_dist
                parent[v] = u
                changed = True
                sb.count("relaxations")
                shown = "∞" if current is None else current
                yield sb.build(
                    StepType.INSERT, state((u, v, w)),
                    f"Relax {label[u]}→{label[v]}: {dist[u]} + {w} = {new_dist} < {shown}. Update!",
                    line=7, tag="relaxed",
                    edge=[u, v], active=[v],
                )
            else:
                yield sb.build(
                    StepType.COMPARE, state((u, v, w)),
                    f"Edge {label[u]}→{label[v]}: {dist[u]} + {w} = {new_dist} ≥ {current}. No improvement.",
                    line=6, tag="no_improvement",
                    edge=[u, v],
                )

        if not changed:
            yield sb.build(
                StepType.SEARCH, state(None),
                f"Round {round_no} changed nothing: distances are final",
                line=9, tag="converged",
            )
            break

    improvable = [
        (u, v) for u, v, w in arcs
        if dist[u] is not None and (dist[v] is None or dist[u] + w < dist[v])
    ]
    yield sb.build(
        StepType.SEARCH, state(None),
        "Check pass: one more sweep over every edge for a negative cycle",
        line=10, tag="cycle_check",
        improvable=improvable,
    )

    negative_cycle = bool(improvable)
    if negative_cycle:
        description = "Negative cycle detected!"
        line = 12
    else:
        reached = sum(1 for d in dist.values() if d is not None)
        description = f"Bellman-Ford complete: {reached} of {len(dist)} node(s) reachable, no negative cycle."
        line = 13
    yield sb.build(
        StepType.SEARCH, state(None, negative_cycle),
        description,
        line=line, tag="complete", is_terminal=True,
        tree=[(p, n) for n, p in parent.items() if p is not None],
    )
