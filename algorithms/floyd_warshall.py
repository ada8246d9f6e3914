"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The matrix algorithm.  The snapshot carries the full NxN distance matrix
at every step so a client can render it as a live grid.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Only candidate paths through k whose two legs are both finite are shown,
so the step count stays manageable.  Edges are undirected, so each pair
is checked once and both mirrored cells change together.

Snapshot:
  • "nodes" – matrix order (node insertion order)
  • "dist"  – rows of distances; None stands for ∞
  • "next"  – rows of next-hop node ids; None where no path exists
"""

from typing import Dict, Generator, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← adjacency matrix",                 # 1
    "    next ← initialise next-hop matrix",       # 2
    "    for k in 0 … n-1:",                       # 3
    "        for i in 0 … n-1:",                   # 4
    "            for j in 0 … n-1:",               # 5
    "                if dist[i][k]+dist[k][j]",    # 6
    "                      < dist[i][j]:",         # 7
    "                    dist[i][j] = …",          # 8
    "                    next[i][j] = next[i][k]", # 9
    "    return dist, next",                       # 10
]


def floyd_warshall(graph) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph, require_weights=True)
    nodes = snap.node_ids()
    idx   = snap.index_map()
    label = {n.id: n.label for n in snap.nodes}
    n     = len(nodes)

    dist = [[0 if i == j else None for j in range(n)] for i in range(n)]
    nxt  = [[nodes[j] if i == j else None for j in range(n)] for i in range(n)]
    for e in snap.edges:
        a, b = idx[e.u], idx[e.v]
        dist[a][b] = dist[b][a] = e.weight
        nxt[a][b], nxt[b][a] = e.v, e.u

    sb = StepBuilder(comparisons=0, updates=0)

    def state(k) -> Dict:
        return {
            "nodes": list(nodes),
            "dist":  [list(row) for row in dist],
            "next":  [list(row) for row in nxt],
            "k":     None if k is None else nodes[k],
        }

    yield sb.build(
        StepType.SEARCH, state(None),
        f"Initialise the {n}×{n} distance matrix: 0 on the diagonal, edge weights, ∞ elsewhere",
        line=1, tag="init",
    )

    for k in range(n):
        via = nodes[k]
        yield sb.build(
            StepType.SEARCH, state(k),
            f"Intermediate node {label[via]} (k={k})",
            line=3, tag="intermediate",
            via=[via],
        )
        for i in range(n):
            ik = dist[i][k]
            if i == k or ik is None:
                continue
            for j in range(i + 1, n):
                kj = dist[k][j]
                if j == k or kj is None:
                    continue
                a, b = nodes[i], nodes[j]
                candidate = ik + kj
                current = dist[i][j]
                sb.count("comparisons")
                if current is None or candidate < current:
                    dist[i][j] = dist[j][i] = candidate
                    nxt[i][j], nxt[j][i] = nxt[i][k], nxt[j][k]
                    sb.count("updates")
                    shown = "∞" if current is None else current
                    yield sb.build(
                        StepType.INSERT, state(k),
                        f"Shorter path {label[a]}→{label[via]}→{label[b]}: {ik} + {kj} = {candidate} < {shown}",
                        line=8, tag="improved",
                        cell=[a, b], via=[via],
                    )
                else:
                    yield sb.build(
                        StepType.COMPARE, state(k),
                        f"Path {label[a]}→{label[via]}→{label[b]}: {ik} + {kj} = {candidate} ≥ {current}. Keep.",
                        line=6, tag="no_improvement",
                        cell=[a, b], via=[via],
                    )

    yield sb.build(
        StepType.SEARCH, state(None),
        "Floyd-Warshall complete: all shortest paths computed.",
        line=10, tag="complete", is_terminal=True,
    )


def matrix_path(snapshot, source, target) -> List:
    """Follow the next-hop matrix of a Floyd-Warshall snapshot from source to target."""
    idx = {nid: i for i, nid in enumerate(snapshot["nodes"])}
    nxt = snapshot["next"]
    if nxt[idx[source]][idx[target]] is None:
        return []
    path = [source]
    while path[-1] != target:
        path.append(nxt[idx[path[-1]]][idx[target]])
    return path
