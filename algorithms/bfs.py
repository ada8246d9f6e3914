"""
bfs.py — Breadth-First Search
==============================
Layer-by-layer traversal from the start node (or the first node), then
from every still-unvisited node so disconnected graphs are covered too.

Yields a Step at:
  1. A new root is started  → SEARCH "component_started"
  2. Dequeue a node         → VISIT  (queue shown in the snapshot)
  3. Enqueue a new neighbour→ INSERT "enqueue"
  4. Done                   → terminal SEARCH "complete"
"""

from collections import deque
from typing import Dict, Generator, Hashable, List, Optional

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot, root_order


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph):",                             # 0
    "    for root in nodes (start first):",        # 1
    "        if root not visited:",                # 2
    "            queue ← [root];  visited.add(root)",  # 3
    "            while queue is not empty:",       # 4
    "                node ← queue.dequeue()",      # 5
    "                for neighbour in adj(node):", # 6
    "                    if neighbour not visited:",   # 7
    "                        visited.add(neighbour)",  # 8
    "                        queue.enqueue(neighbour)",# 9
]


def bfs(graph, start: Optional[Hashable] = None) -> Generator[Step, None, None]:
    snap  = as_snapshot(graph)
    adj   = snap.adjacency()
    label = {n.id: n.label for n in snap.nodes}
    start = start if start is not None else snap.start_node
    roots = root_order(snap.node_ids(), start)

    sb      = StepBuilder(components=0, visited=0, enqueued=0)
    visited = set()
    order:  List[Hashable] = []
    queue:  deque          = deque()

    def state(active) -> Dict:
        return {
            "visited":    frozenset(visited),
            "order":      list(order),
            "queue":      list(queue),
            "active":     active,
            "components": sb.metrics["components"],
        }

    for root in roots:
        if root in visited:
            continue

        sb.count("components")
        visited.add(root)
        queue.append(root)
        yield sb.build(
            StepType.SEARCH, state(None), f"Starting BFS traversal at Node {label[root]}",
            line=3, tag="component_started",
            queue=list(queue), root=[root],
        )

        while queue:
            node = queue.popleft()
            order.append(node)
            sb.count("visited")
            yield sb.build(
                StepType.VISIT, state(node),
                f"Dequeue Node {label[node]}: nodes discovered earliest are expanded first",
                line=5, tag="dequeue",
                visited=order, queue=list(queue), active=[node],
            )

            for nbr, _edge in adj[node]:
                if nbr in visited:
                    continue
                visited.add(nbr)
                queue.append(nbr)
                sb.count("enqueued")
                yield sb.build(
                    StepType.INSERT, state(node),
                    f"Enqueue Node {label[nbr]} (reached from Node {label[node]})",
                    line=9, tag="enqueue",
                    visited=order, queue=list(queue), active=[node], edge=[node, nbr],
                )

    yield sb.build(
        StepType.SEARCH, state(None),
        f"BFS traversal complete: {len(order)} node(s), {sb.metrics['components']} component(s).",
        line=0, tag="complete", is_terminal=True,
        visited=order,
    )
