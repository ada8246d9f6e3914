"""
dfs.py — Depth-First Search (recursive order, explicit stack)
==============================================================
Visits nodes in exactly the order recursive DFS would, but the call stack
is a plain list of frames `[node, next_neighbour_index]` owned by the
generator.  Every Step can therefore show the "recursion stack" panel, and
deep graphs never hit Python's recursion limit.

Yields a Step at:
  1. A new root is started  → SEARCH "component_started"  (counter already bumped)
  2. A node is discovered   → VISIT  (pushed onto the stack)
  3. Control returns        → SEARCH "backtrack" to the parent frame
  4. All roots exhausted    → terminal SEARCH "complete", stack empty

Neighbours that are already visited are skipped without a step.
Roots are tried in node order, the designated start node first, so
disconnected graphs are covered component by component.
"""

from typing import Dict, Generator, Hashable, List, Optional

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import as_snapshot, root_order


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph):",                             # 0
    "    for root in nodes (start first):",        # 1
    "        if root not visited:",                # 2
    "            components ← components + 1",     # 3
    "            visit(root)",                     # 4
    "def visit(u):",                               # 5
    "    visited.add(u);  stack.push(u)",          # 6
    "    for v in adj(u):",                        # 7
    "        if v not visited: visit(v)",          # 8
    "    stack.pop()",                             # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph, start: Optional[Hashable] = None) -> Generator[Step, None, None]:
    """
    Args:
        graph : GraphModel or GraphSnapshot (a model is snapshotted first).
        start : Root to try first; defaults to the graph's start node.
    """
    snap  = as_snapshot(graph)
    adj   = snap.adjacency()
    label = {n.id: n.label for n in snap.nodes}
    start = start if start is not None else snap.start_node
    roots = root_order(snap.node_ids(), start)

    sb      = StepBuilder(components=0, visited=0)
    visited = set()
    order:  List[Hashable] = []
    frames: List[list]     = []          # [node, index of next neighbour to try]

    def state(active, came_from=None) -> Dict:
        return {
            "visited":    frozenset(visited),
            "order":      list(order),
            "stack":      [f[0] for f in frames],
            "active":     active,
            "from":       came_from,
            "components": sb.metrics["components"],
        }

    def discover(node, came_from=None) -> Step:
        visited.add(node)
        order.append(node)
        frames.append([node, 0])
        sb.count("visited")
        if came_from is None:
            text = f"Discovering Node {label[node]}"
        else:
            text = f"Moving from Node {label[came_from]} to unexplored Node {label[node]}"
        return sb.build(
            StepType.VISIT, state(node, came_from), text,
            line=6, tag="discover",
            visited=order, stack=[f[0] for f in frames], active=[node],
        )

    for root in roots:
        if root in visited:
            continue

        sb.count("components")
        yield sb.build(
            StepType.SEARCH, state(None), f"Starting DFS traversal at Node {label[root]}",
            line=3, tag="component_started",
            visited=order, root=[root],
        )
        yield discover(root)

        while frames:
            frame = frames[-1]
            u, i  = frame
            nbrs  = adj[u]
            while i < len(nbrs) and nbrs[i][0] in visited:
                i += 1
            frame[1] = i + 1

            if i < len(nbrs):
                yield discover(nbrs[i][0], came_from=u)
                continue

            frames.pop()
            if frames:
                parent = frames[-1][0]
                yield sb.build(
                    StepType.SEARCH, state(parent), f"Backtracking to Node {label[parent]}",
                    line=9, tag="backtrack",
                    visited=order, stack=[f[0] for f in frames], active=[parent],
                )

    yield sb.build(
        StepType.SEARCH, state(None),
        f"DFS traversal complete: {len(order)} node(s), {sb.metrics['components']} component(s).",
        line=0, tag="complete", is_terminal=True,
        visited=order,
    )
