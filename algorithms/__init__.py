"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, produce

REGISTRY is a dict:
    {
        "bubble_sort": AlgoInfo(key, label, fn, pseudocode, category, input_kind, …),
        …
    }

Every `fn` is a Step Producer: a generator function that turns its input
(an array, or a graph) into a finite, deterministic sequence of Steps.
Calling it again on an equal input replays the identical sequence.
Adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, List, Optional

from graph import InvalidInputError

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.step             import Step, StepType, StepBuilder
from algorithms.dsu              import DisjointSetUnion
from algorithms.bubble_sort      import bubble_sort      as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort   import selection_sort   as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort   import insertion_sort   as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.quick_sort       import quick_sort       as _quick,     PSEUDOCODE as _quick_pc
from algorithms.merge_sort       import merge_sort       as _merge,     PSEUDOCODE as _merge_pc
from algorithms.heap_sort        import heap_sort        as _heap,      PSEUDOCODE as _heap_pc
from algorithms.bucket_sort      import bucket_sort      as _bucket,    PSEUDOCODE as _bucket_pc
from algorithms.linear_search    import linear_search    as _linear,    PSEUDOCODE as _linear_pc
from algorithms.binary_search    import binary_search    as _binary,    PSEUDOCODE as _binary_pc
from algorithms.dfs              import dfs              as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.bfs              import bfs              as _bfs,       PSEUDOCODE as _bfs_pc
from algorithms.kruskal          import kruskal          as _kruskal,   PSEUDOCODE as _kruskal_pc
from algorithms.prim             import prim             as _prim,      PSEUDOCODE as _prim_pc
from algorithms.dijkstra         import dijkstra         as _dijkstra,  PSEUDOCODE as _dijkstra_pc
from algorithms.bellman_ford     import bellman_ford     as _bellman,   PSEUDOCODE as _bellman_pc
from algorithms.floyd_warshall   import floyd_warshall   as _floyd,     PSEUDOCODE as _floyd_pc


# input kinds: what `produce` hands to the generator
ARRAY        = "array"          # fn(values)
ARRAY_TARGET = "array+target"   # fn(values, target)
GRAPH        = "graph"          # fn(graph, …)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dfs"
    label:             str                    # human label, e.g. "Depth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    category:          str                    # "sorting" | "searching" | "graph"
    input_kind:        str      = ARRAY
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    stable:            Optional[bool] = None  # sorting only
    has_start:         bool     = False       # honours a start node?
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "category":         self.category,
            "input_kind":       self.input_kind,
            "pseudocode":       list(self.pseudocode),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "stable":           self.stable,
            "has_start":        self.has_start,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        category="sorting", stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs until a pass makes no swap.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        category="sorting", stable=False,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted part and swaps it into place.",
    ),

    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        category="sorting", stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted prefix one key at a time by shifting larger items right.",
    ),

    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        category="sorting", stable=False,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts both sides.",
    ),

    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        category="sorting", stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits the array in halves, sorts each, and merges them back.",
    ),

    "heap_sort": AlgoInfo(
        key="heap_sort", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        category="sorting", stable=False,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then moves the maximum to the end repeatedly.",
    ),

    "bucket_sort": AlgoInfo(
        key="bucket_sort", label="Bucket Sort", fn=_bucket, pseudocode=_bucket_pc,
        category="sorting", stable=True,
        complexity_time="O(n + k) avg, O(n²) worst", complexity_space="O(n + k)",
        description="Scatters values into equal-width buckets, sorts each, and gathers them back.",
    ),

    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", fn=_linear, pseudocode=_linear_pc,
        category="searching", input_kind=ARRAY_TARGET,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element in turn until the target turns up.",
    ),

    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", fn=_binary, pseudocode=_binary_pc,
        category="searching", input_kind=ARRAY_TARGET,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the search window of a sorted array on every probe.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        category="graph", input_kind=GRAPH, has_start=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Watch the recursion stack grow and shrink.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        category="graph", input_kind=GRAPH, has_start=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer using a FIFO queue.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", fn=_kruskal, pseudocode=_kruskal_pc,
        category="graph", input_kind=GRAPH,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Adds the cheapest edges that don't form cycles (union-find).",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", fn=_prim, pseudocode=_prim_pc,
        category="graph", input_kind=GRAPH, has_start=True,
        complexity_time="O(E log V)", complexity_space="O(V + E)",
        description="Grows one tree from the start node, always taking the cheapest edge out.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Shortest Path", fn=_dijkstra, pseudocode=_dijkstra_pc,
        category="graph", input_kind=GRAPH, has_start=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Settles nodes in order of distance using a min-heap priority queue.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman-Ford", fn=_bellman, pseudocode=_bellman_pc,
        category="graph", input_kind=GRAPH, has_start=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every edge in rounds until no distance improves.",
    ),

    "floyd_warshall": AlgoInfo(
        key="floyd_warshall", label="Floyd-Warshall", fn=_floyd, pseudocode=_floyd_pc,
        category="graph", input_kind=GRAPH,
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths: try every node as an intermediate hop.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


def produce(key: str, data: Any, **kwargs: Any) -> Generator[Step, None, None]:
    """
    Start the Step Producer registered under `key`.

    `data` is the array (sorting / searching) or the GraphModel /
    GraphSnapshot (graph algorithms).  Searches need `target=`; graph
    traversals accept an optional `start=`.
    """
    info = get_algorithm(key)
    if info is None:
        raise InvalidInputError(f"Unknown algorithm: {key}")
    if info.input_kind == ARRAY_TARGET:
        if "target" not in kwargs:
            raise InvalidInputError(f"{info.label} needs a target value")
        return info.fn(data, kwargs["target"])
    if info.input_kind == ARRAY:
        return info.fn(data)
    if info.has_start:
        return info.fn(data, start=kwargs.get("start"))
    return info.fn(data)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "ARRAY",
    "ARRAY_TARGET",
    "GRAPH",
    "Step",
    "StepType",
    "StepBuilder",
    "DisjointSetUnion",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "produce",
]
