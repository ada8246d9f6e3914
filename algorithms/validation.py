"""
Input checks shared by every producer.  Producers call these before the
first `yield`, so a bad input raises instead of emitting a broken Step.
"""

import math
import numbers
from typing import Hashable, Iterable, List, Optional

from graph import GraphModel, GraphSnapshot, InvalidInputError


def validate_array(values: Iterable) -> List[float]:
    """Return a private list copy of `values`, which must all be real numbers."""
    if values is None or isinstance(values, (str, bytes, dict)):
        raise InvalidInputError("Expected a sequence of numbers")
    try:
        arr = list(values)
    except TypeError:
        raise InvalidInputError("Expected a sequence of numbers") from None
    for i, v in enumerate(arr):
        if not is_number(v):
            raise InvalidInputError(f"Element {i} ({v!r}) is not a number")
    return arr


def validate_target(target) -> None:
    if not is_number(target):
        raise InvalidInputError(f"Search target {target!r} is not a number")


def is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def as_snapshot(graph, require_weights: bool = False) -> GraphSnapshot:
    """Accept a GraphModel (snapshotted now) or a GraphSnapshot, and validate it."""
    if isinstance(graph, GraphModel):
        snap = graph.snapshot()
    elif isinstance(graph, GraphSnapshot):
        snap = graph
    else:
        raise InvalidInputError(f"Expected a graph, got {type(graph).__name__}")
    snap.validate(require_weights=require_weights)
    return snap


def root_order(node_ids: List[Hashable], start: Optional[Hashable]) -> List[Hashable]:
    """Traversal roots: node order with `start` moved to the front."""
    if start is None:
        return list(node_ids)
    if start not in node_ids:
        raise InvalidInputError(f"Start node '{start}' is not in the graph")
    return [start] + [nid for nid in node_ids if nid != start]
