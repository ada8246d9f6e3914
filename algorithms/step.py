"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The array or traversal state at this instant (`snapshot`)
    • Named index / id collections to colour (`highlights`):
      compared, swapped, visited, stack, accepted, …
    • What kind of event happened (`type`) and a finer `tag`
    • Which line of pseudocode is executing right now
    • A plain-English description of *what* just happened

Design decisions:
  - Step is a frozen dataclass and every container inside it is frozen
    on build (list → tuple, set → frozenset, dict → read-only mapping).
    It is a SNAPSHOT: nothing in it aliases the producer's working state.
  - StepBuilder is the per-run scratch-pad.  It owns the step counter
    and the running metrics (comparisons, swaps, components, …), so two
    runs never share counters.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class StepType(Enum):
    COMPARE = "compare"
    SWAP    = "swap"
    SORTED  = "sorted"
    PIVOT   = "pivot"
    VISIT   = "visit"
    MERGE   = "merge"
    SPLIT   = "split"
    INSERT  = "insert"
    DELETE  = "delete"
    SEARCH  = "search"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        type            : StepType; drives the renderer's colour scheme.
        snapshot        : Frozen copy of the visualised state (tuple for arrays,
                          read-only mapping for graph algorithms).
        highlights      : {set_name: tuple of indices / node ids}.
        description     : Human-readable explanation of the event.
        is_terminal     : True on the very last step of the run.
        tag             : Finer event name ("accepted", "backtrack", "found", …).
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        metrics         : Running tally copied from the run accumulator.
    """

    step_number:      int                     = 0
    type:             StepType                = StepType.COMPARE
    snapshot:         Any                     = ()
    highlights:       Mapping[str, Tuple]     = field(default_factory=lambda: MappingProxyType({}))
    description:      str                     = ""
    is_terminal:      bool                    = False
    tag:              Optional[str]           = None
    pseudocode_line:  int                     = 0
    metrics:          Mapping[str, Any]       = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form (tuples → lists, mappings → dicts)."""
        return {
            "step_number":     self.step_number,
            "type":            self.type.value,
            "snapshot":        thaw(self.snapshot),
            "highlights":      thaw(self.highlights),
            "description":     self.description,
            "is_terminal":     self.is_terminal,
            "tag":             self.tag,
            "pseudocode_line": self.pseudocode_line,
            "metrics":         thaw(self.metrics),
        }


# ---------------------------------------------------------------------------
# Deep freeze / thaw
# ---------------------------------------------------------------------------
def freeze(value: Any) -> Any:
    """Recursively copy `value` into immutable containers."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple, range)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): thaw(v) for k, v in value.items()}
    if isinstance(value, (tuple, list)):
        return [thaw(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((thaw(v) for v in value), key=str)
    return value


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Per-run accumulator that algorithms use to emit Steps cleanly.

    Usage inside an algorithm generator:
        sb = StepBuilder(comparisons=0, swaps=0)
        sb.count("comparisons")
        yield sb.build(StepType.COMPARE, arr, "Comparing 5 and 3",
                       compared=[0, 1], line=3)
    """

    def __init__(self, **counters: int):
        self.step_no: int            = 0
        self.metrics: Dict[str, Any] = dict(counters)

    def count(self, name: str, amount: int = 1) -> int:
        self.metrics[name] = self.metrics.get(name, 0) + amount
        return self.metrics[name]

    def build(
        self,
        step_type: StepType,
        snapshot: Any,
        description: str,
        line: int = 0,
        tag: Optional[str] = None,
        is_terminal: bool = False,
        **highlights: Any,
    ) -> Step:
        step = Step(
            step_number=self.step_no,
            type=step_type,
            snapshot=freeze(snapshot),
            highlights=freeze(highlights),
            description=description,
            is_terminal=is_terminal,
            tag=tag,
            pseudocode_line=line,
            metrics=freeze(self.metrics),
        )
        self.step_no += 1
        return step
