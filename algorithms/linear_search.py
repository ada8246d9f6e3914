"""
linear_search.py — Linear Search
================================
Checks each element left to right; stops at the first match.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array, validate_target


PSEUDOCODE: List[str] = [
    "def linearSearch(a, target):",                # 0
    "    for i in 0 … n-1:",                       # 1
    "        if a[i] == target: return i",         # 2
    "    return NOT FOUND",                        # 3
]


def linear_search(values: Iterable[float], target: float) -> Generator[Step, None, None]:
    a = validate_array(values)
    validate_target(target)
    sb = StepBuilder(comparisons=0)

    for i, value in enumerate(a):
        sb.count("comparisons")
        yield sb.build(
            StepType.SEARCH, a,
            f"Checking element {value} at index {i}",
            line=2, tag="probe", current=[i],
        )
        if value == target:
            yield sb.build(
                StepType.SEARCH, a,
                f"Element {target} found at index {i}",
                line=2, tag="found", is_terminal=True, found=[i],
            )
            return

    yield sb.build(
        StepType.SEARCH, a,
        f"Element {target} not found in array",
        line=3, tag="not_found", is_terminal=True,
    )
