"""
binary_search.py — Binary Search
================================
Halves the candidate window [low, high] each probe.  The input must
already be sorted ascending; an unsorted array is rejected up front.

Per iteration: one "probe" step (mid highlighted) and, unless the probe
hit, one "narrow" step showing the new window.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array, validate_target
from graph import InvalidInputError


PSEUDOCODE: List[str] = [
    "def binarySearch(a, target):",                # 0
    "    low ← 0;  high ← n-1",                    # 1
    "    while low <= high:",                      # 2
    "        mid ← (low + high) / 2",              # 3
    "        if a[mid] == target: return mid",     # 4
    "        if a[mid] < target: low ← mid+1",     # 5
    "        else: high ← mid-1",                  # 6
    "    return NOT FOUND",                        # 7
]


def binary_search(values: Iterable[float], target: float) -> Generator[Step, None, None]:
    a = validate_array(values)
    validate_target(target)
    if any(a[i] > a[i + 1] for i in range(len(a) - 1)):
        raise InvalidInputError("Binary search needs an array sorted in ascending order")

    sb   = StepBuilder(comparisons=0)
    low  = 0
    high = len(a) - 1

    while low <= high:
        mid = (low + high) // 2
        sb.count("comparisons")
        yield sb.build(
            StepType.SEARCH, a,
            f"Mid index {mid}: comparing {a[mid]} with {target}",
            line=3, tag="probe", window=range(low, high + 1), mid=[mid],
        )

        if a[mid] == target:
            yield sb.build(
                StepType.SEARCH, a,
                f"Target {target} found at index {mid}",
                line=4, tag="found", is_terminal=True, found=[mid],
            )
            return

        if a[mid] < target:
            low = mid + 1
            description = f"{a[mid]} < {target}: move low to {low}"
            line = 5
        else:
            high = mid - 1
            description = f"{a[mid]} > {target}: move high to {high}"
            line = 6
        yield sb.build(
            StepType.SEARCH, a, description,
            line=line, tag="narrow", window=range(low, high + 1),
        )

    yield sb.build(
        StepType.SEARCH, a,
        f"Target {target} not found in array",
        line=7, tag="not_found", is_terminal=True,
    )
