"""
merge_sort.py — Merge Sort (top-down)
=====================================
SPLIT when a range is halved, COMPARE for each head-to-head comparison
while merging, MERGE for every value written back into the array.
Recursion depth is only log2(n), so the halves are plain `yield from`.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def mergeSort(a, lo, hi):",                   # 0
    "    if hi - lo <= 1: return",                 # 1
    "    mid ← (lo + hi) / 2",                     # 2
    "    mergeSort(a, lo, mid)",                   # 3
    "    mergeSort(a, mid, hi)",                   # 4
    "    while both halves non-empty:",            # 5
    "        take the smaller head into a[k]",     # 6
    "    copy the leftovers into a[k…]",           # 7
]


def merge_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    sb = StepBuilder(comparisons=0, writes=0)

    yield from _sort(a, 0, len(a), sb)
    yield sb.build(StepType.SORTED, a, "Merge sort complete", line=0, is_terminal=True)


def _sort(a: List[float], lo: int, hi: int, sb: StepBuilder) -> Generator[Step, None, None]:
    if hi - lo <= 1:
        return
    mid = (lo + hi) // 2
    yield sb.build(
        StepType.SPLIT, a,
        f"Split [{lo}..{hi - 1}] into [{lo}..{mid - 1}] and [{mid}..{hi - 1}]",
        line=2, left=range(lo, mid), right=range(mid, hi),
    )
    yield from _sort(a, lo, mid, sb)
    yield from _sort(a, mid, hi, sb)
    yield from _merge(a, lo, mid, hi, sb)


def _merge(a: List[float], lo: int, mid: int, hi: int, sb: StepBuilder) -> Generator[Step, None, None]:
    left, right = a[lo:mid], a[mid:hi]
    i = j = 0
    k = lo

    while i < len(left) and j < len(right):
        sb.count("comparisons")
        yield sb.build(
            StepType.COMPARE, a,
            f"Comparing {left[i]} and {right[j]}",
            line=5, merging=range(lo, hi), target=[k],
        )
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        sb.count("writes")
        yield sb.build(
            StepType.MERGE, a,
            f"Write {a[k]} to index {k}",
            line=6, merging=range(lo, hi), written=[k],
        )
        k += 1

    for value in left[i:] + right[j:]:
        a[k] = value
        sb.count("writes")
        yield sb.build(
            StepType.MERGE, a,
            f"Copy leftover {value} to index {k}",
            line=7, merging=range(lo, hi), written=[k],
        )
        k += 1
