"""
insertion_sort.py — Insertion Sort
==================================
Grows a sorted prefix one key at a time: larger prefix elements shift
right until the key's slot opens up.

Yields PIVOT when a key is picked, COMPARE for every key comparison
(including the one that stops the shifting), INSERT for each shift and
for the final placement of the key.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def insertionSort(a):",                       # 0
    "    for i in 1 … n-1:",                       # 1
    "        key ← a[i];  j ← i-1",                # 2
    "        while j >= 0 and a[j] > key:",        # 3
    "            a[j+1] ← a[j]",                   # 4
    "            j ← j-1",                         # 5
    "        a[j+1] ← key",                        # 6
    "    return a",                                # 7
]


def insertion_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    n  = len(a)
    sb = StepBuilder(comparisons=0, shifts=0)

    for i in range(1, n):
        key = a[i]
        j   = i - 1
        yield sb.build(
            StepType.PIVOT, a,
            f"Pick key {key} from index {i}",
            line=2, key=[i], sorted=range(i),
        )

        while j >= 0:
            sb.count("comparisons")
            yield sb.build(
                StepType.COMPARE, a,
                f"Compare {a[j]} (index {j}) with key {key}",
                line=3, key=[i], compared=[j],
            )
            if a[j] <= key:
                break
            a[j + 1] = a[j]
            sb.count("shifts")
            yield sb.build(
                StepType.INSERT, a,
                f"Shift {a[j]} from index {j} to index {j + 1}",
                line=4, tag="shift", shifted=[j, j + 1],
            )
            j -= 1

        a[j + 1] = key
        yield sb.build(
            StepType.INSERT, a,
            f"Insert key {key} at index {j + 1}",
            line=6, tag="place", placed=[j + 1], sorted=range(i + 1),
        )

    yield sb.build(StepType.SORTED, a, "Insertion sort complete", line=7, is_terminal=True)
