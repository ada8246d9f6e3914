"""
selection_sort.py — Selection Sort
==================================
Each pass scans the unsorted suffix for its minimum and swaps it to the
front of that suffix.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def selectionSort(a):",                       # 0
    "    for i in 0 … n-2:",                       # 1
    "        min ← i",                             # 2
    "        for j in i+1 … n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",       # 4
    "        swap(a[i], a[min])",                  # 5
    "    return a",                                # 6
]


def selection_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    n  = len(a)
    sb = StepBuilder(comparisons=0, swaps=0)

    for i in range(n - 1):
        smallest = i
        yield sb.build(
            StepType.PIVOT, a,
            f"Pass {i + 1}: assume {a[i]} (index {i}) is the minimum",
            line=2, minimum=[i], sorted=range(i),
        )

        for j in range(i + 1, n):
            sb.count("comparisons")
            yield sb.build(
                StepType.COMPARE, a,
                f"Comparing {a[j]} with current minimum {a[smallest]}",
                line=4, compared=[smallest, j], sorted=range(i),
            )
            if a[j] < a[smallest]:
                smallest = j

        if smallest != i:
            a[i], a[smallest] = a[smallest], a[i]
            sb.count("swaps")
            yield sb.build(
                StepType.SWAP, a,
                f"Moved minimum {a[i]} to index {i}",
                line=5, swapped=[i, smallest], sorted=range(i + 1),
            )

    yield sb.build(StepType.SORTED, a, "Selection sort complete", line=6, is_terminal=True)
