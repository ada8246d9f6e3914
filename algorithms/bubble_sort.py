"""
bubble_sort.py — Bubble Sort
============================
Repeatedly walks adjacent pairs and swaps the ones that are out of order.

Yields:
  1. COMPARE per adjacent comparison   (array unchanged, compared = [j, j+1])
  2. SWAP right after an out-of-order pair was swapped  (swapped = [j, j+1])
  3. One terminal SORTED step with the sorted array and no highlights

A pass without any swap ends the run early.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def bubbleSort(a):",                          # 0
    "    for i in 0 … n-2:",                       # 1
    "        for j in 0 … n-i-2:",                 # 2
    "            if a[j] > a[j+1]:",               # 3
    "                swap(a[j], a[j+1])",          # 4
    "        if no swap this pass: break",         # 5
    "    return a",                                # 6
]


def bubble_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    n  = len(a)
    sb = StepBuilder(comparisons=0, swaps=0)

    for i in range(n - 1):
        swapped_this_pass = False

        for j in range(n - i - 1):
            sb.count("comparisons")
            yield sb.build(
                StepType.COMPARE, a,
                f"Comparing {a[j]} and {a[j + 1]}",
                line=3, compared=[j, j + 1],
            )

            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped_this_pass = True
                sb.count("swaps")
                yield sb.build(
                    StepType.SWAP, a,
                    f"Swapped {a[j + 1]} and {a[j]}",
                    line=4, swapped=[j, j + 1],
                )

        if not swapped_this_pass:
            break

    yield sb.build(StepType.SORTED, a, "Sorting complete!", line=6, is_terminal=True)
