"""
quick_sort.py — Quick Sort (Lomuto partition)
=============================================
The last element of each range is the pivot; smaller elements are swapped
to the left, then the pivot drops into its final slot.

Pending ranges live on an explicit stack (left range on top), so the step
order matches the recursive version without using Python recursion.
"""

from typing import Generator, Iterable, List, Tuple

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def quickSort(a, low, high):",                # 0
    "    if low < high:",                          # 1
    "        pivot ← a[high];  i ← low",           # 2
    "        for j in low … high-1:",              # 3
    "            if a[j] < pivot:",                # 4
    "                swap(a[i], a[j]);  i ← i+1",  # 5
    "        swap(a[i], a[high])",                 # 6
    "        quickSort(a, low, i-1)",              # 7
    "        quickSort(a, i+1, high)",             # 8
]


def quick_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    sb = StepBuilder(comparisons=0, swaps=0, partitions=0)
    ranges: List[Tuple[int, int]] = [(0, len(a) - 1)]

    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue

        pivot = a[high]
        sb.count("partitions")
        yield sb.build(
            StepType.PIVOT, a,
            f"Partition [{low}..{high}] around pivot {pivot}",
            line=2, pivot=[high], range=range(low, high + 1),
        )

        i = low
        for j in range(low, high):
            sb.count("comparisons")
            yield sb.build(
                StepType.COMPARE, a,
                f"Comparing {a[j]} with pivot {pivot}",
                line=4, pivot=[high], compared=[j, high], range=range(low, high + 1),
            )
            if a[j] < pivot:
                if i != j:
                    a[i], a[j] = a[j], a[i]
                    sb.count("swaps")
                    yield sb.build(
                        StepType.SWAP, a,
                        f"Swapped {a[i]} and {a[j]}",
                        line=5, pivot=[high], swapped=[i, j], range=range(low, high + 1),
                    )
                i += 1

        if i != high:
            a[i], a[high] = a[high], a[i]
            sb.count("swaps")
            yield sb.build(
                StepType.SWAP, a,
                f"Pivot {a[i]} placed at index {i}",
                line=6, tag="pivot_placed", pivot=[i], swapped=[i, high],
            )
        else:
            yield sb.build(
                StepType.PIVOT, a,
                f"Pivot {a[i]} already at its final index {i}",
                line=6, tag="pivot_placed", pivot=[i],
            )

        ranges.append((i + 1, high))
        ranges.append((low, i - 1))

    yield sb.build(StepType.SORTED, a, "Quick sort complete", line=0, is_terminal=True)
