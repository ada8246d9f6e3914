"""
heap_sort.py — Heap Sort
========================
Builds a max-heap in place, then repeatedly swaps the root to the end of
the shrinking heap.  Each fixed tail position gets a (non-terminal)
SORTED step; the run still ends with exactly one terminal SORTED step.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array


PSEUDOCODE: List[str] = [
    "def heapSort(a):",                            # 0
    "    for i in n/2-1 … 0: siftDown(a, i, n)",   # 1
    "    for end in n-1 … 1:",                     # 2
    "        swap(a[0], a[end])",                  # 3
    "        siftDown(a, 0, end)",                 # 4
    "def siftDown(a, root, size):",                # 5
    "    largest ← max(root, left, right)",        # 6
    "    if largest != root:",                     # 7
    "        swap(a[root], a[largest]); recurse",  # 8
]


def heap_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    n  = len(a)
    sb = StepBuilder(comparisons=0, swaps=0)

    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(a, i, n, sb)

    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        sb.count("swaps")
        yield sb.build(
            StepType.SWAP, a,
            f"Move max {a[end]} to index {end}",
            line=3, swapped=[0, end], sorted=range(end + 1, n),
        )
        yield sb.build(
            StepType.SORTED, a,
            f"Index {end} is final",
            line=3, sorted=range(end, n),
        )
        yield from _sift_down(a, 0, end, sb)

    yield sb.build(StepType.SORTED, a, "Heap sort complete", line=0, is_terminal=True)


def _sift_down(a: List[float], root: int, size: int, sb: StepBuilder) -> Generator[Step, None, None]:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size:
                sb.count("comparisons")
                yield sb.build(
                    StepType.COMPARE, a,
                    f"Comparing {a[child]} (index {child}) with {a[largest]} (index {largest})",
                    line=6, compared=[largest, child], heap=range(size),
                )
                if a[child] > a[largest]:
                    largest = child
        if largest == root:
            return
        a[root], a[largest] = a[largest], a[root]
        sb.count("swaps")
        yield sb.build(
            StepType.SWAP, a,
            f"Sift {a[largest]} down to index {largest}",
            line=8, swapped=[root, largest], heap=range(size),
        )
        root = largest
