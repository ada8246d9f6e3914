"""
bucket_sort.py — Bucket Sort
============================
Distribution sort: every value is scattered into one of BUCKET_COUNT
equal-width ranges between the minimum and the maximum, each bucket is
sorted on its own, and the buckets are gathered back left to right.

Yields SPLIT for every scattered value, COMPARE when a bucket is sorted,
and INSERT for every value written back.  The bucket contents ride along
in the `buckets` highlight.
"""

from typing import Generator, Iterable, List

from algorithms.step import Step, StepBuilder, StepType
from algorithms.validation import validate_array

BUCKET_COUNT = 5


PSEUDOCODE: List[str] = [
    "def bucketSort(a):",                          # 0
    "    lo, hi ← min(a), max(a)",                 # 1
    "    for x in a:",                             # 2
    "        buckets[bucket(x)].append(x)",        # 3
    "    for b in buckets:",                       # 4
    "        sort(b)",                             # 5
    "    k ← 0",                                   # 6
    "    for b in buckets: for x in b:",           # 7
    "        a[k] ← x;  k ← k+1",                  # 8
]


def bucket_sort(values: Iterable[float]) -> Generator[Step, None, None]:
    a  = validate_array(values)
    n  = len(a)
    sb = StepBuilder(scattered=0, gathered=0)

    if n:
        lo, hi = min(a), max(a)
        span = hi - lo
        buckets: List[List[float]] = [[] for _ in range(BUCKET_COUNT)]

        for i, value in enumerate(a):
            b = bucket_index(value, lo, span)
            buckets[b].append(value)
            sb.count("scattered")
            yield sb.build(
                StepType.SPLIT, a,
                f"Scatter {value} (index {i}) into bucket {b}",
                line=3, tag="scatter", active=[i], bucket=[b], buckets=buckets,
            )

        for b, bucket in enumerate(buckets):
            if len(bucket) < 2:
                continue
            bucket.sort()
            yield sb.build(
                StepType.COMPARE, a,
                f"Sort bucket {b}: {', '.join(str(v) for v in bucket)}",
                line=5, tag="sort_bucket", bucket=[b], buckets=buckets,
            )

        k = 0
        for b, bucket in enumerate(buckets):
            for value in bucket:
                a[k] = value
                sb.count("gathered")
                yield sb.build(
                    StepType.INSERT, a,
                    f"Gather {value} from bucket {b} into index {k}",
                    line=8, tag="gather", placed=[k], bucket=[b], sorted=range(k + 1),
                )
                k += 1

    yield sb.build(StepType.SORTED, a, "Bucket sort complete", line=0, is_terminal=True)


def bucket_index(value, lo, span) -> int:
    """Equal-width bucket for `value`; the maximum lands in the last bucket."""
    if not span:
        return 0
    return min(int((value - lo) * BUCKET_COUNT / span), BUCKET_COUNT - 1)
