"""
selection_sort.py — Selection Sort
===================================
Scans the unsorted suffix for its minimum and swaps it to the front.
The swap is only recorded when the minimum is not already in place.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


PSEUDOCODE: List[str] = [
    "for i from 0 to n - 1:",                           # 0
    "    min_idx ← i",                                  # 1
    "    for j from i + 1 to n - 1:",                   # 2
    "        if arr[j] < arr[min_idx]: min_idx ← j",    # 3
    "    swap(arr[min_idx], arr[i])",                   # 4
]


def selection_sort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)
    n = len(arr)

    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            rec.record(StepKind.COMPARE, [smallest, j], f"Comparing {arr[smallest]} with {arr[j]}", line=3)
            if arr[j] < arr[smallest]:
                smallest = j
        if smallest != i:
            rec.record(
                StepKind.SWAP, [i, smallest],
                f"Swapping minimum {arr[smallest]} into index {i}", line=4,
            )
            arr[i], arr[smallest] = arr[smallest], arr[i]

    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(n)), "Array is sorted")
    return rec.drain()
