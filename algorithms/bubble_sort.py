"""
bubble_sort.py — Bubble Sort
=============================
Adjacent pairs are compared left to right; a COMPARE always comes before
the SWAP it gates.  After pass i the largest i+1 values sit at the end.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


PSEUDOCODE: List[str] = [
    "for i from 0 to n - 1:",                               # 0
    "    for j from 0 to n - i - 2:",                       # 1
    "        if arr[j] > arr[j + 1]:",                      # 2
    "            swap(arr[j], arr[j + 1])",                 # 3
]


def bubble_sort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)
    n = len(arr)

    for i in range(n):
        for j in range(n - i - 1):
            rec.record(StepKind.COMPARE, [j, j + 1], f"Comparing {arr[j]} and {arr[j + 1]}", line=2)
            if arr[j] > arr[j + 1]:
                rec.record(StepKind.SWAP, [j, j + 1], f"Swapping {arr[j]} and {arr[j + 1]}", line=3)
                arr[j], arr[j + 1] = arr[j + 1], arr[j]

    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(n)), "Array is sorted")
    return rec.drain()
