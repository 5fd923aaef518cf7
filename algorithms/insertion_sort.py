"""
insertion_sort.py — Insertion Sort
===================================
The key is lifted out of arr[i]; larger elements shift right one slot
each (UPDATE_VALUE), then the key is written into the hole.  The hole is
always at j + 1, so each COMPARE names the element and the hole.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


PSEUDOCODE: List[str] = [
    "for i from 1 to n - 1:",                   # 0
    "    key ← arr[i]",                         # 1
    "    j ← i - 1",                            # 2
    "    while j >= 0 and arr[j] > key:",       # 3
    "        arr[j + 1] ← arr[j]",              # 4
    "        j ← j - 1",                        # 5
    "    arr[j + 1] ← key",                     # 6
]


def insertion_sort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)

    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0:
            rec.record(StepKind.COMPARE, [j, j + 1], f"Comparing {arr[j]} with key {key}", key, 3)
            if arr[j] <= key:
                break
            arr[j + 1] = arr[j]
            rec.record(StepKind.UPDATE_VALUE, [j + 1], f"Shifting {arr[j]} right to index {j + 1}", arr[j], 4)
            j -= 1
        arr[j + 1] = key
        rec.record(StepKind.UPDATE_VALUE, [j + 1], f"Inserting key {key} at index {j + 1}", key, 6)

    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(len(arr))), "Array is sorted")
    return rec.drain()
