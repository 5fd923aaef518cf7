"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Every placement during a merge is an UPDATE_VALUE
on the working array; merge sort never records a SWAP.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


PSEUDOCODE: List[str] = [
    "def mergeSort(arr, l, r):",                    # 0
    "    if l < r:",                                # 1
    "        m ← (l + r) / 2",                      # 2
    "        mergeSort(arr, l, m)",                 # 3
    "        mergeSort(arr, m + 1, r)",             # 4
    "        merge(arr, l, m, r)",                  # 5
    "def merge(arr, l, m, r):",                     # 6
    "    while L and R: take the smaller head",     # 7
    "    copy whatever is left of L or R",          # 8
]


def merge_sort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)

    def merge(l: int, m: int, r: int) -> None:
        left, right = arr[l:m + 1], arr[m + 1:r + 1]
        i = j = 0
        k = l
        while i < len(left) and j < len(right):
            rec.record(StepKind.COMPARE, [l + i, m + 1 + j], f"Comparing {left[i]} with {right[j]}", line=7)
            if left[i] <= right[j]:
                arr[k] = left[i]
                i += 1
            else:
                arr[k] = right[j]
                j += 1
            rec.record(StepKind.UPDATE_VALUE, [k], f"Placing {arr[k]} at index {k}", arr[k], 7)
            k += 1
        for rest in (left[i:], right[j:]):
            for v in rest:
                arr[k] = v
                rec.record(StepKind.UPDATE_VALUE, [k], f"Placing remaining {v} at index {k}", v, 8)
                k += 1

    def sort(l: int, r: int) -> None:
        if l >= r:
            return
        m = (l + r) // 2
        sort(l, m)
        sort(m + 1, r)
        merge(l, m, r)

    sort(0, len(arr) - 1)
    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(len(arr))), "Array is sorted")
    return rec.drain()
