"""
quicksort.py — Quick Sort (Lomuto partition, last-element pivot)
=================================================================
Records at every meaningful event:
  1. Partition starts  →  MARK_PIVOT on arr[high]
  2. arr[j] tested against the pivot  →  COMPARE
  3. arr[j] moved into the low side  →  SWAP (only when it actually moves)
  4. Pivot dropped into its final slot  →  SWAP (one target if already there)
  5. Whole array done  →  HIGHLIGHT every index as sorted

Recursion uses the Python call stack; inputs are small.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def quickSort(arr, low, high):",               # 0
    "    if low < high:",                           # 1
    "        pivot ← arr[high]",                    # 2
    "        i ← low - 1",                          # 3
    "        for j from low to high - 1:",          # 4
    "            if arr[j] < pivot:",               # 5
    "                i ← i + 1; swap(arr[i], arr[j])",  # 6
    "        swap(arr[i + 1], arr[high])",          # 7
    "        quickSort(arr, low, i)",               # 8
    "        quickSort(arr, i + 2, high)",          # 9
]


def quicksort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)

    def partition(low: int, high: int) -> int:
        pivot = arr[high]
        rec.record(StepKind.MARK_PIVOT, [high], f"Picked pivot {pivot} at index {high}", pivot, 2)
        i = low - 1
        for j in range(low, high):
            rec.record(StepKind.COMPARE, [j, high], f"Comparing {arr[j]} with pivot {pivot}", line=5)
            if arr[j] < pivot:
                i += 1
                if i != j:
                    rec.record(StepKind.SWAP, [i, j], f"Swapping {arr[i]} and {arr[j]}", line=6)
                    arr[i], arr[j] = arr[j], arr[i]
        if i + 1 != high:
            rec.record(StepKind.SWAP, [i + 1, high], f"Placing pivot {pivot} at index {i + 1}", line=7)
            arr[i + 1], arr[high] = arr[high], arr[i + 1]
        else:
            rec.record(StepKind.SWAP, [high], f"Pivot {pivot} is already in place", line=7)
        return i + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            p = partition(low, high)
            sort(low, p - 1)
            sort(p + 1, high)

    sort(0, len(arr) - 1)
    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(len(arr))), "Array is sorted")
    return rec.drain()
