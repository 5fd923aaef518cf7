"""
heap_sort.py — Heap Sort
=========================
Builds a max heap bottom-up, then repeatedly swaps the root to the end
of the shrinking heap and sifts the new root down.
"""

from numbers import Real
from typing import List, Sequence, Tuple

from algorithms.inputs import as_values
from algorithms.step import StepEvent, StepKind, TraceRecorder


PSEUDOCODE: List[str] = [
    "buildMaxHeap(arr)",                            # 0
    "for i from n - 1 down to 1:",                  # 1
    "    swap(arr[0], arr[i])",                     # 2
    "    maxHeapify(arr, 0, i)",                    # 3
    "def maxHeapify(arr, i, n):",                   # 4
    "    largest ← max of i, left(i), right(i)",    # 5
    "    if largest != i: swap and recurse",        # 6
]


def heap_sort(values: Sequence[Real]) -> Tuple[StepEvent, ...]:
    rec = TraceRecorder()
    arr = as_values(values)
    n = len(arr)

    def heapify(size: int, i: int) -> None:
        largest, left, right = i, 2 * i + 1, 2 * i + 2
        if left < size:
            rec.record(
                StepKind.COMPARE, [largest, left],
                f"Comparing {arr[largest]} with left child {arr[left]}", line=5,
            )
            if arr[left] > arr[largest]:
                largest = left
        if right < size:
            rec.record(
                StepKind.COMPARE, [largest, right],
                f"Comparing {arr[largest]} with right child {arr[right]}", line=5,
            )
            if arr[right] > arr[largest]:
                largest = right
        if largest != i:
            rec.record(StepKind.SWAP, [i, largest], f"Heapify: swapping {arr[i]} with {arr[largest]}", line=6)
            arr[i], arr[largest] = arr[largest], arr[i]
            heapify(size, largest)

    for i in range(n // 2 - 1, -1, -1):
        heapify(n, i)
    for i in range(n - 1, 0, -1):
        rec.record(StepKind.SWAP, [0, i], f"Extracting max {arr[0]} to index {i}", line=2)
        arr[0], arr[i] = arr[i], arr[0]
        heapify(i, 0)

    if arr:
        rec.record(StepKind.HIGHLIGHT, list(range(n)), "Array is sorted")
    return rec.drain()
