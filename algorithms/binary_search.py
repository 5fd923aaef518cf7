"""
binary_search.py — Binary Search
=================================
The algorithm sorts its own working copy ascending before searching; the
caller's ordering is irrelevant.  Records:
  1. Each candidate midpoint  →  COMPARE
  2. Hit  →  FOUND, and the run stops right there
  3. Miss →  HIGHLIGHT of the half that was just ruled out

If the value is absent the log simply ends without a FOUND.  That is a
failed search, not an error.

With no explicit value, the middle element of the sorted copy is the
target, which needs at least one element.
"""

from numbers import Real
from typing import List, Optional, Sequence, Tuple

from algorithms.inputs import as_values, is_number
from algorithms.step import StepEvent, StepKind, TraceRecorder
from errors import InvalidInputError


PSEUDOCODE: List[str] = [
    "def binarySearch(arr, target):",               # 0
    "    low ← 0, high ← n - 1",                    # 1
    "    while low <= high:",                       # 2
    "        mid ← (low + high) / 2",               # 3
    "        if arr[mid] == target: return mid",    # 4
    "        if arr[mid] < target: low ← mid + 1",  # 5
    "        else: high ← mid - 1",                 # 6
    "    return NOT FOUND",                         # 7
]


def prepare_input(values: Sequence[Real]) -> Tuple[Real, ...]:
    """The array a search actually runs on — and the reconstructor starts from."""
    return tuple(sorted(as_values(values)))


def default_target(values: Sequence[Real]) -> Real:
    arr = prepare_input(values)
    if not arr:
        raise InvalidInputError("Binary search needs at least one element to pick a target from")
    return arr[len(arr) // 2]


def binary_search(values: Sequence[Real], target: Optional[Real] = None) -> Tuple[StepEvent, ...]:
    arr = list(prepare_input(values))
    if target is None:
        target = default_target(arr)
    elif not is_number(target):
        raise InvalidInputError(f"Search value is not a finite number: {target!r}")

    rec = TraceRecorder()
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        rec.record(StepKind.COMPARE, [mid], f"Middle element {arr[mid]} vs target {target}", arr[mid], 4)
        if arr[mid] == target:
            rec.record(StepKind.FOUND, [mid], f"Found {target} at index {mid}", arr[mid], 4)
            return rec.drain()
        if arr[mid] < target:
            rec.record(
                StepKind.HIGHLIGHT, list(range(low, mid + 1)),
                f"{arr[mid]} < {target}: discard indices {low}..{mid}", line=5,
            )
            low = mid + 1
        else:
            rec.record(
                StepKind.HIGHLIGHT, list(range(mid, high + 1)),
                f"{arr[mid]} > {target}: discard indices {mid}..{high}", line=6,
            )
            high = mid - 1
    return rec.drain()
