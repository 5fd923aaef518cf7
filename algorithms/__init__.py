"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, category, fn, pseudocode, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the host both consume
it, so adding a new algorithm is: write the function, add one entry here.
Category decides the input shape (array vs. graph + endpoints) and which
reconstructor replays the log.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from algorithms.step import StepEvent, StepKind, TraceRecorder, edge_id

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.quicksort      import quicksort      as _quick,     PSEUDOCODE as _quick_pc
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.binary_search  import binary_search  as _bsearch,   PSEUDOCODE as _bsearch_pc
from algorithms.binary_search  import prepare_input  as _sorted_copy
from algorithms.bfs            import bfs            as _bfs,       PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc
from algorithms.astar          import astar          as _astar,     PSEUDOCODE as _ast_pc


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
SORTING     = "sorting"
SEARCH      = "search"
PATHFINDING = "pathfinding"

ARRAY_CATEGORIES = (SORTING, SEARCH)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    category:          str                    # SORTING / SEARCH / PATHFINDING
    fn:                Callable               # input → tuple of StepEvents
    pseudocode:        List[str]              # lines for the side-panel
    prepare:           Optional[Callable] = None   # array the run really starts from
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card

    @property
    def is_array(self) -> bool:
        return self.category in ARRAY_CATEGORIES

    def to_dict(self) -> Dict[str, object]:
        return {
            "key":         self.key,
            "label":       self.label,
            "category":    self.category,
            "pseudocode":  list(self.pseudocode),
            "complexity":  {"time": self.complexity_time, "space": self.complexity_space},
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "quicksort": AlgoInfo(
        key="quicksort", label="Quick Sort", category=SORTING, fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Divide-and-conquer: partitions the array around a pivot.",
    ),

    "bubblesort": AlgoInfo(
        key="bubblesort", label="Bubble Sort", category=SORTING, fn=_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly compares adjacent elements and swaps them.",
    ),

    "selectionsort": AlgoInfo(
        key="selectionsort", label="Selection Sort", category=SORTING, fn=_selection,
        pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted part and moves it to the front.",
    ),

    "insertionsort": AlgoInfo(
        key="insertionsort", label="Insertion Sort", category=SORTING, fn=_insertion,
        pseudocode=_insertion_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Inserts each element into its place in the sorted prefix.",
    ),

    "mergesort": AlgoInfo(
        key="mergesort", label="Merge Sort", category=SORTING, fn=_merge, pseudocode=_merge_pc,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Recursively sorts both halves, then merges them.",
    ),

    "heapsort": AlgoInfo(
        key="heapsort", label="Heap Sort", category=SORTING, fn=_heap, pseudocode=_heap_pc,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max heap, then extracts the maximum repeatedly.",
    ),

    "binarysearch": AlgoInfo(
        key="binarysearch", label="Binary Search", category=SEARCH, fn=_bsearch,
        pseudocode=_bsearch_pc, prepare=_sorted_copy,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the search interval of a sorted array each step.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", category=PATHFINDING, fn=_bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Expands the frontier one hop at a time; finds the fewest-hop path.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", category=PATHFINDING, fn=_dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Follows one branch to its end before backtracking; paths are not minimal.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", category=PATHFINDING, fn=_dijkstra,
        pseudocode=_dij_pc,
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Settles the nearest unvisited node each round; optimal with non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", category=PATHFINDING, fn=_astar, pseudocode=_ast_pc,
        complexity_time="O(E)", complexity_space="O(V)",
        description="Dijkstra + straight-line heuristic guidance toward the goal.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """AlgoInfo for `key`, or None when unregistered."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Every registered algorithm, in registry order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SORTING", "SEARCH", "PATHFINDING",
    "StepEvent", "StepKind", "TraceRecorder", "edge_id",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
]
