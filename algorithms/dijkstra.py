"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Array-scan Dijkstra over an explicit unvisited set (O(V²)), which is the
form the pseudocode panel teaches.

Records:
  1. Initialise distances  →  MESSAGE on the source
  2. Select the unvisited node with minimum tentative distance  →  VISIT (value = distance)
  3. Each outgoing edge relaxation attempt  →  COMPARE [neighbour, edge] (value = candidate)
  4. Successful relaxation  →  UPDATE_VALUE [neighbour, edge] (value = new distance)
  5. Goal selected  →  HIGHLIGHT the shortest path and stop

Ties in step 2 go to the node declared first in the graph.  The run stops
the instant the goal is selected, not when it is first relaxed.  If every
remaining node is at ∞, the goal is unreachable and no HIGHLIGHT is recorded.

Correctness note: Dijkstra requires non-negative weights; Graph refuses
negative edges on construction.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph
from algorithms.inputs import check_endpoints, walk_back
from algorithms.step import StepEvent, StepKind, TraceRecorder, edge_id


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    dist ← {v: ∞ for v in V}; dist[source] ← 0",  # 1
    "    unvisited ← V",                           # 2
    "    while unvisited is not empty:",            # 3
    "        u ← unvisited node with min dist[u]", # 4
    "        if u == target: return path",         # 5
    "        for (v, w) in adj(u):",               # 6
    "            alt ← dist[u] + w",               # 7
    "            if alt < dist[v]:",               # 8
    "                dist[v] ← alt; parent[v] ← u",  # 9
    "    return NOT FOUND",                        # 10
]


def dijkstra(graph: Graph, source: str, target: str) -> Tuple[StepEvent, ...]:
    check_endpoints(graph, source, target)

    INF = float("inf")
    rec = TraceRecorder()

    dist:   Dict[str, float]         = {nid: INF for nid in graph.nodes}
    parent: Dict[str, Optional[str]] = {source: None}
    unvisited: set                   = set(graph.nodes)
    dist[source] = 0

    rec.record(StepKind.MESSAGE, [source], f"Initializing distances. Distance to {source} is 0.", line=1)

    while unvisited:
        node = _closest(graph, unvisited, dist)
        if dist[node] == INF:
            break
        unvisited.discard(node)
        rec.record(
            StepKind.VISIT, [node],
            f"Selected node {node} with smallest distance ({dist[node]})", dist[node], 4,
        )

        if node == target:
            path = walk_back(parent, target)
            rec.record(
                StepKind.HIGHLIGHT, path,
                f"Shortest path found! Distance {dist[target]}: {' → '.join(path)}", line=5,
            )
            return rec.drain()

        for nbr, edge in graph.neighbours(node):
            alt = dist[node] + edge.weight
            eid = edge_id(node, nbr)
            rec.record(
                StepKind.COMPARE, [nbr, eid],
                f"Evaluating edge {node} → {nbr} (weight {edge.weight}): {alt} vs {dist[nbr]}", alt, 8,
            )
            if alt < dist[nbr]:
                dist[nbr] = alt
                parent[nbr] = node
                rec.record(StepKind.UPDATE_VALUE, [nbr, eid], f"New shorter path to {nbr} found: {alt}", alt, 9)

    return rec.drain()


def _closest(graph: Graph, unvisited: set, dist: Dict[str, float]) -> str:
    """First-declared node of minimum tentative distance."""
    best: Optional[str] = None
    for nid in graph.nodes:
        if nid in unvisited and (best is None or dist[nid] < dist[best]):
            best = nid
    return best
