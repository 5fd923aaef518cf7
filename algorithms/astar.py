"""
astar.py — A* Search
=====================
A* over fixed node positions.  The heuristic is the straight-line
distance from a node to the goal divided by HEURISTIC_SCALE, so pixel
layouts and lattice cells both land in edge-weight units.

Records the same event types as Dijkstra, with a {"g", "h", "f"} cost
breakdown as the value of every VISIT and UPDATE_VALUE:
  1. Start  →  MESSAGE on the source
  2. Pop the open node of minimum f  →  VISIT
  3. Each relaxation attempt  →  COMPARE [neighbour, edge] (value = tentative g)
  4. Improvement  →  UPDATE_VALUE [neighbour, edge]
  5. Goal popped  →  HIGHLIGHT the path and stop

Ties on f go to the node declared first in the graph.
"""

from typing import Dict, List, Optional, Tuple

from config import HEURISTIC_SCALE
from graph import Graph
from algorithms.inputs import check_endpoints, walk_back
from algorithms.step import StepEvent, StepKind, TraceRecorder, edge_id


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(graph, source, target, h):",        # 0
    "    g[source] ← 0",                           # 1
    "    f[source] ← h(source, target)",           # 2
    "    open_set ← {source}",                     # 3
    "    while open_set:",                          # 4
    "        node ← open node with min f",         # 5
    "        if node == target: return path",      # 6
    "        for (nbr, w) in adj(node):",          # 7
    "            tentative_g ← g[node] + w",       # 8
    "            if tentative_g < g[nbr]:",        # 9
    "                parent[nbr] ← node",          # 10
    "                g[nbr] ← tentative_g",        # 11
    "                f[nbr] ← g[nbr] + h(nbr)",    # 12
    "                open_set.add(nbr)",           # 13
    "    return NOT FOUND",                        # 14
]


def astar(
    graph: Graph,
    source: str,
    target: str,
    scale: float = HEURISTIC_SCALE,
) -> Tuple[StepEvent, ...]:
    """
    Args:
        graph  : The graph; node positions feed the heuristic.
        source : Start node id.
        target : Goal node id.
        scale  : Divisor applied to the straight-line distance.
    """
    check_endpoints(graph, source, target)

    INF  = float("inf")
    goal = graph.get_node(target)

    def h(nid: str) -> float:
        return graph.get_node(nid).distance_to(goal) / scale

    rec = TraceRecorder()
    g_score: Dict[str, float]          = {nid: INF for nid in graph.nodes}
    f_score: Dict[str, float]          = {nid: INF for nid in graph.nodes}
    parent:  Dict[str, Optional[str]]  = {source: None}
    g_score[source] = 0
    f_score[source] = h(source)
    open_set: set = {source}

    rec.record(
        StepKind.MESSAGE, [source],
        f"A* init: g({source}) = 0, h({source}) = {h(source):.2f}", _scores(source, g_score, h), 2,
    )

    while open_set:
        node = _lowest_f(graph, open_set, f_score)
        open_set.discard(node)
        rec.record(
            StepKind.VISIT, [node],
            f"Expanding node {node} (f = {f_score[node]:.1f})", _scores(node, g_score, h), 5,
        )

        if node == target:
            path = walk_back(parent, target)
            rec.record(
                StepKind.HIGHLIGHT, path,
                f"A* reached goal {target} with cost {g_score[target]}: {' → '.join(path)}", line=6,
            )
            return rec.drain()

        for nbr, edge in graph.neighbours(node):
            tentative_g = g_score[node] + edge.weight
            eid = edge_id(node, nbr)
            rec.record(
                StepKind.COMPARE, [nbr, eid],
                f"Edge {node} → {nbr}: tentative g = {tentative_g} vs {g_score[nbr]}", tentative_g, 9,
            )
            if tentative_g < g_score[nbr]:
                parent[nbr]  = node
                g_score[nbr] = tentative_g
                f_score[nbr] = tentative_g + h(nbr)
                open_set.add(nbr)
                rec.record(
                    StepKind.UPDATE_VALUE, [nbr, eid],
                    f"Updating fScore for {nbr}: {f_score[nbr]:.1f}", _scores(nbr, g_score, h), 12,
                )

    return rec.drain()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _lowest_f(graph: Graph, open_set: set, f_score: Dict[str, float]) -> str:
    best: Optional[str] = None
    for nid in graph.nodes:
        if nid in open_set and (best is None or f_score[nid] < f_score[best]):
            best = nid
    return best


def _scores(nid: str, g_score: Dict[str, float], h) -> Dict[str, float]:
    """The cost breakdown carried as an event value."""
    g = g_score[nid]
    hv = h(nid)
    return {"g": g, "h": hv, "f": g + hv}
