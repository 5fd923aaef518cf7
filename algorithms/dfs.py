"""
dfs.py — Depth-First Search
=============================
Recursive DFS.  Records:
  1. Start  →  MESSAGE on the source
  2. Enter a node  →  VISIT
  3. Step down an edge to an unseen neighbour  →  UPDATE_VALUE [neighbour, edge]
  4. Neighbour exhausted without reaching the goal  →  MESSAGE (backtrack)
  5. Goal entered  →  unwind immediately, then HIGHLIGHT the path

Siblings after the branch that reached the goal are never explored.
Does NOT guarantee a shortest path.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph
from algorithms.inputs import check_endpoints, walk_back
from algorithms.step import StepEvent, StepKind, TraceRecorder, edge_id


PSEUDOCODE: List[str] = [
    "def DFS(graph, source, target):",              # 0
    "    visit(source)",                            # 1
    "def visit(node):",                             # 2
    "    visited.add(node)",                        # 3
    "    if node == target: return True",          # 4
    "    for neighbour in adj(node):",              # 5
    "        if neighbour not visited:",            # 6
    "            parent[neighbour] = node",         # 7
    "            if visit(neighbour): return True", # 8
    "            backtrack to node",                # 9
    "    return False",                             # 10
]


def dfs(graph: Graph, source: str, target: str) -> Tuple[StepEvent, ...]:
    check_endpoints(graph, source, target)

    rec     = TraceRecorder()
    visited: set = set()
    parent: Dict[str, Optional[str]] = {source: None}

    def visit(node: str) -> bool:
        visited.add(node)
        rec.record(StepKind.VISIT, [node], f"Visiting node {node}", line=3)
        if node == target:
            return True
        for nbr, _edge in graph.neighbours(node):
            if nbr in visited:
                continue
            parent[nbr] = node
            rec.record(
                StepKind.UPDATE_VALUE, [nbr, edge_id(node, nbr)],
                f"Moving deeper from {node} to {nbr}", line=8,
            )
            if visit(nbr):
                return True
            rec.record(StepKind.MESSAGE, [node], f"Backtracking from {nbr} to {node}", line=9)
        return False

    rec.record(StepKind.MESSAGE, [source], f"Starting DFS from node {source}", line=1)
    if visit(source):
        path = walk_back(parent, target)
        rec.record(StepKind.HIGHLIGHT, path, f"Path found via DFS: {' → '.join(path)}", line=4)
    return rec.drain()
