"""
bfs.py — Breadth-First Search
==============================
Unweighted BFS with a strict FIFO queue.  Records at every meaningful event:
  1. Start  →  MESSAGE on the source
  2. Dequeue a node  →  VISIT  (a node is visited on dequeue, never on discovery)
  3. Discover an unseen neighbour  →  UPDATE_VALUE [neighbour, edge]
  4. Goal dequeued  →  HIGHLIGHT the path, walked back through the parent map

The run returns the moment the goal is dequeued; whatever is still queued
is left alone.  If the queue drains first, there is no HIGHLIGHT.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the function so the UI can highlight them live.
"""

from collections import deque
from typing import Dict, List, Optional, Tuple

from graph import Graph
from algorithms.inputs import check_endpoints, walk_back
from algorithms.step import StepEvent, StepKind, TraceRecorder, edge_id


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",          # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    while queue is not empty:",             # 3
    "        node ← queue.dequeue()",           # 4
    "        if node == target: return path",   # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not visited:",     # 7
    "                visited.add(neighbour)",   # 8
    "                parent[neighbour] = node", # 9
    "                queue.enqueue(neighbour)", # 10
    "    return NOT FOUND",                     # 11
]


def bfs(graph: Graph, source: str, target: str) -> Tuple[StepEvent, ...]:
    """
    Args:
        graph  : The graph to search.
        source : Starting node id.
        target : Goal node id.

    Returns:
        The finished step log.
    """
    check_endpoints(graph, source, target)

    rec     = TraceRecorder()
    queue   = deque([source])
    seen:   set = {source}
    parent: Dict[str, Optional[str]] = {source: None}

    rec.record(StepKind.MESSAGE, [source], f"Starting BFS from node {source}", line=1)

    while queue:
        node = queue.popleft()
        rec.record(StepKind.VISIT, [node], f"Dequeueing node {node}", line=4)

        if node == target:
            path = walk_back(parent, target)
            rec.record(
                StepKind.HIGHLIGHT, path,
                f"Target {target} reached in {len(path) - 1} hop(s): {' → '.join(path)}", line=5,
            )
            return rec.drain()

        for nbr, _edge in graph.neighbours(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            parent[nbr] = node
            queue.append(nbr)
            rec.record(
                StepKind.UPDATE_VALUE, [nbr, edge_id(node, nbr)],
                f"Discovered node {nbr} from {node}", line=10,
            )

    return rec.drain()
