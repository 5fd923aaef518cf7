"""
graph.py — Graph Container
===========================
Single source of truth for a weighted directed graph.  Algorithms read
it; nothing in a run writes to it.

Responsibilities:
  1. Building nodes & edges                 (add / create / get)
  2. Adjacency queries                      (neighbours, reachable)
  3. Path helpers                           (path_cost, is_walk)
  4. Serialisation round-trip               (to_dict / from_dict / copy)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id for O(1) lookup.
    Dict order is declaration order, and the shortest-path algorithms
    use it as their tie-break, so it is part of the contract.
  - A separate adjacency dict  `_adj[node_id] → [edge_id, …]` is
    maintained incrementally so neighbour queries are O(degree), not O(E).
  - Every edge is directed.  Undirected input is two edges.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from errors import InvalidInputError
from graph.node import Node
from graph.edge import Edge


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}   (declaration order)
        edges : {edge_id: Edge}   (declaration order)
        _adj  : {node_id: [edge_id, …]}
    """

    def __init__(self):
        self.nodes: Dict[str, Node]      = {}
        self.edges: Dict[str, Edge]      = {}
        self._adj:  Dict[str, List[str]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise InvalidInputError(f"Duplicate node id: {node.id}")
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, x: float = 0.0, y: float = 0.0) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, x=x, y=y))

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        if edge.source not in self.nodes or edge.target not in self.nodes:
            raise InvalidInputError(f"Edge {edge.id} references an unknown node")
        if edge.weight < 0:
            raise InvalidInputError(f"Edge {edge.id} has negative weight {edge.weight}")
        if edge.id in self.edges:
            raise InvalidInputError(f"Duplicate edge: {edge.id}")
        self.edges[edge.id] = edge
        self._adj[edge.source].append(edge.id)
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    def get_edge(self, eid: str) -> Optional[Edge]:
        return self.edges.get(eid)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """The edge a → b, if any."""
        for eid in self._adj.get(a, []):
            e = self.edges[eid]
            if e.target == b:
                return e
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] for every outgoing edge, in declaration order."""
        return [(self.edges[eid].target, self.edges[eid]) for eid in self._adj.get(node_id, [])]

    # ==================================================================
    # PATH HELPERS
    # ==================================================================
    def is_walk(self, path: Sequence[str]) -> bool:
        """True if every consecutive pair in `path` is joined by an edge."""
        if not path or any(n not in self.nodes for n in path):
            return False
        return all(self.get_edge_between(a, b) is not None for a, b in zip(path, path[1:]))

    def path_cost(self, path: Sequence[str]) -> float:
        """Sum of edge weights along `path`.  Raises if a hop has no edge."""
        total = 0.0
        for a, b in zip(path, path[1:]):
            e = self.get_edge_between(a, b)
            if e is None:
                raise InvalidInputError(f"No edge {a} → {b} on path")
            total += e.weight
        return total

    def reachable(self, source: str, target: str) -> bool:
        """Structural reachability, independent of any traced run."""
        seen, stack = {source}, [source]
        while stack:
            node = stack.pop()
            if node == target:
                return True
            for nbr, _ in self.neighbours(node):
                if nbr not in seen:
                    seen.add(nbr)
                    stack.append(nbr)
        return False

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        if not isinstance(data, dict):
            raise InvalidInputError(f"Graph must be an object with nodes and edges, got {data!r}")
        nodes, edges = data.get("nodes", []), data.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise InvalidInputError("Graph nodes and edges must be lists")
        g = cls()
        for nd in nodes:
            g.add_node(Node.from_dict(nd))
        for ed in edges:
            g.add_edge(Edge.from_dict(ed))
        return g

    def copy(self) -> "Graph":
        """Private working copy — runs never share a Graph with their caller."""
        return Graph.from_dict(self.to_dict())

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __eq__(self, other) -> bool:
        return isinstance(other, Graph) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
