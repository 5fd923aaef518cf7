"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import Lattice, cell_id, parse_cell_id
"""

from graph.node    import Node
from graph.edge    import Edge
from graph.graph   import Graph
from graph.lattice import Lattice, cell_id, parse_cell_id

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Lattice", "cell_id", "parse_cell_id",
]
