"""
PyReachgraph - Graph and Grid Reachability Library

A Python library of depth-first reachability queries over three graph
representations: explicit vertex-and-neighbor graphs, integer adjacency maps,
and character grids. Every query keeps its own visited set, so cyclic graphs
are handled and no state is shared between calls.

Main Classes:
    Vertex: Node holding a value and outgoing neighbors
    Professional: Person with a company and connections
    VertexGraph: Integer-id view of a Vertex graph
    PathFinder: Queries over one adjacency map

Example:
    >>> from reachgraph import Vertex, sorted_reachable
    >>> root = Vertex(5).connect(Vertex(8), Vertex(3))
    >>> sorted_reachable(root)
    [3, 5, 8]
"""

__version__ = "0.1.0"

from reachgraph.classes.vertex import Vertex
from reachgraph.classes.professional import Professional
from reachgraph.core.graph import VertexGraph
from reachgraph.analysis.reachability import odd_vertices, sorted_reachable, two_way
from reachgraph.analysis.pathfinding import PathFinder, sorted_reachable_ids, positive_path_exists
from reachgraph.analysis.network import has_extended_connection_at_company
from reachgraph.analysis.moves import next_moves, passable_mask

__all__ = [
    'Vertex',
    'Professional',
    'VertexGraph',
    'PathFinder',
    'odd_vertices',
    'sorted_reachable',
    'two_way',
    'sorted_reachable_ids',
    'positive_path_exists',
    'has_extended_connection_at_company',
    'next_moves',
    'passable_mask',
]
