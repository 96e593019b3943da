"""
Traversal queries over vertex graphs, adjacency maps, professional networks
and character grids.
"""

from .reachability import odd_vertices, sorted_reachable, two_way
from .pathfinding import PathFinder, sorted_reachable_ids, positive_path_exists
from .network import has_extended_connection_at_company
from .moves import next_moves, passable_mask

__all__ = [
    'odd_vertices',
    'sorted_reachable',
    'two_way',
    'PathFinder',
    'sorted_reachable_ids',
    'positive_path_exists',
    'has_extended_connection_at_company',
    'next_moves',
    'passable_mask',
]
