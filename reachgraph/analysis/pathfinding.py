"""
Path finding and reachability analysis for adjacency maps.

This module provides algorithms for analyzing connectivity of graphs given as
a mapping from integer vertex ID to the set of neighbor IDs.
"""

import logging
from typing import Iterable, List, Mapping, Set

from ..classes.utils import iter_reachable_ids

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Reachability queries over one adjacency map.

    This class provides methods for:
    - Collecting the vertices reachable from a start vertex
    - Checking for a path that only passes through non-negative vertices
    """

    def __init__(self, adjacency: Mapping[int, Iterable[int]]):
        """
        Initialize the path finder.

        Args:
            adjacency: Dictionary mapping node_id -> set of neighbor node_ids.
                A key is a defined vertex even when its neighbor set is empty.
        """
        self.adjacency = adjacency

    def sorted_reachable(self, start: int) -> List[int]:
        """
        Find all vertices reachable from ``start``, including itself.

        Args:
            start: Starting vertex ID

        Returns:
            Ascending list of reachable vertex IDs, empty if ``start`` is not a key
        """
        reachable = sorted(iter_reachable_ids(self.adjacency, start))
        logger.debug(f"Found {len(reachable)} vertices reachable from {start}")
        return reachable

    def positive_path_exists(self, start: int, end: int) -> bool:
        """
        Check for a path from ``start`` to ``end`` through non-negative vertices only.

        Every vertex on the path, endpoints included, must be non-negative and
        a key of the map. A vertex is always reachable from itself. Vertices
        are marked visited when expanded, not when discovered.

        Args:
            start: Starting vertex ID
            end: Ending vertex ID

        Returns:
            True if such a path exists
        """
        if not self._is_allowed(start) or not self._is_allowed(end):
            return False
        if start == end:
            return True

        visited: Set[int] = set()
        stack: List[int] = [start]

        while stack:
            current = stack.pop()
            if current == end:
                return True
            if current in visited:
                continue

            visited.add(current)
            for neighbor in self.adjacency[current]:
                if neighbor not in self.adjacency:
                    logger.warning(f"Skipping neighbor {neighbor} of {current}: not a defined vertex")
                    continue
                if neighbor not in visited and self._is_allowed(neighbor):
                    stack.append(neighbor)

        logger.debug(f"No non-negative path from {start} to {end} after expanding {len(visited)} vertices")
        return False

    def _is_allowed(self, node_id: int) -> bool:
        return node_id >= 0 and node_id in self.adjacency


def sorted_reachable_ids(graph: Mapping[int, Iterable[int]], start: int) -> List[int]:
    """
    Sorted IDs of every vertex reachable from ``start`` in an adjacency map.

    Args:
        graph: Dictionary mapping node_id -> set of neighbor node_ids
        start: Starting vertex ID

    Returns:
        Ascending list of reachable IDs, empty if ``start`` is not a key
    """
    return PathFinder(graph).sorted_reachable(start)


def positive_path_exists(graph: Mapping[int, Iterable[int]], start: int, end: int) -> bool:
    """
    Check for a path from ``start`` to ``end`` using only non-negative vertices.

    Args:
        graph: Dictionary mapping node_id -> set of neighbor node_ids
        start: Starting vertex ID
        end: Ending vertex ID

    Returns:
        False if either endpoint is negative or not a key, or no path exists
    """
    return PathFinder(graph).positive_path_exists(start, end)
