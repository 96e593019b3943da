"""
Utility functions for reachgraph.

This module provides the depth-first traversal helpers shared by the query
modules. Traversals run on an explicit stack rather than by recursion, so the
depth of a graph is not limited by the interpreter recursion limit.
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def iter_reachable(start: T, get_neighbors: Callable[[T], Iterable[T]]) -> Iterator[T]:
    """
    Yield every object reachable from ``start`` in depth-first preorder.

    Objects are tracked by identity, so distinct objects that compare equal
    are each visited once.

    Args:
        start: Starting object, or None
        get_neighbors: Returns the outgoing neighbors of an object

    Yields:
        Each reachable object exactly once, ``start`` first
    """
    if start is None:
        return

    visited: Set[int] = set()
    stack: List[T] = [start]

    while stack:
        current = stack.pop()
        if id(current) in visited:
            continue
        visited.add(id(current))
        yield current

        # Reversed so neighbors come off the stack in their listed order
        for neighbor in reversed(list(get_neighbors(current))):
            if neighbor is not None and id(neighbor) not in visited:
                stack.append(neighbor)


def is_reachable(source: T, target: T, get_neighbors: Callable[[T], Iterable[T]]) -> bool:
    """
    Check whether ``target`` can be reached from ``source``.

    A fresh visited set is used for each call.

    Args:
        source: Object the search starts from
        target: Object searched for, matched by identity
        get_neighbors: Returns the outgoing neighbors of an object

    Returns:
        True if a path of zero or more edges exists
    """
    for current in iter_reachable(source, get_neighbors):
        if current is target:
            return True
    return False


def iter_reachable_ids(adjacency: Mapping[int, Iterable[int]], start: int) -> Iterator[int]:
    """
    Yield every identifier reachable from ``start`` in an adjacency map.

    Identifiers that are not keys of the map are never visited.

    Args:
        adjacency: Dictionary mapping node_id -> set of neighbor node_ids
        start: Starting node ID

    Yields:
        Each reachable node ID exactly once
    """
    if start not in adjacency:
        return

    visited: Set[int] = set()
    stack: List[int] = [start]

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        yield node

        for neighbor in adjacency[node]:
            if neighbor in visited:
                continue
            if neighbor not in adjacency:
                logger.warning(f"Skipping neighbor {neighbor} of {node}: not a defined vertex")
                continue
            stack.append(neighbor)


def count_degrees(adjacency: Mapping[int, Iterable[int]]) -> Dict[str, Dict[int, int]]:
    """
    Count in-degree and out-degree of every node in an adjacency map.

    Args:
        adjacency: Dictionary mapping node_id -> collection of neighbor node_ids

    Returns:
        Dictionary with 'in' and 'out' entries, each mapping node_id -> degree
    """
    in_degree: Dict[int, int] = {node: 0 for node in adjacency}
    out_degree: Dict[int, int] = {}

    for node, neighbors in adjacency.items():
        neighbors = list(neighbors)
        out_degree[node] = len(neighbors)
        for neighbor in neighbors:
            in_degree[neighbor] = in_degree.get(neighbor, 0) + 1

    return {"in": in_degree, "out": out_degree}

