"""
Reachability queries over explicit Vertex graphs.

Every query allocates its own visited set, so each vertex is processed at
most once per call and cyclic graphs terminate.
"""

import logging
from typing import Any, List, Optional

from ..classes.vertex import Vertex
from ..classes.utils import iter_reachable, is_reachable

logger = logging.getLogger(__name__)


def _neighbors(vertex: Vertex) -> List[Vertex]:
    return vertex.neighbors


def odd_vertices(start: Optional[Vertex]) -> int:
    """
    Count vertices with odd values reachable from ``start``.

    The starting vertex is included in the count if its value is odd.
    Negative odd values count as odd (``-3 % 2 == 1`` in Python).

    Example:
        5 --> 4
        |     |
        v     v
        8 --> 7 <-- 1
        |
        v
        9

        Starting from 5 the odd vertices reached are 5, 7 and 9, so the
        count is 3.

    Args:
        start: Starting vertex, or None

    Returns:
        Number of odd-valued reachable vertices, 0 if ``start`` is None
    """
    count = 0
    visited = 0
    for vertex in iter_reachable(start, _neighbors):
        visited += 1
        if vertex.data % 2 != 0:
            count += 1

    logger.debug(f"Counted {count} odd vertices among {visited} reachable")
    return count


def sorted_reachable(start: Optional[Vertex]) -> List[Any]:
    """
    Sorted values of every vertex reachable from ``start``, itself included.

    Each vertex contributes its value once; distinct vertices with equal
    values all appear.

    Example:
        5 --> 8
        |     |
        v     v
        8 --> 2 <-- 4

        Starting from 5 gives [2, 5, 8, 8].

    Args:
        start: Starting vertex, or None

    Returns:
        Ascending list of values, empty if ``start`` is None
    """
    values = [vertex.data for vertex in iter_reachable(start, _neighbors)]
    values.sort()
    return values


def two_way(v1: Optional[Vertex], v2: Optional[Vertex]) -> bool:
    """
    Check whether ``v1`` and ``v2`` can each reach the other.

    A vertex is always reachable from itself. Each direction is searched with
    its own visited set.

    Args:
        v1: First vertex, or None
        v2: Second vertex, or None

    Returns:
        True if v2 is reachable from v1 and v1 is reachable from v2
    """
    if v1 is None or v2 is None:
        return False
    if v1 is v2:
        return True

    forward = is_reachable(v1, v2, _neighbors)
    if not forward:
        logger.debug("No path in forward direction, skipping reverse search")
        return False

    return is_reachable(v2, v1, _neighbors)
