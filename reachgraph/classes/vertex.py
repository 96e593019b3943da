"""
Vertex representation for explicit node-and-neighbor graphs.
"""

from typing import Any, List, Optional


class Vertex:
    """
    A node holding a value and an ordered list of outgoing neighbors.

    Vertices compare and hash by identity: two vertices carrying equal data
    are still distinct nodes.

    Attributes:
        data: Value stored in the vertex
        neighbors: Outgoing neighbor vertices, in insertion order
    """

    def __init__(self, data: Any, neighbors: Optional[List["Vertex"]] = None):
        self.data = data
        self.neighbors: List[Vertex] = list(neighbors) if neighbors is not None else []

    def connect(self, *others: "Vertex") -> "Vertex":
        """
        Append directed edges from this vertex to each of ``others``.

        Returns:
            This vertex, so calls can be chained
        """
        self.neighbors.extend(others)
        return self

    def __repr__(self) -> str:
        return f"Vertex({self.data!r}, neighbors={len(self.neighbors)})"
