"""
Id-keyed graph view over explicit Vertex graphs.

This module maps a Vertex graph onto integer identifiers so it can be queried
with the adjacency-map functions.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..classes.vertex import Vertex
from ..classes.utils import count_degrees

logger = logging.getLogger(__name__)


class VertexGraph:
    """
    Integer-id view of every vertex reachable from a set of roots.

    This class provides:
    - Vertex to ID mapping (by identity) and the reverse lookup
    - Adjacency map maintenance
    - Degree tracking (in/out)
    - Basic graph queries (sources, sinks, vertex lookup)
    """

    def __init__(self, roots: Iterable[Optional[Vertex]]):
        """
        Initialize the graph view from root vertices.

        Args:
            roots: Vertices to start discovery from; None entries are ignored
        """
        self.roots: List[Vertex] = [root for root in roots if root is not None]

        # Vertex mappings, keyed by id() so equal-valued vertices stay distinct
        self.vertex_to_id: Dict[int, int] = {}
        self.id_to_vertex: Dict[int, Vertex] = {}

        self.adjacency_list: Dict[int, Set[int]] = {}
        self.in_degree: Dict[int, int] = {}
        self.out_degree: Dict[int, int] = {}

        # Populated by from_edges in input order
        self.vertices: List[Vertex] = []

        self._build_graph()

    @classmethod
    def from_edges(cls, values: Sequence[Any], edges: Iterable[Tuple[int, int]]) -> "VertexGraph":
        """
        Create vertices from values and connect them by index pairs.

        Args:
            values: Data for each vertex, one vertex per entry
            edges: (from_index, to_index) pairs into ``values``

        Returns:
            A VertexGraph rooted at every created vertex

        Raises:
            ValueError: If an edge refers to an index outside ``values``
        """
        vertices = [Vertex(value) for value in values]

        for start_idx, end_idx in edges:
            for idx in (start_idx, end_idx):
                if not 0 <= idx < len(vertices):
                    raise ValueError(f"Edge ({start_idx}, {end_idx}) refers to unknown vertex index {idx}")
            vertices[start_idx].connect(vertices[end_idx])

        graph = cls(vertices)
        graph.vertices = vertices
        return graph

    def get_sources(self) -> List[int]:
        """Get nodes with no incoming edges."""
        return [node_id for node_id in self.id_to_vertex if self.in_degree[node_id] == 0]

    def get_sinks(self) -> List[int]:
        """Get nodes with no outgoing edges."""
        return [node_id for node_id in self.id_to_vertex if self.out_degree[node_id] == 0]

    def get_vertex_by_id(self, vertex_id: int) -> Optional[Vertex]:
        """
        Get a vertex by its internal graph ID.

        Args:
            vertex_id: Internal vertex ID (0-based)

        Returns:
            The vertex object, or None if not found
        """
        return self.id_to_vertex.get(vertex_id)

    def get_vertex_id(self, vertex: Vertex) -> Optional[int]:
        """
        Get the internal graph ID for a vertex.

        Args:
            vertex: The vertex to look up

        Returns:
            Internal vertex ID (0-based), or None if the vertex is not in the graph
        """
        return self.vertex_to_id.get(id(vertex))

    def get_vertex_count(self) -> int:
        return len(self.id_to_vertex)

    def to_adjacency_map(self) -> Dict[int, Set[int]]:
        """
        Copy of the graph as an adjacency map (node_id -> set of neighbor ids).

        Parallel edges between the same pair of vertices collapse into one.
        """
        return {node_id: set(neighbors) for node_id, neighbors in self.adjacency_list.items()}

    def _build_graph(self):
        """
        Assign IDs in depth-first discovery order and build the adjacency map.
        """
        self.vertex_to_id.clear()
        self.id_to_vertex.clear()
        self.adjacency_list.clear()

        stack: List[Vertex] = list(reversed(self.roots))
        while stack:
            vertex = stack.pop()
            if id(vertex) in self.vertex_to_id:
                continue

            vertex_id = len(self.id_to_vertex)
            self.vertex_to_id[id(vertex)] = vertex_id
            self.id_to_vertex[vertex_id] = vertex

            for neighbor in reversed(vertex.neighbors):
                if neighbor is not None and id(neighbor) not in self.vertex_to_id:
                    stack.append(neighbor)

        for vertex_id, vertex in self.id_to_vertex.items():
            self.adjacency_list[vertex_id] = {
                self.vertex_to_id[id(neighbor)] for neighbor in vertex.neighbors if neighbor is not None
            }

        degrees = count_degrees(self.adjacency_list)
        self.in_degree = degrees["in"]
        self.out_degree = degrees["out"]

        edge_count = sum(len(neighbors) for neighbors in self.adjacency_list.values())
        logger.debug(f"Built graph with {len(self.id_to_vertex)} vertices and {edge_count} edges")
