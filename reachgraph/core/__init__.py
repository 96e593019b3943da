"""
Core graph data structures and management.

This module contains the id-keyed graph representation used to bridge
explicit Vertex graphs and adjacency maps.
"""

from .graph import VertexGraph

__all__ = ['VertexGraph']
