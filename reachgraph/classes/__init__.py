"""
Core data classes for graph representation.

This module contains the node types read by the traversal queries.
"""

from .vertex import Vertex
from .professional import Professional

__all__ = [
    'Vertex',
    'Professional',
]
