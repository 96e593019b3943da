"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from typing import Dict, Set

import pytest

from reachgraph import Professional, Vertex


@pytest.fixture
def odd_example_graph() -> Dict[str, Vertex]:
    """
    Return the graph

        5 --> 4
        |     |
        v     v
        8 --> 7 <-- 1
        |
        v
        9
    """
    v5, v4, v8, v7, v1, v9 = (Vertex(n) for n in (5, 4, 8, 7, 1, 9))
    v5.connect(v4, v8)
    v4.connect(v7)
    v8.connect(v7, v9)
    v1.connect(v7)
    return {"5": v5, "4": v4, "8": v8, "7": v7, "1": v1, "9": v9}


@pytest.fixture
def duplicate_values_graph() -> Dict[str, Vertex]:
    """
    Return the graph

        5 --> 8a
        |     |
        v     v
        8b -> 2 <-- 4
    """
    v5, v8a, v8b, v2, v4 = (Vertex(n) for n in (5, 8, 8, 2, 4))
    v5.connect(v8a, v8b)
    v8a.connect(v2)
    v8b.connect(v2)
    v4.connect(v2)
    return {"5": v5, "8a": v8a, "8b": v8b, "2": v2, "4": v4}


@pytest.fixture
def adjacency_map() -> Dict[int, Set[int]]:
    """Return a small directed adjacency map with a cycle and a negative vertex."""
    return {
        0: {1, 2},
        1: {3},
        2: {1},
        3: {0},
        4: {-1},
        -1: {5},
        5: set(),
        6: {7},  # 7 is not a defined vertex
    }


@pytest.fixture
def network() -> Dict[str, Professional]:
    """Return a professional network: ana <-> ben <-> cai, dee -> ana."""
    ana = Professional("Initech")
    ben = Professional("Globex")
    cai = Professional("Umbrella")
    dee = Professional("Hooli")
    ana.connect(ben)
    ben.connect(cai)
    dee.connect(ana, mutual=False)
    return {"ana": ana, "ben": ben, "cai": cai, "dee": dee}


@pytest.fixture
def sample_board():
    """Return the example board as rows of characters."""
    return [
        [" ", " ", "X"],
        ["X", " ", " "],
        [" ", " ", " "],
    ]
