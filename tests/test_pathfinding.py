"""
Unit tests for adjacency-map queries.
"""

import logging

from reachgraph import PathFinder, positive_path_exists, sorted_reachable_ids


class TestSortedReachableIds:
    """Test collecting reachable IDs from an adjacency map."""

    def test_cycle(self, adjacency_map):
        """0 -> 1 -> 3 -> 0 and 0 -> 2 -> 1 reach all four."""
        assert sorted_reachable_ids(adjacency_map, 0) == [0, 1, 2, 3]

    def test_from_middle_of_cycle(self, adjacency_map):
        """Starting at 3 wraps around the cycle."""
        assert sorted_reachable_ids(adjacency_map, 3) == [0, 1, 2, 3]

    def test_missing_start(self, adjacency_map):
        """A start that is not a key gives an empty list."""
        assert sorted_reachable_ids(adjacency_map, 42) == []

    def test_neighbor_not_a_key(self, adjacency_map):
        """Neighbor 7 is not defined so only 6 is reported."""
        assert sorted_reachable_ids(adjacency_map, 6) == [6]

    def test_empty_neighbor_set(self, adjacency_map):
        """A key with no neighbors reaches only itself."""
        assert sorted_reachable_ids(adjacency_map, 5) == [5]

    def test_negative_ids_are_collected(self, adjacency_map):
        """Plain reachability does not filter negative IDs."""
        assert sorted_reachable_ids(adjacency_map, 4) == [-1, 4, 5]

    def test_empty_graph(self):
        """Nothing is reachable in an empty map."""
        assert sorted_reachable_ids({}, 0) == []


class TestPositivePathExists:
    """Test paths restricted to non-negative vertices."""

    def test_same_vertex(self, adjacency_map):
        """A present, non-negative vertex reaches itself."""
        assert positive_path_exists(adjacency_map, 5, 5) is True
        assert positive_path_exists(adjacency_map, 0, 0) is True

    def test_path_through_cycle(self, adjacency_map):
        """2 -> 1 -> 3 -> 0."""
        assert positive_path_exists(adjacency_map, 2, 0) is True

    def test_negative_endpoints(self, adjacency_map):
        """Negative start or end is always False."""
        assert positive_path_exists(adjacency_map, -1, 5) is False
        assert positive_path_exists(adjacency_map, 4, -1) is False
        assert positive_path_exists(adjacency_map, -1, -1) is False

    def test_negative_intermediate_blocks_path(self, adjacency_map):
        """4 reaches 5 only through -1."""
        assert positive_path_exists(adjacency_map, 4, 5) is False

    def test_missing_endpoints(self, adjacency_map):
        """Endpoints that are not keys are False."""
        assert positive_path_exists(adjacency_map, 6, 7) is False
        assert positive_path_exists(adjacency_map, 99, 0) is False
        assert positive_path_exists(adjacency_map, 99, 99) is False

    def test_no_path(self, adjacency_map):
        """5 has no outgoing edges."""
        assert positive_path_exists(adjacency_map, 5, 0) is False

    def test_directed(self):
        """Edges are followed in their direction only."""
        graph = {1: {2}, 2: set()}
        assert positive_path_exists(graph, 1, 2) is True
        assert positive_path_exists(graph, 2, 1) is False

    def test_zero_is_allowed(self):
        """Zero counts as non-negative."""
        graph = {0: {1}, 1: {0}}
        assert positive_path_exists(graph, 1, 0) is True


class TestPathFinder:
    """Test the reusable PathFinder wrapper."""

    def test_matches_functions(self, adjacency_map):
        """Methods agree with the module-level functions."""
        finder = PathFinder(adjacency_map)
        for start in adjacency_map:
            assert finder.sorted_reachable(start) == sorted_reachable_ids(adjacency_map, start)
        assert finder.positive_path_exists(2, 0) is True
        assert finder.positive_path_exists(4, 5) is False

    def test_list_valued_map(self):
        """Neighbor collections need only be iterable."""
        finder = PathFinder({1: [2, 3], 2: [], 3: [1]})
        assert finder.sorted_reachable(3) == [1, 2, 3]
        assert finder.positive_path_exists(3, 2) is True


class TestUndefinedNeighborWarnings:
    """Test that neighbors missing from the map are reported."""

    def test_sorted_reachable_warns(self, caplog):
        """Collecting reachable IDs warns about an undefined neighbor."""
        with caplog.at_level(logging.WARNING, logger="reachgraph"):
            assert sorted_reachable_ids({6: {7}}, 6) == [6]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any("Skipping neighbor 7 of 6" in r.getMessage() for r in warnings)

    def test_positive_path_warns(self, caplog):
        """Path search warns about an undefined neighbor and still fails."""
        with caplog.at_level(logging.WARNING, logger="reachgraph"):
            assert positive_path_exists({6: {7}, 8: set()}, 6, 8) is False
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any("Skipping neighbor 7 of 6" in r.getMessage() for r in warnings)

    def test_defined_neighbors_do_not_warn(self, caplog):
        """A fully defined map produces no warnings."""
        with caplog.at_level(logging.WARNING, logger="reachgraph"):
            positive_path_exists({0: {1}, 1: {0}}, 0, 1)
            sorted_reachable_ids({0: {1}, 1: {0}}, 0)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
