"""
Unit tests for shortest-path reconstruction.
"""

import pytest

from knight_path.board import Coordinate, knight_moves
from knight_path.errors import InvalidCoordinate, Unreachable
from knight_path.graph import ReachabilityIndex, shortest_path


class TestShortestPath:
    """Test path reconstruction on a connected board."""

    def test_single_move(self, corner_index):
        """(0,0) -> (1,2) is one move."""
        assert shortest_path(corner_index, (1, 2)) == [(0, 0), (1, 2)]

    def test_corner_to_corner(self, corner_index):
        """(0,0) -> (7,7) is six moves, seven squares."""
        path = shortest_path(corner_index, (7, 7))
        assert len(path) == 7
        assert path[0] == (0, 0)
        assert path[-1] == (7, 7)

    def test_returns_coordinates(self, corner_index):
        path = shortest_path(corner_index, (7, 7))
        assert all(isinstance(square, Coordinate) for square in path)

    def test_method_matches_function(self, corner_index):
        assert corner_index.shortest_path((5, 6)) == shortest_path(corner_index, (5, 6))

    def test_known_lengths(self, sample_queries):
        for start, end, moves in sample_queries:
            path = ReachabilityIndex.build(start, 8).shortest_path(end)
            assert len(path) - 1 == moves

    def test_every_path_is_valid_and_minimal(self, corner_index):
        """Paths should run start -> end in knight moves with minimal length."""
        for end in corner_index:
            if end == corner_index.start:
                continue
            path = corner_index.shortest_path(end)
            assert path[0] == corner_index.start
            assert path[-1] == end
            assert len(path) - 1 == corner_index.distance_to(end)
            for a, b in zip(path, path[1:]):
                assert b in knight_moves(a, 8)

    def test_path_has_no_repeats(self, corner_index):
        path = corner_index.shortest_path((7, 7))
        assert len(path) == len(set(path))

    def test_deterministic(self, corner_index):
        """Repeated queries should return identical sequences."""
        first = corner_index.shortest_path((6, 3))
        for _ in range(5):
            assert corner_index.shortest_path((6, 3)) == first

    def test_ten_by_ten(self):
        index = ReachabilityIndex.build((0, 0), 10)
        path = index.shortest_path((9, 9))
        assert path[0] == (0, 0)
        assert path[-1] == (9, 9)
        assert len(path) - 1 == index.distance_to((9, 9))


class TestSameSquare:
    """Querying the start square needs no moves."""

    @pytest.mark.parametrize("square", [(0, 0), (3, 4), (7, 7)])
    def test_returns_empty(self, square):
        index = ReachabilityIndex.build(square, 8)
        assert shortest_path(index, square) == []

    def test_returns_empty_on_isolated_square(self):
        index = ReachabilityIndex.build((1, 1), 3)
        assert index.shortest_path((1, 1)) == []


class TestQueryErrors:
    """Test query-time failures."""

    @pytest.mark.parametrize("end", [(-1, 0), (8, 8), (0, 8), (1, 2, 3)])
    def test_invalid_end_raises(self, corner_index, end):
        with pytest.raises(InvalidCoordinate):
            shortest_path(corner_index, end)

    def test_unreachable_raises(self):
        """The center of a 3x3 board can't be reached from a corner."""
        index = ReachabilityIndex.build((0, 0), 3)
        with pytest.raises(Unreachable) as exc_info:
            index.shortest_path((1, 1))
        assert exc_info.value.start == (0, 0)
        assert exc_info.value.end == (1, 1)

    def test_unreachable_is_lookup_error(self):
        index = ReachabilityIndex.build((0, 0), 2)
        with pytest.raises(LookupError):
            index.shortest_path((1, 1))

    def test_failed_query_leaves_index_usable(self):
        index = ReachabilityIndex.build((0, 0), 3)
        with pytest.raises(Unreachable):
            index.shortest_path((1, 1))
        assert index.shortest_path((2, 1)) == [(0, 0), (2, 1)]
