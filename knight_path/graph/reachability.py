"""
Breadth-first reachability index for a knight on a square board.

The index is built once, eagerly, from a start square. It records for every
knight-reachable square the number of moves needed to reach it and the square
it was first discovered from. Queries walk that predecessor chain, so no
traversal happens after construction.

Usage:
    from knight_path.graph import ReachabilityIndex

    index = ReachabilityIndex.build((0, 0), board_size=8)
    index.distance_to((7, 7))        # 6
    index.shortest_path((1, 2))      # [Coordinate(x=0, y=0), Coordinate(x=1, y=2)]
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Mapping

import numpy as np

from knight_path.board.coordinates import (
    Coordinate,
    knight_moves,
    make_coordinate,
    validate_board_size,
)
from knight_path.graph.path_query import shortest_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryRecord:
    """
    What the traversal learned about one square.

    Attributes:
        coordinate: The square itself
        distance: Knight moves from the start square (0 for the start)
        predecessor: Square this one was first reached from (None for the start)
    """

    coordinate: Coordinate
    distance: int
    predecessor: Coordinate | None = None


class ReachabilityIndex:
    """
    Immutable map from every reachable square to its DiscoveryRecord.

    Distances are assigned in breadth-first discovery order, so each one is
    the minimal knight-move count and every predecessor chain is a shortest
    path. Pick a new start square by building a new index.
    """

    def __init__(self, start: object, board_size: int) -> None:
        """
        Build the index.

        Args:
            start: Start square, any (x, y) pair of ints
            board_size: Side length of the board

        Raises:
            InvalidBoardSize: board_size is not a positive int
            InvalidCoordinate: start is malformed or off the board
        """
        self._board_size = validate_board_size(board_size)
        self._start = make_coordinate(start, self._board_size)
        self._records: Mapping[Coordinate, DiscoveryRecord] = _traverse(
            self._start, self._board_size
        )

        logger.debug(
            f"Built reachability index from {self._start} on "
            f"{self._board_size}x{self._board_size}: "
            f"{len(self._records)} squares, max distance {self.max_distance}"
        )

    @classmethod
    def build(cls, start: object, board_size: int) -> ReachabilityIndex:
        """Build an index rooted at start. Same as calling the class."""
        return cls(start, board_size)

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def max_distance(self) -> int:
        """Distance of the farthest reachable square."""
        return max(record.distance for record in self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, coord: object) -> bool:
        return coord in self._records

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._records)

    def record(self, coord: object) -> DiscoveryRecord | None:
        """
        Look up what the traversal recorded for a square.

        Returns:
            The DiscoveryRecord, or None if the square was never reached

        Raises:
            InvalidCoordinate: coord is malformed or off the board
        """
        return self._records.get(make_coordinate(coord, self._board_size))

    def distance_to(self, coord: object) -> int | None:
        """Knight moves from the start to coord, or None if unreachable."""
        record = self.record(coord)
        return record.distance if record is not None else None

    def reachable(self) -> list[Coordinate]:
        """All discovered squares in discovery order (start first)."""
        return list(self._records)

    def distance_grid(self) -> np.ndarray:
        """
        Distances as a (board_size, board_size) array indexed [x, y].

        Squares that were never reached hold -1.
        """
        grid = np.full((self._board_size, self._board_size), -1, dtype=np.int32)
        for coord, record in self._records.items():
            grid[coord.x, coord.y] = record.distance
        return grid

    def shortest_path(self, end: object) -> list[Coordinate]:
        """Shortest knight path from the start to end. See path_query.shortest_path."""
        return shortest_path(self, end)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(start={tuple(self._start)!r}, "
            f"board_size={self._board_size}, reachable={len(self._records)})"
        )


def _traverse(start: Coordinate, board_size: int) -> dict[Coordinate, DiscoveryRecord]:
    """Breadth-first expansion from start over in-bounds knight moves."""
    records = {start: DiscoveryRecord(coordinate=start, distance=0)}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        next_distance = records[current].distance + 1

        for move in knight_moves(current, board_size):
            if move in records:
                continue

            records[move] = DiscoveryRecord(
                coordinate=move,
                distance=next_distance,
                predecessor=current,
            )
            queue.append(move)

    return records
