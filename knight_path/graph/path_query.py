"""
Shortest-path lookup against a ReachabilityIndex.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from knight_path.board.coordinates import Coordinate, make_coordinate, same_square
from knight_path.errors import Unreachable

if TYPE_CHECKING:
    from knight_path.graph.reachability import ReachabilityIndex

logger = logging.getLogger(__name__)


def shortest_path(index: ReachabilityIndex, end: object) -> list[Coordinate]:
    """
    Reconstruct the shortest knight path from the index's start to end.

    Args:
        index: Index built from the start square
        end: Destination square, any (x, y) pair of ints

    Returns:
        Squares from start to end inclusive, so len(path) - 1 is the move
        count. Empty if end is the start square (no moves needed).

    Raises:
        InvalidCoordinate: end is malformed or off the board
        Unreachable: end was never discovered from the start
    """
    end = make_coordinate(end, index.board_size)

    if same_square(index.start, end):
        return []

    record = index.record(end)
    if record is None:
        logger.debug(f"No path from {index.start} to {end}")
        raise Unreachable(index.start, end)

    # Walk predecessors back to the start, then reverse
    path = [record.coordinate]
    while record.predecessor is not None:
        record = index.record(record.predecessor)
        path.append(record.coordinate)

    path.reverse()
    return path
