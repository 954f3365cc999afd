"""
Result dataclasses for knight path queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from knight_path.board.coordinates import Coordinate, format_square_id


@dataclass(frozen=True)
class PathResult:
    """
    Complete record of one answered query.

    Attributes:
        start: Start square
        end: End square
        board_size: Side length of the board the query ran on
        path: Squares from start to end inclusive (empty if start == end)
        timestamp: When the query was answered
    """

    start: Coordinate
    end: Coordinate
    board_size: int
    path: tuple[Coordinate, ...]
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def move_count(self) -> int:
        """Number of knight moves (len(path) - 1, or 0 for an empty path)."""
        return max(len(self.path) - 1, 0)

    @property
    def step_numbers(self) -> dict[Coordinate, int]:
        """Each square after the start mapped to the 1-indexed move landing on it."""
        return {coord: step for step, coord in enumerate(self.path) if step > 0}

    @property
    def square_ids(self) -> list[str]:
        """Path as "x-y" square identifiers."""
        return [format_square_id(coord) for coord in self.path]

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "start": format_square_id(self.start),
            "end": format_square_id(self.end),
            "board_size": self.board_size,
            "moves": self.move_count,
            "path": self.square_ids,
        }
