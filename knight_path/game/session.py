"""
Start/end selection session.

Holds the state of the "choose a starting point, then an ending point"
flow: the chosen start square, the reachability index built from it, and
the last answered query. Nothing here renders anything; edges (the HTTP
API, the CLI) drive the session and present its results.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from knight_path.board.coordinates import (
    Coordinate,
    make_coordinate,
    same_square,
    validate_board_size,
)
from knight_path.config import DEFAULT_BOARD_SIZE
from knight_path.errors import SameSquareSelected, SessionStateError
from knight_path.game.state import PathResult
from knight_path.graph.reachability import ReachabilityIndex

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Where the session is in the selection flow."""

    AWAITING_START = "awaiting_start"
    AWAITING_END = "awaiting_end"
    COMPLETE = "complete"


class PathfinderSession:
    """
    Drives one start/end selection at a time.

    Choosing a new start discards the previous index and result; the index
    is never modified in place.
    """

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        index_factory: Callable[[Coordinate, int], ReachabilityIndex] = ReachabilityIndex.build,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            board_size: Side length of the board
            index_factory: Builds the index for a start square (e.g. a cached builder)
        """
        self._board_size = validate_board_size(board_size)
        self._index_factory = index_factory
        self._index: ReachabilityIndex | None = None
        self._result: PathResult | None = None

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def index(self) -> ReachabilityIndex | None:
        return self._index

    @property
    def start(self) -> Coordinate | None:
        return self._index.start if self._index is not None else None

    @property
    def result(self) -> PathResult | None:
        return self._result

    @property
    def phase(self) -> SessionPhase:
        if self._index is None:
            return SessionPhase.AWAITING_START
        if self._result is None:
            return SessionPhase.AWAITING_END
        return SessionPhase.COMPLETE

    @property
    def message(self) -> str:
        """Prompt or summary for the current phase."""
        if self.phase is SessionPhase.AWAITING_START:
            return "Choose a starting point"
        if self.phase is SessionPhase.AWAITING_END:
            return "Choose an ending point"
        return f"Completed in {self._result.move_count} steps"

    def choose_start(self, coord: object) -> ReachabilityIndex:
        """
        Pick the start square and build its reachability index.

        Raises:
            InvalidCoordinate: coord is malformed or off the board
        """
        start = make_coordinate(coord, self._board_size)
        index = self._index_factory(start, self._board_size)
        self._index = index
        self._result = None
        logger.info(f"Start square set to {index.start} ({len(index)} squares reachable)")
        return index

    def choose_end(self, coord: object) -> PathResult:
        """
        Pick the end square and answer the shortest-path query.

        Raises:
            SessionStateError: No start square has been chosen
            InvalidCoordinate: coord is malformed or off the board
            SameSquareSelected: coord is the start square
            Unreachable: coord cannot be reached from the start
        """
        if self._index is None:
            raise SessionStateError("Choose a starting point first")

        end = make_coordinate(coord, self._board_size)
        if same_square(self._index.start, end):
            raise SameSquareSelected(end)

        path = self._index.shortest_path(end)
        self._result = PathResult(
            start=self._index.start,
            end=end,
            board_size=self._board_size,
            path=tuple(path),
        )
        logger.info(
            f"Path {self._index.start} -> {end}: {self._result.move_count} moves "
            f"({' -> '.join(self._result.square_ids)})"
        )
        return self._result

    def reset(self) -> None:
        """Forget the start square, its index and the last result."""
        self._index = None
        self._result = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(board_size={self._board_size}, "
            f"phase={self.phase.value!r})"
        )
