"""
Exceptions raised by the knight pathfinder.

Errors are raised at the point of the offending call: construction for a
bad start square, query time for a bad or unreachable end square.
"""

from __future__ import annotations


class KnightPathError(Exception):
    """Base class for all knight pathfinder errors."""


class InvalidCoordinate(KnightPathError, ValueError):
    """A coordinate is malformed or lies outside the board."""

    def __init__(
        self,
        value: object,
        board_size: int | None = None,
        message: str | None = None,
    ) -> None:
        self.value = value
        self.board_size = board_size
        if message is None:
            message = f"Invalid board position: {value!r}"
            if board_size is not None:
                message += f" (expected x, y in 0..{board_size - 1})"
        super().__init__(message)


class SameSquareSelected(InvalidCoordinate):
    """The end square chosen in a session is the start square."""

    def __init__(self, value: object) -> None:
        super().__init__(value, message=f"End square {value!r} is the start square")


class InvalidBoardSize(KnightPathError, ValueError):
    """Board size is not a positive integer (or exceeds a configured limit)."""

    def __init__(self, board_size: object, limit: int | None = None) -> None:
        self.board_size = board_size
        message = f"Invalid board size: {board_size!r}"
        if limit is not None:
            message += f" (expected 1..{limit})"
        super().__init__(message)


class Unreachable(KnightPathError, LookupError):
    """The end square was never discovered from the start square."""

    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No knight path from {start!r} to {end!r}")


class SessionStateError(KnightPathError, RuntimeError):
    """A session operation was called out of order."""
