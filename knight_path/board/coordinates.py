"""
Board coordinates and knight-move generation.

A coordinate is an (x, y) pair of integers, each in 0..board_size-1.
Squares are named at the edges of the application with identifiers of the
form "x-y" (e.g. "0-0", "7-7").
"""

from __future__ import annotations

from numbers import Integral
from typing import NamedTuple

from knight_path.config import SQUARE_ID_SEPARATOR
from knight_path.errors import InvalidBoardSize, InvalidCoordinate

# 2 steps on one axis + 1 step on the other, in every direction.
# The order is fixed so traversal and path choice are reproducible.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


class Coordinate(NamedTuple):
    """A board square. Compares equal to the plain tuple (x, y)."""

    x: int
    y: int

    def __str__(self) -> str:
        return format_square_id(self)


def validate_board_size(board_size: object) -> int:
    """Return board_size if it is a positive int, else raise InvalidBoardSize."""
    if isinstance(board_size, bool) or not isinstance(board_size, Integral):
        raise InvalidBoardSize(board_size)
    if board_size < 1:
        raise InvalidBoardSize(board_size)
    return int(board_size)


def in_bounds(x: int, y: int, board_size: int) -> bool:
    """Whether (x, y) lies on a board of the given size."""
    return 0 <= x < board_size and 0 <= y < board_size


def make_coordinate(value: object, board_size: int) -> Coordinate:
    """
    Validate a coordinate-like value and return it as a Coordinate.

    Args:
        value: Any two-item sequence of ints, e.g. (3, 4) or [3, 4]
        board_size: Side length of the board

    Returns:
        The value as a Coordinate

    Raises:
        InvalidCoordinate: Wrong arity, non-integer component, or off the board
    """
    if isinstance(value, (str, bytes)):
        raise InvalidCoordinate(value, board_size)
    try:
        items = tuple(value)  # type: ignore[arg-type]
    except TypeError:
        raise InvalidCoordinate(value, board_size) from None

    if len(items) != 2:
        raise InvalidCoordinate(value, board_size)

    x, y = items
    for component in (x, y):
        if isinstance(component, bool) or not isinstance(component, Integral):
            raise InvalidCoordinate(value, board_size)

    if not in_bounds(x, y, board_size):
        raise InvalidCoordinate(value, board_size)

    return Coordinate(int(x), int(y))


def is_valid_coordinate(value: object, board_size: int) -> bool:
    """Whether value is a well-formed, in-bounds coordinate."""
    try:
        make_coordinate(value, board_size)
    except InvalidCoordinate:
        return False
    return True


def same_square(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Whether two coordinates name the same square."""
    return tuple(a) == tuple(b)


def knight_moves(coord: tuple[int, int], board_size: int) -> list[Coordinate]:
    """Return every in-bounds square one knight move away from coord."""
    x, y = coord
    return [
        Coordinate(x + dx, y + dy)
        for dx, dy in KNIGHT_OFFSETS
        if in_bounds(x + dx, y + dy, board_size)
    ]


def format_square_id(coord: tuple[int, int]) -> str:
    """Encode a coordinate as a square identifier, e.g. (3, 4) -> "3-4"."""
    return f"{coord[0]}{SQUARE_ID_SEPARATOR}{coord[1]}"


def parse_square_id(square_id: str, board_size: int) -> Coordinate:
    """
    Decode a square identifier such as "3-4".

    Raises:
        InvalidCoordinate: The identifier is malformed or off the board
    """
    if not isinstance(square_id, str):
        raise InvalidCoordinate(square_id, board_size)

    parts = square_id.strip().split(SQUARE_ID_SEPARATOR)
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidCoordinate(square_id, board_size)

    return make_coordinate((int(parts[0]), int(parts[1])), board_size)
