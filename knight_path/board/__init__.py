"""
Board module.

Provides coordinates and move generation on a square board:
- Coordinate: (x, y) square
- knight_moves: In-bounds knight destinations
- same_square: Coordinate equality predicate
- parse_square_id / format_square_id: "x-y" square identifiers
"""

from knight_path.board.coordinates import (
    KNIGHT_OFFSETS,
    Coordinate,
    format_square_id,
    in_bounds,
    is_valid_coordinate,
    knight_moves,
    make_coordinate,
    parse_square_id,
    same_square,
    validate_board_size,
)

__all__ = [
    "KNIGHT_OFFSETS",
    "Coordinate",
    "format_square_id",
    "in_bounds",
    "is_valid_coordinate",
    "knight_moves",
    "make_coordinate",
    "parse_square_id",
    "same_square",
    "validate_board_size",
]
