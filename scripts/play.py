#!/usr/bin/env python3
"""
Knight Path CLI - Find the shortest knight route between two squares.

Squares are written as "x-y", with x and y counted from 0.

Usage:
    python scripts/play.py --start 0-0 --end 7-7
    python scripts/play.py --start 0-0 --end 9-9 --board-size 10
    python scripts/play.py --start 3-3 --distances
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from knight_path.board import format_square_id, parse_square_id, same_square  # noqa: E402
from knight_path.config import DEFAULT_BOARD_SIZE, LOG_LEVEL  # noqa: E402
from knight_path.errors import KnightPathError  # noqa: E402
from knight_path.game import PathfinderSession  # noqa: E402
from knight_path.graph import ReachabilityIndex  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Shortest knight path between two squares",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start square as x-y (e.g. 0-0)",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="End square as x-y (required unless --distances)",
    )
    parser.add_argument(
        "--board-size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Side length of the board (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--distances",
        action="store_true",
        help="Print the move count to every square instead of a single path",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.end is None and not args.distances:
        parser.error("--end is required unless --distances is given")
    return args


def print_distances(index: ReachabilityIndex) -> None:
    """Print the distance grid, top row is the highest y, '.' is unreachable."""
    grid = index.distance_grid()
    width = len(str(index.max_distance))

    for y in reversed(range(index.board_size)):
        cells = [
            str(grid[x, y]).rjust(width) if grid[x, y] >= 0 else ".".rjust(width)
            for x in range(index.board_size)
        ]
        print(f"{y:>3} | " + " ".join(cells))

    print(f"\nReachable squares: {len(index)} / {index.board_size ** 2}")
    print(f"Farthest square: {index.max_distance} moves")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        selection = PathfinderSession(board_size=args.board_size)
        index = selection.choose_start(parse_square_id(args.start, args.board_size))

        if args.distances:
            print_distances(index)
            return 0

        end = parse_square_id(args.end, args.board_size)
        if same_square(end, index.start):
            print("Start and end are the same square: 0 moves")
            return 0

        result = selection.choose_end(end)
    except KnightPathError as e:
        logger.warning(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 40)
    print(f"  Start: {format_square_id(result.start)}")
    print(f"  End:   {format_square_id(result.end)}")
    print(f"  Board: {result.board_size}x{result.board_size}")
    print("=" * 40 + "\n")

    for step, square in enumerate(result.path):
        marker = " (START)" if step == 0 else " (END)" if square == result.end else ""
        print(f"  {step}. {format_square_id(square)}{marker}")

    print(f"\n{selection.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
