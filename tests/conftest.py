"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections import deque
from pathlib import Path

import pytest

from knight_path.graph import ReachabilityIndex


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def board_size() -> int:
    """Return the classic chessboard side length."""
    return 8


@pytest.fixture
def corner_index(board_size: int) -> ReachabilityIndex:
    """Return an index rooted at the (0, 0) corner of an 8x8 board."""
    return ReachabilityIndex.build((0, 0), board_size)


@pytest.fixture
def reference_distances():
    """
    Return an independent knight-distance function for cross-checking.

    Plain BFS over tuples with no shared code from the package.
    """

    def distances(start: tuple[int, int], board_size: int) -> dict[tuple[int, int], int]:
        seen = {start: 0}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for dx, dy in ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2)):
                nx, ny = x + dx, y + dy
                if 0 <= nx < board_size and 0 <= ny < board_size and (nx, ny) not in seen:
                    seen[(nx, ny)] = seen[(x, y)] + 1
                    queue.append((nx, ny))
        return seen

    return distances


@pytest.fixture
def sample_queries() -> list[tuple[tuple[int, int], tuple[int, int], int]]:
    """Return (start, end, moves) triples with known answers on an 8x8 board."""
    return [
        ((0, 0), (1, 2), 1),
        ((0, 0), (2, 1), 1),
        ((0, 0), (0, 1), 3),
        ((0, 0), (1, 1), 4),
        ((0, 0), (7, 7), 6),
        ((3, 3), (4, 3), 3),
        ((0, 7), (7, 0), 6),
    ]
