"""
Session module.

Provides the start/end selection flow:
- PathfinderSession: Holds the start square, its index and the last result
- SessionPhase: Where the session is in the flow
- PathResult: Immutable record of an answered query
"""

from knight_path.game.session import PathfinderSession, SessionPhase
from knight_path.game.state import PathResult

__all__ = [
    "PathfinderSession",
    "SessionPhase",
    "PathResult",
]
