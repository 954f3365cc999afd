"""
Graph algorithms module.

Provides knight pathfinding on a bounded board:
- ReachabilityIndex: Breadth-first distances and predecessors from a start square
- DiscoveryRecord: Per-square distance and predecessor
- shortest_path: Predecessor walk from an end square back to the start
"""

from knight_path.graph.path_query import shortest_path
from knight_path.graph.reachability import DiscoveryRecord, ReachabilityIndex

__all__ = [
    "DiscoveryRecord",
    "ReachabilityIndex",
    "shortest_path",
]
