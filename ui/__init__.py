"""
Web interface module.

Provides the Flask JSON API for knight path queries:
- /api/path: Stateless shortest-path query
- /api/reachability: Distances from a start square
- /api/session/*: Start/end selection flow
"""
