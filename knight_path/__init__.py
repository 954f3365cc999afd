"""
Knight Path.

Shortest knight-move paths on a bounded square board, computed from a
breadth-first reachability index built once per start square.
"""

__version__ = "0.1.0"
