"""Core utilities shared by the combinator engine and the example grammars.

Exports:
    DepthGuard: Immutable recursion depth tracker
    depth_clamp: Clamp a depth limit against the interpreter recursion limit
    root_guard: Cached depth-zero guard per max_depth

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp, root_guard

__all__ = ["DepthGuard", "depth_clamp", "root_guard"]
