"""Depth limiting for recursive grammars.

Combinator nesting is bounded by grammar depth, but a grammar that refers to
itself through a Forward handle can recurse once per nested construct in the
input. DepthGuard tracks that recursion so deep input fails with
DepthLimitExceededError instead of a bare RecursionError.

Thread-safe: the guard is immutable and travels with the cursor.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache

from combparse.constants import MAX_DEPTH
from combparse.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp", "root_guard"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DepthGuard:
    """Immutable recursion depth tracker.

    Each descend() returns a NEW guard one level deeper, so returning from a
    recursive call restores the caller's depth simply by keeping the old guard.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> guard.descend().descend().current_depth
        2
        >>> guard.current_depth  # Original unchanged
        0

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = 0

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit.

        Only root guards are clamped; descend() carries the already-clamped
        limit down unchanged.
        """
        if self.current_depth == 0:
            object.__setattr__(self, "max_depth", depth_clamp(self.max_depth))

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth

    def descend(self) -> DepthGuard:
        """Return a guard one level deeper.

        Raises:
            DepthLimitExceededError: If the limit has already been reached
        """
        if self.is_exceeded():
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        return DepthGuard(self.max_depth, self.current_depth + 1)


def depth_clamp(requested_depth: int, reserve_frames: int = 50, frames_per_level: int = 8) -> int:
    """Clamp requested depth against Python recursion limit.

    Each level of Forward recursion costs several interpreter frames (the
    Forward itself plus the combinators between it and the next entry).

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Estimated frames consumed per recursion level

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


@lru_cache(maxsize=32)
def root_guard(max_depth: int | None = None) -> DepthGuard:
    """Return the depth-zero guard for a parse, clamped once per max_depth.

    Guards are immutable, so one instance is shared by every parse that asks
    for the same limit and the clamp warning is logged at most once.

    Args:
        max_depth: Maximum Forward recursion depth (None for MAX_DEPTH)
    """
    return DepthGuard() if max_depth is None else DepthGuard(max_depth)
