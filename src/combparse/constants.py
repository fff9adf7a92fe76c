"""Shared constants for combparse.

Centralized configuration constants used by the cursor, the parser entry
points, and the recursion guard. Placing them here avoids circular imports
and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ASCII_DIGITS",
    "MAX_DEPTH",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum number of nested Forward entries during a single parse.
# Combinator nesting itself is bounded by grammar depth; only recursive
# grammars (via Forward) can grow the stack with input length.
# Clamped against sys.getrecursionlimit() at guard construction.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum input length in elements (characters for str input).
# 10 million elements; the whole input is held in memory.
# Set max_source_size=0 at the entry point to disable.
MAX_SOURCE_SIZE: int = 10_000_000

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII digits only. str.isdigit() accepts Unicode digits like '²'.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
