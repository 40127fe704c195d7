"""
Core type definitions for opresult.

Aliases used across the package.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Sink = anything that accepts one line of text (print, logger.info, list.append)
type Sink = Callable[[str], None]

# Describe = turns an error value or exception into message text
type Describe[E] = Callable[[E], str]

__all__ = (
    "Describe",
    "Sink",
)
