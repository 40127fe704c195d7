"""
Lift helpers between OperationResult and other representations.

    from opresult import lift as L

    op = L.up.from_result(kungfu_result)     # kungfu Result -> OperationResult
    op = L.up.catching(lambda: int(raw))     # exception -> error message
    res = L.down.to_result(op)               # OperationResult -> kungfu Result
    value = L.down.unwrap(op)                # payload or UnwrapError
"""

from __future__ import annotations

from . import down, up

from .down import or_else, to_result, unwrap
from .up import catching, from_result

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "catching",
    "from_result",
    # Down
    "or_else",
    "to_result",
    "unwrap",
)
