"""
Lift into OperationResult.

Bridges from kungfu Result and from exception-raising code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._types import Describe
from ..result import OperationResult

logger = logging.getLogger(__name__)


def from_result[T, E](
    value: Result[T, E],
    *,
    describe: Describe[E] = str,
) -> OperationResult[T]:
    """
    Convert kungfu Result into OperationResult.

    Ok(v) becomes a SUCCESS result carrying v, Error(e) becomes a FAILURE
    result with one error message describe(e).

    Example:
        from opresult import lift as L

        op = L.up.from_result(parse(raw), describe=lambda e: e.reason)
    """
    match value:
        case Ok(payload):
            return OperationResult(payload)
        case Error(err):
            return OperationResult[T]().add_error(describe(err))
        case _ as unreachable:
            assert_never(unreachable)


def catching[T](
    thunk: Callable[[], T],
    *,
    describe: Describe[Exception] = str,
) -> OperationResult[T]:
    """
    Run sync thunk, turn a raised exception into an error message.

    **When to use:** calling exception-based code from a function that
    reports through OperationResult.

    NOTE: Catches all Exception subclasses. The exception itself is dropped,
          only describe(exc) is kept (a debug record is logged).
    """
    try:
        return OperationResult(thunk())
    except Exception as exc:
        logger.debug("catching: %s converted to error message", type(exc).__name__, exc_info=True)
        return OperationResult[T]().add_error(describe(exc))


__all__ = (
    "catching",
    "from_result",
)
