"""
Lower OperationResult.

Functions for getting the payload out, or converting to kungfu Result.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .._errors import UnwrapError
from ..levels import OutcomeCode
from ..log import MessageLog
from ..result import OperationResult


def _usable(op: OperationResult[typing.Any], strict: bool) -> bool:
    if strict:
        return op.code is OutcomeCode.SUCCESS
    return op.code is not OutcomeCode.FAILURE


def to_result[T](
    op: OperationResult[T],
    *,
    strict: bool = False,
) -> Result[T | None, MessageLog]:
    """
    Convert to kungfu Result.

    Ok(return_value) unless the code is FAILURE; with strict=True anything
    but SUCCESS counts as failed. The error side carries all messages.
    """
    if _usable(op, strict):
        return Ok(op.return_value)
    return Error(MessageLog(op.messages))


def unwrap[T](op: OperationResult[T]) -> T | None:
    """Payload of a non-failed result. Raises UnwrapError on FAILURE."""
    if op.code is OutcomeCode.FAILURE:
        raise UnwrapError(op)
    return op.return_value


def or_else[T](op: OperationResult[T], default: T) -> T | None:
    """Payload, or default when the code is FAILURE."""
    if op.code is OutcomeCode.FAILURE:
        return default
    return op.return_value


__all__ = (
    "or_else",
    "to_result",
    "unwrap",
)
