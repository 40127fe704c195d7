from __future__ import annotations

import typing

from .levels import Severity

if typing.TYPE_CHECKING:
    from .result import OperationResult

class UnwrapError(Exception):
    """Payload requested from a failed result."""

    result: OperationResult[typing.Any]

    def __init__(self, result: OperationResult[typing.Any]) -> None:
        self.result = result
        errors = "; ".join(m.text for m in result.messages_of(Severity.ERROR))
        super().__init__(f"Result is {result.code.value}: {errors or 'no error messages'}")

__all__ = ("UnwrapError",)
