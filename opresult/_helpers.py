"""Internal helpers for opresult.

Folding several results into one. Not re-exported individually, but usable
from the package root as opresult._helpers."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .result import OperationResult

# Folding helpers
def incorporate_all[R: OperationResult[typing.Any]](
    target: R,
    results: Iterable[OperationResult[typing.Any]],
) -> R:
    """
    Incorporate every result into target, in iteration order.

    Usage:
        incorporate_all(outer, [step_a(), step_b()])
    """
    for result in results:
        target.incorporate(result)
    return target

def merge_results(results: Iterable[OperationResult[typing.Any]]) -> OperationResult[None]:
    """
    Fresh result holding the messages of all results and the worst code.

    An empty iterable gives a plain SUCCESS result.
    """
    return incorporate_all(OperationResult[None](), results)

__all__ = (
    "incorporate_all",
    "merge_results",
)
