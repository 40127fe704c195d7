"""
Severity levels and outcome codes
=================================

Two separate enumerations: what kind of note a message is (Severity)
and what the overall verdict of an operation is (OutcomeCode).
"""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Classification of a single message. ANY is the query wildcard."""

    ANY = "any"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def matches(self, other: Severity, /) -> bool:
        """True if this severity, used as a filter, selects `other`."""
        return self is Severity.ANY or self is other


class OutcomeCode(Enum):
    """
    Verdict of an operation.

    Ordering for escalation: UNKNOWN < SUCCESS < WARNING < FAILURE.
    UNKNOWN is the weakest so it never escalates anything.
    """

    UNKNOWN = "unknown"
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"

    @property
    def rank(self) -> int:
        return _RANK[self]

    def is_worse_than(self, other: OutcomeCode, /) -> bool:
        return self.rank > other.rank


_RANK: dict[OutcomeCode, int] = {
    OutcomeCode.UNKNOWN: 0,
    OutcomeCode.SUCCESS: 1,
    OutcomeCode.WARNING: 2,
    OutcomeCode.FAILURE: 3,
}


def worse_of(current: OutcomeCode, incoming: OutcomeCode, /) -> OutcomeCode:
    """
    Pick the worse of two codes. Ties keep `current`.

    Example:
        worse_of(OutcomeCode.WARNING, OutcomeCode.FAILURE)  # FAILURE
        worse_of(OutcomeCode.SUCCESS, OutcomeCode.UNKNOWN)  # SUCCESS
    """
    if incoming.is_worse_than(current):
        return incoming
    return current


__all__ = ("OutcomeCode", "Severity", "worse_of")
