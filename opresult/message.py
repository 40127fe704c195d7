"""Message - immutable severity-tagged text."""

from __future__ import annotations

from dataclasses import dataclass

from .levels import Severity


@dataclass(frozen=True, slots=True)
class Message:
    """
    Single diagnostic produced during an operation.

    No validation: empty text and Severity.ANY are both accepted.
    A stored ANY message never escalates the outcome code.
    """

    severity: Severity
    text: str

    def copy(self) -> Message:
        """Equal message, distinct instance."""
        return Message(self.severity, self.text)

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.text}"


__all__ = ("Message",)
