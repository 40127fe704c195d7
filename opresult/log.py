"""
MessageLog - ordered message accumulator
========================================
"""

from __future__ import annotations

from .levels import Severity
from .message import Message


class MessageLog(list[Message]):
    """
    Ordered list of messages with monoidal combine.

    Wrapper over list:
    - empty: MessageLog()
    - combine: concatenation, insertion order preserved, no dedup

    Monoid laws hold:
    - Left identity: MessageLog().combine(x) == x
    - Right identity: x.combine(MessageLog()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))

    combine/tell/without return new logs; the receiver is left alone.
    """

    @staticmethod
    def of(*messages: Message) -> MessageLog:
        """Create log with messages."""
        return MessageLog(messages)

    def combine(self, other: MessageLog, /) -> MessageLog:
        """
        Combine two logs (monoidal append).

        Example:
            MessageLog.of(a, b).combine(MessageLog.of(c))  # [a, b, c]
        """
        result = MessageLog(self)
        result.extend(other)
        return result

    def tell(self, message: Message, /) -> MessageLog:
        """Append single message. Same as self.combine(MessageLog.of(message))."""
        result = MessageLog(self)
        result.append(message)
        return result

    def of_severity(self, severity: Severity, /) -> MessageLog:
        """Messages selected by `severity` (ANY selects all), in order."""
        return MessageLog(m for m in self if severity.matches(m.severity))

    def without(self, severity: Severity, /) -> MessageLog:
        """Messages not selected by `severity`. ANY leaves nothing."""
        return MessageLog(m for m in self if not severity.matches(m.severity))

    def last(self, severity: Severity = Severity.ANY, /) -> Message | None:
        """Most recently appended message selected by `severity`."""
        for message in reversed(self):
            if severity.matches(message.severity):
                return message
        return None

    def cloned(self) -> MessageLog:
        """Log of copied messages (distinct instances, same order)."""
        return MessageLog(m.copy() for m in self)


__all__ = ("MessageLog",)
