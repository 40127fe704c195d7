"""OperationResult

Return type for operations that report status instead of raising:
- OutcomeCode (success / warning / failure)
- MessageLog (ordered diagnostics)
- optional payload T

Adding a warning or an error escalates the outcome code, never downgrades it.
incorporate() folds a sub-result into this one (messages appended, worse code wins)."""

from __future__ import annotations

import logging
import typing

from . import report
from ._types import Sink
from .levels import OutcomeCode, Severity, worse_of
from .log import MessageLog
from .message import Message
from .policy import DEFAULT_POLICY, LogPolicy


class OperationResult[T]:
    """
    Outcome code + messages + payload.

    Every mutator returns self, so chains keep the payload type:

        OperationResult[int]().add_info("parsed").set_return_value(42)

    Truthiness is strict: only SUCCESS is truthy. A result with warnings is
    falsy but still `succeeded`.
    """

    __slots__ = ("_code", "_messages", "return_value")

    def __init__(self, return_value: T | None = None) -> None:
        self._code = OutcomeCode.SUCCESS
        self._messages = MessageLog()
        self.return_value = return_value

    @staticmethod
    def typed[V](value_type: type[V]) -> OperationResult[V]:
        """
        Result whose payload starts at the empty value of `value_type`.

        Example:
            OperationResult.typed(int).return_value   # 0
            OperationResult.typed(list).return_value  # []
        """
        return OperationResult(value_type())

    @property
    def code(self) -> OutcomeCode:
        """Current outcome code."""
        return self._code

    @property
    def messages(self) -> MessageLog:
        """Messages in insertion order."""
        return self._messages

    # Messages

    def add_message(self, message: Message, /) -> typing.Self:
        """Append a message and escalate the code according to its severity."""
        self._messages.append(message)
        match message.severity:
            case Severity.ERROR:
                self._code = OutcomeCode.FAILURE
            case Severity.WARNING:
                if self._code is not OutcomeCode.FAILURE:
                    self._code = OutcomeCode.WARNING
            case Severity.INFO | Severity.ANY:
                pass
        return self

    def add_info(self, text: str, /) -> typing.Self:
        return self.add_message(Message(Severity.INFO, text))

    def add_warning(self, text: str, /) -> typing.Self:
        """Append a warning. Code becomes WARNING unless already FAILURE."""
        return self.add_message(Message(Severity.WARNING, text))

    def add_error(self, text: str, /) -> typing.Self:
        """Append an error. Code becomes FAILURE."""
        return self.add_message(Message(Severity.ERROR, text))

    def remove_messages(self, severity: Severity = Severity.ANY, /) -> typing.Self:
        """
        Drop messages of `severity` (all of them for ANY).

        The code is not recomputed: removing the only error leaves FAILURE.
        """
        self._messages[:] = self._messages.without(severity)
        return self

    def messages_of(self, severity: Severity, /) -> MessageLog:
        return self._messages.of_severity(severity)

    def get_last(self, severity: Severity = Severity.ANY, /) -> Message | None:
        return self._messages.last(severity)

    def get_last_info(self) -> Message | None:
        return self._messages.last(Severity.INFO)

    def get_last_warning(self) -> Message | None:
        return self._messages.last(Severity.WARNING)

    def get_last_error(self) -> Message | None:
        return self._messages.last(Severity.ERROR)

    @property
    def has_errors(self) -> bool:
        return self._messages.last(Severity.ERROR) is not None

    @property
    def has_warnings(self) -> bool:
        return self._messages.last(Severity.WARNING) is not None

    # Outcome

    def set_code(self, code: OutcomeCode = OutcomeCode.SUCCESS, /) -> typing.Self:
        """Override the code directly, bypassing escalation."""
        self._code = code
        return self

    @property
    def succeeded(self) -> bool:
        """SUCCESS or WARNING: the operation completed, maybe with issues."""
        return self._code in (OutcomeCode.SUCCESS, OutcomeCode.WARNING)

    def __bool__(self) -> bool:
        return self._code is OutcomeCode.SUCCESS

    # Merge

    def incorporate(self, other: OperationResult[typing.Any], /) -> typing.Self:
        """
        Fold `other` into this result.

        - copies of other's messages are appended after ours, order preserved
        - code becomes the worse of the two (UNKNOWN < SUCCESS < WARNING < FAILURE)
        - other is not modified, payloads are untouched

        Example:
            outer = OperationResult[None]()
            outer.incorporate(inner)  # inner: WARNING, [warning "w1"]
            outer.code                # WARNING
        """
        # snapshot first: incorporating self must not loop
        incoming = other.messages.cloned()
        self._messages.extend(incoming)
        self._code = worse_of(self._code, other.code)
        return self

    # Payload

    def set_return_value(self, value: T, /) -> typing.Self:
        self.return_value = value
        return self

    # Logging

    def log(
        self,
        logger: logging.Logger,
        *,
        caller: str | None = None,
        policy: LogPolicy = DEFAULT_POLICY,
    ) -> typing.Self:
        """Log every message through a stdlib logger at its own level."""
        return report.log_result(self, logger, caller=caller, policy=policy)

    def log_to(
        self,
        sink: Sink,
        *,
        caller: str | None = None,
        policy: LogPolicy = DEFAULT_POLICY,
    ) -> typing.Self:
        """Log every message to one sink."""
        return report.log_result_to(self, sink, caller=caller, policy=policy)

    def log_leveled(
        self,
        info: Sink,
        warning: Sink,
        error: Sink,
        *,
        caller: str | None = None,
        policy: LogPolicy = DEFAULT_POLICY,
    ) -> typing.Self:
        """Log every message to the sink matching its severity."""
        return report.log_result_leveled(self, info, warning, error, caller=caller, policy=policy)

    def log_all_messages(self, sink: Sink, header: str = "", footer: str = "") -> typing.Self:
        return report.log_all_messages(self, sink, header, footer)

    def __repr__(self) -> str:
        return (
            f"OperationResult({self._code.name}, messages={list(self._messages)!r}, "
            f"return_value={self.return_value!r})"
        )


# Convenience Constructors
def result_ok[T](value: T, *infos: str) -> OperationResult[T]:
    """Successful result with payload and optional info messages."""
    result = OperationResult(value)
    for text in infos:
        result.add_info(text)
    return result


def result_error(*errors: str) -> OperationResult[typing.Any]:
    """Failed result with error messages. FAILURE even when called without any."""
    result: OperationResult[typing.Any] = OperationResult()
    for text in errors:
        result.add_error(text)
    return result.set_code(OutcomeCode.FAILURE)


__all__ = (
    "OperationResult",
    "result_ok",
    "result_error",
)
