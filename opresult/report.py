"""
Reporting adapters
==================

Forward the messages of a result to external sinks.

- log_result_leveled: one sink per severity
- log_result_to: one sink for everything
- log_result: stdlib logging.Logger
- log_all_messages: one sink, optional header and footer

Origin label: when caller is None the name of the nearest function outside
this package is used (unless the policy disables it). Pass caller="" to log
bare text.
"""

from __future__ import annotations

import functools
import inspect
import logging
import typing

from ._types import Sink
from .levels import Severity
from .policy import DEFAULT_POLICY, LogPolicy

if typing.TYPE_CHECKING:
    from .result import OperationResult

_PACKAGE = __name__.partition(".")[0]


def _is_internal(module_name: object) -> bool:
    if not isinstance(module_name, str):
        return False
    return module_name == _PACKAGE or module_name.startswith(_PACKAGE + ".")


def _external_frame() -> tuple[str, int]:
    """
    (function name, internal depth) for the first frame outside this package.

    Depth counts package frames above _external_frame's own caller. Module
    level code has no function name and gives "".
    """
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        depth = 0
        while caller is not None and _is_internal(caller.f_globals.get("__name__")):
            depth += 1
            caller = caller.f_back
        if caller is None or caller.f_code.co_name == "<module>":
            return "", depth
        return caller.f_code.co_name, depth
    finally:
        del frame


def infer_caller() -> str:
    """Name of the closest function on the stack outside this package."""
    name, _ = _external_frame()
    return name


def _resolve_caller(caller: str | None, policy: LogPolicy) -> str:
    if caller is not None:
        return caller
    if policy.infer_caller:
        return infer_caller()
    return ""


def log_result_leveled[R: OperationResult[typing.Any]](
    result: R,
    info: Sink,
    warning: Sink,
    error: Sink,
    *,
    caller: str | None = None,
    policy: LogPolicy = DEFAULT_POLICY,
) -> R:
    """
    Send every message, in order, to the sink matching its severity.

    Stored ANY messages go to the sink of policy.any_severity_as.

    Example:
        log_result_leveled(result, logger.debug, logger.info, logger.warning)
    """
    label = _resolve_caller(caller, policy)
    sinks: dict[Severity, Sink] = {
        Severity.INFO: info,
        Severity.WARNING: warning,
        Severity.ERROR: error,
    }
    for message in result.messages:
        sinks[policy.level_of(message.severity)](policy.render(message.text, label))
    return result


def log_result_to[R: OperationResult[typing.Any]](
    result: R,
    sink: Sink,
    *,
    caller: str | None = None,
    policy: LogPolicy = DEFAULT_POLICY,
) -> R:
    """Send every message, in order, to one sink regardless of severity."""
    label = _resolve_caller(caller, policy)
    return log_result_leveled(result, sink, sink, sink, caller=label, policy=policy)


def log_result[R: OperationResult[typing.Any]](
    result: R,
    logger: logging.Logger,
    *,
    caller: str | None = None,
    policy: LogPolicy = DEFAULT_POLICY,
) -> R:
    """
    Log through a stdlib logger: info, warning and error levels.

    Records point at the code outside this package that asked for logging
    (funcName, lineno, pathname), not at this adapter.
    """
    label = _resolve_caller(caller, policy)
    _, depth = _external_frame()
    # log_result_leveled -> log_result -> package frames -> caller
    stacklevel = depth + 3
    return log_result_leveled(
        result,
        functools.partial(logger.info, stacklevel=stacklevel),
        functools.partial(logger.warning, stacklevel=stacklevel),
        functools.partial(logger.error, stacklevel=stacklevel),
        caller=label,
        policy=policy,
    )


def log_all_messages[R: OperationResult[typing.Any]](
    result: R,
    sink: Sink,
    header: str = "",
    footer: str = "",
) -> R:
    """
    Dump the message list: header, one line per message, footer.

    Empty header/footer are skipped. Lines look like "[warning] slow".
    """
    if header:
        sink(header)
    for message in result.messages:
        sink(str(message))
    if footer:
        sink(footer)
    return result


__all__ = (
    "infer_caller",
    "log_all_messages",
    "log_result",
    "log_result_leveled",
    "log_result_to",
)
