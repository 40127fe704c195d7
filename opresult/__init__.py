"""
Operation results with outcome codes and message logs.

Return OperationResult from an operation instead of raising for expected
failures. Callers check the outcome code and read the messages.

Architecture:
- levels: Severity (message kind) and OutcomeCode (verdict), kept separate
- OperationResult[T]: code + MessageLog + payload, fluent mutators
- report: forward messages to sinks or a stdlib logger
- lift: bridge to kungfu Result and exception-based code
"""

# Core types
from ._types import Describe, Sink
from .levels import OutcomeCode, Severity, worse_of
from .message import Message
from .log import MessageLog
from .result import OperationResult, result_error, result_ok

# Internal helpers (folding results)
from . import _helpers
from ._helpers import incorporate_all, merge_results

# Configuration
from .policy import DEFAULT_POLICY, LogPolicy

# Reporting
from . import report
from .report import (
    infer_caller,
    log_all_messages,
    log_result,
    log_result_leveled,
    log_result_to,
)

# Lift helpers
from . import lift

# Errors
from ._errors import UnwrapError

__all__ = (
    # Types
    "Describe",
    "Sink",
    # Levels
    "OutcomeCode",
    "Severity",
    "worse_of",
    # Core
    "Message",
    "MessageLog",
    "OperationResult",
    "result_error",
    "result_ok",
    # Helpers
    "_helpers",
    "incorporate_all",
    "merge_results",
    # Configuration
    "DEFAULT_POLICY",
    "LogPolicy",
    # Reporting
    "report",
    "infer_caller",
    "log_all_messages",
    "log_result",
    "log_result_leveled",
    "log_result_to",
    # Lift module
    "lift",
    # Errors
    "UnwrapError",
)
