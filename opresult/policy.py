"""
Log policy
==========

How results are rendered when handed to a sink or logger.
"""

from __future__ import annotations

from dataclasses import dataclass

from .levels import Severity

_TEXT_SENTINEL = "\x00text\x00"


@dataclass(frozen=True, slots=True)
class LogPolicy:
    """
    Rendering configuration for the logging adapters.

    label_format: template for labelled lines, gets {caller} and {text}
    any_severity_as: level used for stored ANY messages
    infer_caller: look up the calling function when no caller is passed
    """

    label_format: str = "{caller}: {text}"
    any_severity_as: Severity = Severity.INFO
    infer_caller: bool = True

    def __post_init__(self) -> None:
        if self.any_severity_as is Severity.ANY:
            raise ValueError("LogPolicy.any_severity_as must be a concrete severity")
        try:
            rendered = self.label_format.format(caller="caller", text=_TEXT_SENTINEL)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(
                f"LogPolicy.label_format accepts only {{caller}} and {{text}}: {exc!r}"
            ) from exc
        if _TEXT_SENTINEL not in rendered:
            raise ValueError("LogPolicy.label_format must contain {text}")

    @classmethod
    def plain(cls) -> LogPolicy:
        """Bare message text, no origin label, no caller lookup."""
        return cls(label_format="{text}", infer_caller=False)

    def render(self, text: str, caller: str) -> str:
        if not caller:
            return text
        return self.label_format.format(caller=caller, text=text)

    def level_of(self, severity: Severity) -> Severity:
        """Concrete level a message of `severity` is logged at."""
        if severity is Severity.ANY:
            return self.any_severity_as
        return severity


DEFAULT_POLICY = LogPolicy()

__all__ = ("DEFAULT_POLICY", "LogPolicy")
