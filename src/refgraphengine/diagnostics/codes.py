"""Diagnostic codes and data structures.

Defines error codes, severities, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Severity",
]


class Severity(StrEnum):
    """Severity of a diagnostic.

    Inherits from ``StrEnum`` so exports and log lines receive plain
    strings (``"error"``, ``"info"``) rather than the enum repr.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (malformed or oversized graph stores)
        2000-2999: Reference findings (cycles, missing and unused entities)
    """

    # Input errors (1000-1999)
    INVALID_GRAPH_TYPE = 1001
    INVALID_NODE_LABEL = 1002
    INVALID_DEPENDENCY_LIST = 1003
    INVALID_DEPENDENCY_LABEL = 1004
    GRAPH_SIZE_EXCEEDED = 1005

    # Reference findings (2000-2999)
    CIRCULAR_REFERENCE = 2001
    MISSING_REFERENCE = 2002
    UNUSED_ENTITY = 2003
    DELETION_BLOCKED = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries enough information for both a human-facing warning surface and
    tooling that consumes JSON exports.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        severity: Severity level
        nodes: Node labels the diagnostic is about, in a meaningful order
            (the cycle path for circular references)
        hint: Suggestion for fixing the problem
    """

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.ERROR
    nodes: tuple[str, ...] = ()
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[CIRCULAR_REFERENCE]: Circular reference detected: a -> b -> a
              = nodes: a, b, a
              = help: Remove one of the references to break the cycle

        Returns:
            Formatted diagnostic text
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
