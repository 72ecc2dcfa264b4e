"""Diagnostic system for reference-graph analysis.

Provides structured diagnostics with codes, severities, and hints, plus the
exception hierarchy used for malformed input.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, Severity
from .errors import GraphInputError, GraphSizeLimitError, RefGraphError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GraphInputError",
    "GraphSizeLimitError",
    "OutputFormat",
    "RefGraphError",
    "Severity",
]
