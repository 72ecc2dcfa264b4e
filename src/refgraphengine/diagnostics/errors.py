"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Only programming errors are raised: cycles and unreachable targets are
ordinary results, never exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "GraphInputError",
    "GraphSizeLimitError",
    "RefGraphError",
]


class RefGraphError(Exception):
    """Base exception for all refgraphengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RefGraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GraphInputError(RefGraphError):
    """Graph store is structurally invalid.

    Examples:
    - Store is not a mapping
    - Node label or dependency label is not a string
    - Dependency list is None or a bare string

    The engine does not coerce malformed input; callers fix the extractor.
    """


class GraphSizeLimitError(GraphInputError):
    """Graph store exceeds the configured node limit.

    Attributes:
        node_count: Number of nodes in the rejected store
        max_nodes: Limit that was exceeded
    """

    def __init__(self, message: str | Diagnostic, *, node_count: int, max_nodes: int) -> None:
        """Initialize GraphSizeLimitError.

        Args:
            message: Error message string OR Diagnostic object
            node_count: Number of nodes in the rejected store
            max_nodes: Limit that was exceeded
        """
        super().__init__(message)
        self.node_count = node_count
        self.max_nodes = max_nodes
