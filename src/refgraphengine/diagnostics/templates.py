"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from refgraphengine.constants import CYCLE_ARROW

from .codes import Diagnostic, DiagnosticCode, Severity

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every reportable condition.
    """

    # ------------------------------------------------------------------
    # Input errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_graph_type(type_name: str) -> Diagnostic:
        """Graph store is not a mapping.

        Args:
            type_name: Name of the type that was received

        Returns:
            Diagnostic for INVALID_GRAPH_TYPE
        """
        msg = f"Graph store must be a mapping of label to dependencies, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_GRAPH_TYPE,
            message=msg,
            hint="Pass a dict such as {'skill_a': ['skill_b']}",
        )

    @staticmethod
    def invalid_node_label(label: object) -> Diagnostic:
        """Node key is not a string.

        Args:
            label: The offending key

        Returns:
            Diagnostic for INVALID_NODE_LABEL
        """
        msg = f"Node label must be str, got {type(label).__name__}: {label!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NODE_LABEL,
            message=msg,
            hint="Node labels are entity names; convert them before building the store",
        )

    @staticmethod
    def invalid_dependency_list(node: str, type_name: str) -> Diagnostic:
        """Dependency list is missing or not a collection of labels.

        Args:
            node: Node whose dependency list is invalid
            type_name: Name of the type that was received

        Returns:
            Diagnostic for INVALID_DEPENDENCY_LIST
        """
        msg = f"Dependencies of '{node}' must be a collection of labels, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DEPENDENCY_LIST,
            message=msg,
            nodes=(node,),
            hint="Use an empty list for nodes without dependencies",
        )

    @staticmethod
    def invalid_dependency_label(node: str, label: object) -> Diagnostic:
        """Dependency label is not a string.

        Args:
            node: Node listing the dependency
            label: The offending dependency label

        Returns:
            Diagnostic for INVALID_DEPENDENCY_LABEL
        """
        msg = (
            f"Dependency of '{node}' must be str, "
            f"got {type(label).__name__}: {label!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_DEPENDENCY_LABEL,
            message=msg,
            nodes=(node,),
        )

    @staticmethod
    def graph_size_exceeded(node_count: int, max_nodes: int) -> Diagnostic:
        """Graph store exceeds the node limit.

        Args:
            node_count: Number of nodes in the store
            max_nodes: Configured limit

        Returns:
            Diagnostic for GRAPH_SIZE_EXCEEDED
        """
        msg = f"Graph has {node_count} nodes, exceeding the limit of {max_nodes}"
        return Diagnostic(
            code=DiagnosticCode.GRAPH_SIZE_EXCEEDED,
            message=msg,
            hint="Analyze a smaller subset or raise max_nodes explicitly",
        )

    # ------------------------------------------------------------------
    # Reference findings
    # ------------------------------------------------------------------

    @staticmethod
    def circular_reference(cycle: Sequence[str]) -> Diagnostic:
        """Circular reference detected.

        Args:
            cycle: Closed cycle path ([A, B, A])

        Returns:
            Diagnostic for CIRCULAR_REFERENCE
        """
        msg = f"Circular reference detected: {CYCLE_ARROW.join(cycle)}"
        return Diagnostic(
            code=DiagnosticCode.CIRCULAR_REFERENCE,
            message=msg,
            severity=Severity.ERROR,
            nodes=tuple(cycle),
            hint="Remove one of the references to break the cycle",
        )

    @staticmethod
    def missing_reference(node: str, target: str) -> Diagnostic:
        """Node references a label that has no entry in the store.

        Args:
            node: Referencing node
            target: Dangling label

        Returns:
            Diagnostic for MISSING_REFERENCE
        """
        msg = f"'{node}' references missing entity '{target}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_REFERENCE,
            message=msg,
            severity=Severity.ERROR,
            nodes=(node, target),
            hint=f"Create '{target}' or fix the reference",
        )

    @staticmethod
    def unused_entity(label: str) -> Diagnostic:
        """Entity exists but nothing references it.

        Args:
            label: The orphaned label

        Returns:
            Diagnostic for UNUSED_ENTITY
        """
        msg = f"'{label}' is not referenced by any other entity"
        return Diagnostic(
            code=DiagnosticCode.UNUSED_ENTITY,
            message=msg,
            severity=Severity.INFO,
            nodes=(label,),
            hint="Remove it if unnecessary, or keep it as an entry point",
        )

    @staticmethod
    def deletion_blocked(unresolved: Sequence[str]) -> Diagnostic:
        """No safe deletion order exists.

        Args:
            unresolved: Labels that elimination could not free

        Returns:
            Diagnostic for DELETION_BLOCKED
        """
        count = len(unresolved)
        msg = f"No safe deletion order: {count} entities are held by circular references"
        return Diagnostic(
            code=DiagnosticCode.DELETION_BLOCKED,
            message=msg,
            severity=Severity.WARNING,
            nodes=tuple(unresolved),
            hint="Break the reported cycles before deleting these entities",
        )
