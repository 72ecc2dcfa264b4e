"""Graph store type and input validation.

A graph store maps each node label to the labels it references. Every
analysis function takes a store as an explicit argument; nothing in the
engine keeps ambient graph state.

Python 3.13+.
"""

import logging
from collections.abc import Collection, Iterator, Mapping
from types import MappingProxyType
from typing import TypeAlias

from refgraphengine.diagnostics import (
    ErrorTemplate,
    GraphInputError,
    GraphSizeLimitError,
)

__all__ = [
    "GraphStore",
    "check_graph",
    "iter_edges",
    "snapshot_graph",
]

logger = logging.getLogger(__name__)

# Node label -> dependency labels, in reference order. Dependency labels
# without a key of their own are dangling and act as leaves.
GraphStore: TypeAlias = Mapping[str, Collection[str]]


def check_graph(graph: GraphStore, *, max_nodes: int | None = None) -> None:
    """Validate the structure of a graph store.

    Fails fast instead of coercing: the extractor that built the store is
    expected to produce string labels and real collections.

    Args:
        graph: Store to validate
        max_nodes: Optional upper bound on the number of keys

    Raises:
        GraphInputError: If the store, a key, a dependency collection, or a
            dependency label has the wrong type
        GraphSizeLimitError: If max_nodes is given and exceeded

    Example:
        >>> check_graph({"a": ["b"], "b": []})  # OK
        >>> check_graph({"a": "b"})  # raises GraphInputError
    """
    if not isinstance(graph, Mapping):
        raise GraphInputError(ErrorTemplate.invalid_graph_type(type(graph).__name__))

    if max_nodes is not None and len(graph) > max_nodes:
        logger.warning(
            "Rejected graph with %d nodes (limit %d)", len(graph), max_nodes
        )
        raise GraphSizeLimitError(
            ErrorTemplate.graph_size_exceeded(len(graph), max_nodes),
            node_count=len(graph),
            max_nodes=max_nodes,
        )

    for node, dependencies in graph.items():
        if not isinstance(node, str):
            raise GraphInputError(ErrorTemplate.invalid_node_label(node))
        # A bare string is a Collection[str] of characters; reject it explicitly
        if isinstance(dependencies, (str, bytes)) or not isinstance(
            dependencies, Collection
        ):
            raise GraphInputError(
                ErrorTemplate.invalid_dependency_list(node, type(dependencies).__name__)
            )
        for dep in dependencies:
            if not isinstance(dep, str):
                raise GraphInputError(ErrorTemplate.invalid_dependency_label(node, dep))


def snapshot_graph(graph: GraphStore) -> Mapping[str, tuple[str, ...]]:
    """Return a validated, read-only copy of a graph store.

    Key order and dependency order (including duplicates) are preserved.
    The snapshot can be shared between threads running independent analyses.

    Args:
        graph: Store to copy

    Returns:
        Read-only mapping of label to tuple of dependency labels

    Raises:
        GraphInputError: If the store is malformed
    """
    check_graph(graph)
    return MappingProxyType({node: tuple(deps) for node, deps in graph.items()})


def iter_edges(graph: GraphStore) -> Iterator[tuple[str, str]]:
    """Yield (source, target) pairs in store order, duplicates included."""
    for node, dependencies in graph.items():
        for dep in dependencies:
            yield node, dep
