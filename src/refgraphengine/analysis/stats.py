"""Aggregate statistics for reference graphs.

Single pass over the store; used for diagnostics and UI summaries only.

Python 3.13+.
"""

from dataclasses import asdict, dataclass

from refgraphengine.constants import STATS_DECIMAL_PLACES

from .ordering import count_dependents
from .store import GraphStore, check_graph

__all__ = ["GraphStats", "compute_stats"]


@dataclass(frozen=True, slots=True)
class GraphStats:
    """Summary metrics of a graph store.

    Attributes:
        node_count: Number of keys
        edge_count: Sum of dependency-list lengths (duplicates included)
        max_out_degree: Longest single dependency list
        max_in_degree: Largest dependent count, dangling labels included
        avg_out_degree: edge_count / node_count, 0.0 for an empty graph
        entry_point_count: Keys nothing references
        leaf_count: Keys with no dependencies
        dangling_count: Distinct referenced labels without a key
    """

    node_count: int
    edge_count: int
    max_out_degree: int
    max_in_degree: int
    avg_out_degree: float
    entry_point_count: int = 0
    leaf_count: int = 0
    dangling_count: int = 0

    def to_dict(self, *, decimal_places: int = STATS_DECIMAL_PLACES) -> dict[str, int | float]:
        """Return a JSON-ready mapping with the average rounded for display."""
        data = asdict(self)
        data["avg_out_degree"] = round(self.avg_out_degree, decimal_places)
        return data


def compute_stats(graph: GraphStore) -> GraphStats:
    """Compute aggregate metrics for a graph store.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        GraphStats for the store

    Example:
        >>> stats = compute_stats({"a": ["b", "c"], "b": ["c"], "c": []})
        >>> stats.edge_count, stats.max_in_degree
        (3, 2)
    """
    check_graph(graph)
    return _measure(graph)


def _measure(graph: GraphStore) -> GraphStats:
    edge_count = 0
    max_out_degree = 0
    leaf_count = 0
    for dependencies in graph.values():
        out_degree = len(dependencies)
        edge_count += out_degree
        max_out_degree = max(max_out_degree, out_degree)
        if out_degree == 0:
            leaf_count += 1

    in_degrees = count_dependents(graph)
    node_count = len(graph)

    return GraphStats(
        node_count=node_count,
        edge_count=edge_count,
        max_out_degree=max_out_degree,
        max_in_degree=max(in_degrees.values(), default=0),
        avg_out_degree=edge_count / node_count if node_count else 0.0,
        entry_point_count=sum(1 for node in graph if in_degrees[node] == 0),
        leaf_count=leaf_count,
        dangling_count=sum(1 for label in in_degrees if label not in graph),
    )
