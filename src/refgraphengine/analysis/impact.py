"""Impact analysis: reverse lookups over a reference graph.

Answers "what breaks if this entity goes away" and "which entities are
never used". All queries are read-only and return fresh collections.

Python 3.13+.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .store import GraphStore, check_graph

__all__ = [
    "ImpactReport",
    "assess_impact",
    "build_usage_map",
    "collect_dependencies",
    "collect_dependents",
    "find_dependents",
    "find_entry_points",
    "find_leaf_nodes",
    "find_missing_references",
    "find_orphans",
]


def find_orphans(graph: GraphStore, candidates: Iterable[str]) -> list[str]:
    """Return the candidates that no node lists as a dependency.

    Candidates are labels the caller expects to exist. A candidate that is
    never referenced is reported whether or not it has a key of its own,
    which separates "exists but unused" from "does not exist".

    Args:
        graph: Mapping from node label to referenced labels
        candidates: Labels to check, in the order results should follow

    Returns:
        Unreferenced candidates, in candidate order

    Example:
        >>> find_orphans({"a": ["b"], "b": [], "c": []}, ["a", "b", "c"])
        ['a', 'c']
    """
    check_graph(graph)
    return _unreferenced(graph, candidates)


def _unreferenced(graph: GraphStore, candidates: Iterable[str]) -> list[str]:
    referenced = {dep for dependencies in graph.values() for dep in dependencies}
    return [label for label in candidates if label not in referenced]


def find_dependents(target: str, graph: GraphStore) -> list[str]:
    """Return every node that directly references target.

    Only direct dependents are returned; see collect_dependents() for the
    transitive closure. An empty result means target can be removed
    without breaking another entity.

    Args:
        target: Label to look up
        graph: Mapping from node label to referenced labels

    Returns:
        Referencing nodes in store order, each listed once

    Example:
        >>> find_dependents("a", {"a": ["b"], "b": ["c"], "c": ["a"]})
        ['c']
    """
    check_graph(graph)
    return [node for node, dependencies in graph.items() if target in dependencies]


def build_usage_map(graph: GraphStore) -> dict[str, list[str]]:
    """Build the reverse adjacency: label -> nodes that reference it.

    Every key appears (possibly with an empty list); dangling labels appear
    if referenced. Each referencing node is listed once per target.
    """
    check_graph(graph)
    usages: dict[str, list[str]] = {node: [] for node in graph}
    for node, dependencies in graph.items():
        for dep in dict.fromkeys(dependencies):
            usages.setdefault(dep, []).append(node)
    return usages


def _reach(start: str, adjacency: GraphStore) -> set[str]:
    """Collect labels reachable from start by at least one edge."""
    reached: set[str] = set()
    stack = list(adjacency.get(start, ()))
    while stack:
        label = stack.pop()
        if label in reached:
            continue
        reached.add(label)
        stack.extend(adjacency.get(label, ()))
    return reached


def collect_dependencies(node: str, graph: GraphStore) -> set[str]:
    """Return everything node references, directly or transitively.

    The start node is included only if a cycle leads back to it. Dangling
    labels are included; they have no further edges.

    Example:
        >>> sorted(collect_dependencies("a", {"a": ["b"], "b": ["c"], "c": []}))
        ['b', 'c']
    """
    check_graph(graph)
    return _reach(node, graph)


def collect_dependents(node: str, graph: GraphStore) -> set[str]:
    """Return everything that references node, directly or transitively.

    The start node is included only if a cycle leads back to it.

    Example:
        >>> sorted(collect_dependents("c", {"a": ["b"], "b": ["c"], "c": []}))
        ['a', 'b']
    """
    return _reach(node, build_usage_map(graph))


def find_missing_references(graph: GraphStore) -> dict[str, list[str]]:
    """Find dangling references: labels referenced but absent as keys.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        Mapping from referencing node to its dangling targets (first-seen
        order, deduplicated). Nodes without dangling targets are omitted.

    Example:
        >>> find_missing_references({"a": ["b", "x", "x"], "b": []})
        {'a': ['x']}
    """
    check_graph(graph)
    return _dangling_references(graph)


def _dangling_references(graph: GraphStore) -> dict[str, list[str]]:
    missing: dict[str, list[str]] = {}
    for node, dependencies in graph.items():
        dangling = [dep for dep in dict.fromkeys(dependencies) if dep not in graph]
        if dangling:
            missing[node] = dangling
    return missing


def find_entry_points(graph: GraphStore) -> list[str]:
    """Return keys that nothing references, in store order."""
    check_graph(graph)
    referenced = {dep for dependencies in graph.values() for dep in dependencies}
    return [node for node in graph if node not in referenced]


def find_leaf_nodes(graph: GraphStore) -> list[str]:
    """Return keys with no dependencies, in store order."""
    check_graph(graph)
    return [node for node, dependencies in graph.items() if not dependencies]


@dataclass(frozen=True, slots=True)
class ImpactReport:
    """Impact of removing one entity.

    Attributes:
        target: Label the report is about
        exists: Whether target has a key in the store
        direct_dependents: Nodes referencing target directly (store order)
        transitive_dependents: Every node that reaches target (sorted)
    """

    target: str
    exists: bool
    direct_dependents: tuple[str, ...]
    transitive_dependents: tuple[str, ...]

    @property
    def impact_count(self) -> int:
        """Number of direct dependents."""
        return len(self.direct_dependents)

    @property
    def safe_to_remove(self) -> bool:
        """True when nothing references target."""
        return not self.direct_dependents


def assess_impact(target: str, graph: GraphStore) -> ImpactReport:
    """Summarize what depends on target, directly and transitively.

    Args:
        target: Label to assess
        graph: Mapping from node label to referenced labels

    Returns:
        ImpactReport for target

    Example:
        >>> report = assess_impact("c", {"a": ["b"], "b": ["c"], "c": []})
        >>> report.direct_dependents, report.transitive_dependents
        (('b',), ('a', 'b'))
    """
    direct = find_dependents(target, graph)
    transitive = collect_dependents(target, graph)
    return ImpactReport(
        target=target,
        exists=target in graph,
        direct_dependents=tuple(direct),
        transitive_dependents=tuple(sorted(transitive)),
    )
