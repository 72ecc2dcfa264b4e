"""Cycle detection for reference graphs.

Enumerates circular references using depth-first search. Cycles are
reported in closed form ([A, B, C, A]) and deduplicated by rotation: the
same loop found from a different entry node is reported once. A loop and
its reverse are different cycles.

Python 3.13+.
"""

import logging
from collections.abc import Iterator, Sequence

from .store import GraphStore, check_graph

__all__ = ["detect_cycles", "is_rotation"]

logger = logging.getLogger(__name__)


def is_rotation(existing: Sequence[str], candidate: Sequence[str]) -> bool:
    """Check whether two closed cycles describe the same loop.

    Both cycles are in closed form, so the last element repeats the first
    and is ignored. Only rotations are equivalent; [A, B, C, A] and
    [A, C, B, A] are different cycles.

    Args:
        existing: A recorded cycle
        candidate: A newly discovered cycle

    Returns:
        True if candidate is a rotation of existing

    Example:
        >>> is_rotation(["a", "b", "c", "a"], ["b", "c", "a", "b"])
        True
        >>> is_rotation(["a", "b", "c", "a"], ["a", "c", "b", "a"])
        False
    """
    if len(existing) != len(candidate) or len(existing) < 2:
        return False

    loop_length = len(existing) - 1
    for offset in range(loop_length):
        if all(
            existing[(i + offset) % loop_length] == candidate[i]
            for i in range(loop_length)
        ):
            return True
    return False


def _is_duplicate(cycle: list[str], cycles: list[list[str]]) -> bool:
    return any(is_rotation(existing, cycle) for existing in cycles)


def detect_cycles(graph: GraphStore) -> list[list[str]]:
    """Detect all distinct cycles in a reference graph.

    Runs a depth-first search from every node not yet visited, in store
    order. When a neighbour is found on the active path, the path slice
    from that neighbour's first occurrence, closed with the neighbour, is a
    cycle. Each node is expanded once, so a cycle is reported only when the
    search meets it along a back edge.

    The search keeps an explicit stack of neighbour iterators instead of
    recursing, so long reference chains cannot hit the interpreter's
    recursion limit. Traversal order matches the recursive formulation.

    Args:
        graph: Mapping from node label to referenced labels.
            Example: {"a": ["b"], "b": ["c"], "c": ["a"]}

    Returns:
        List of cycles in discovery order, each a closed path of labels.
        Empty list if the graph is acyclic.

    Raises:
        GraphInputError: If the store is malformed

    Example:
        >>> detect_cycles({"a": ["b"], "b": ["c"], "c": ["a"]})
        [['a', 'b', 'c', 'a']]
        >>> detect_cycles({"a": ["a"]})
        [['a', 'a']]

    Complexity:
        Time: O(V + E) for the search, plus a rotation comparison against
        every recorded cycle of equal length per discovered cycle
        Space: O(V) for visited/path tracking
    """
    check_graph(graph)
    return _find_cycles(graph)


def _find_cycles(graph: GraphStore) -> list[list[str]]:
    visited: set[str] = set()
    on_path: set[str] = set()
    path: list[str] = []
    cycles: list[list[str]] = []

    for root in graph:
        if root in visited:
            continue

        visited.add(root)
        on_path.add(root)
        path.append(root)
        stack: list[Iterator[str]] = [iter(graph.get(root, ()))]

        while stack:
            neighbour = next(stack[-1], None)

            if neighbour is None:
                # All neighbours handled: leave the node
                stack.pop()
                on_path.discard(path.pop())
                continue

            if neighbour not in visited:
                visited.add(neighbour)
                on_path.add(neighbour)
                path.append(neighbour)
                # Dangling labels have no entry and expand to nothing
                stack.append(iter(graph.get(neighbour, ())))
            elif neighbour in on_path:
                start = path.index(neighbour)
                cycle = [*path[start:], neighbour]
                if not _is_duplicate(cycle, cycles):
                    cycles.append(cycle)

    logger.debug("Cycle detection over %d nodes found %d cycles", len(graph), len(cycles))
    return cycles
