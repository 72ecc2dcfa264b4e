"""Deletion-order planning by Kahn elimination.

A node may be deleted once nothing still in the graph references it. The
planner repeatedly removes such nodes, releasing the references they held,
until the graph is empty or only mutually-referencing nodes remain.

Python 3.13+.
"""

import logging
from collections import deque
from dataclasses import dataclass

from .store import GraphStore, check_graph

__all__ = [
    "DeletionPlan",
    "count_dependents",
    "plan_deletion_order",
    "plan_load_order",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionPlan:
    """Outcome of deletion-order planning.

    Exactly one variant holds:
    - Ordered: ``order`` is a total order over every node in the store
    - Cycle present: ``order`` is None and ``unresolved`` lists the nodes
      elimination could never free, in store order

    Attributes:
        order: Processing order, or None when a cycle blocks every order
        unresolved: Nodes held by circular references (empty when ordered)

    Example:
        >>> plan = plan_deletion_order({"a": ["b"], "b": []})
        >>> plan.has_cycle
        False
        >>> plan.order
        ('a', 'b')
    """

    order: tuple[str, ...] | None
    unresolved: tuple[str, ...] = ()

    @classmethod
    def ordered(cls, order: tuple[str, ...]) -> "DeletionPlan":
        """Create a plan holding a complete order."""
        return cls(order=order)

    @classmethod
    def cyclic(cls, unresolved: tuple[str, ...]) -> "DeletionPlan":
        """Create a plan signalling that no valid order exists."""
        return cls(order=None, unresolved=unresolved)

    @property
    def has_cycle(self) -> bool:
        """True when no valid order exists."""
        return self.order is None


def count_dependents(graph: GraphStore) -> dict[str, int]:
    """Count incoming references for every label in the graph.

    Counts are taken with multiplicity: a node listing the same dependency
    twice contributes two. Every key is present (possibly with 0); dangling
    labels appear only if something references them.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        Mapping from label to number of incoming references
    """
    counts: dict[str, int] = dict.fromkeys(graph, 0)
    for dependencies in graph.values():
        for dep in dependencies:
            counts[dep] = counts.get(dep, 0) + 1
    return counts


def plan_deletion_order(graph: GraphStore) -> DeletionPlan:
    """Compute an order in which nodes can be deleted safely.

    Kahn elimination on dependent counts: nodes nobody references start the
    queue; emitting a node releases one reference on each of its
    dependencies, and a dependency joins the queue when its count reaches
    zero. Dangling labels are not nodes of the store and are never emitted.

    Among simultaneously eligible nodes the order follows store order and
    discovery order; callers must not rely on a particular tie-break.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        DeletionPlan with the full order, or the cycle-present variant if
        some nodes keep each other referenced

    Raises:
        GraphInputError: If the store is malformed

    Example:
        >>> plan_deletion_order({"a": ["b", "c"], "b": [], "c": []}).order
        ('a', 'b', 'c')
        >>> plan_deletion_order({"a": ["b"], "b": ["a"]}).has_cycle
        True
    """
    check_graph(graph)
    return _eliminate(graph)


def _eliminate(graph: GraphStore) -> DeletionPlan:
    remaining = count_dependents(graph)
    queue: deque[str] = deque(node for node in graph if remaining[node] == 0)
    order: list[str] = []

    while queue:
        node = queue.popleft()
        order.append(node)

        for dep in graph[node]:
            if dep not in graph:
                continue
            remaining[dep] -= 1
            if remaining[dep] == 0:
                queue.append(dep)

    if len(order) != len(graph):
        emitted = set(order)
        unresolved = tuple(node for node in graph if node not in emitted)
        logger.debug(
            "Deletion planning blocked: %d of %d nodes unresolved",
            len(unresolved),
            len(graph),
        )
        return DeletionPlan.cyclic(unresolved)

    return DeletionPlan.ordered(tuple(order))


def plan_load_order(graph: GraphStore) -> DeletionPlan:
    """Compute an order that places every dependency before its dependents.

    This is the deletion order reversed: useful when entities must be
    created or loaded so that each one's references already exist.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        DeletionPlan with the reversed order, or the cycle-present variant

    Example:
        >>> plan_load_order({"a": ["b", "c"], "b": [], "c": []}).order
        ('c', 'b', 'a')
    """
    plan = plan_deletion_order(graph)
    if plan.order is None:
        return plan
    return DeletionPlan.ordered(plan.order[::-1])
