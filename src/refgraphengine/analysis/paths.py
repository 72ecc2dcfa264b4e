"""Path queries over a reference graph.

Python 3.13+.
"""

from collections import deque
from collections.abc import Iterator

from .store import GraphStore, check_graph

__all__ = ["find_path", "max_dependency_depth"]


def find_path(start: str, end: str, graph: GraphStore) -> list[str] | None:
    """Find the shortest reference path from start to end.

    Breadth-first search following dependency edges forward. The first
    time end is dequeued its recorded path has the fewest edges. Ties
    between equal-length paths follow discovery order.

    Args:
        start: Label to start from; must be a key of the store
        end: Label to reach; may be dangling
        graph: Mapping from node label to referenced labels

    Returns:
        Path from start to end inclusive, [start] when start == end, or
        None if start is absent or end is unreachable

    Example:
        >>> find_path("a", "c", {"a": ["b", "c"], "b": ["c"], "c": []})
        ['a', 'c']
        >>> find_path("c", "a", {"a": ["c"], "c": []}) is None
        True
    """
    check_graph(graph)
    if start not in graph:
        return None

    queue: deque[list[str]] = deque([[start]])
    visited = {start}

    while queue:
        path = queue.popleft()
        node = path[-1]
        if node == end:
            return path

        for neighbour in graph.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append([*path, neighbour])

    return None


def max_dependency_depth(graph: GraphStore) -> int:
    """Return the length, in edges, of the longest dependency chain.

    Mutually-referencing nodes are collapsed into their strongly connected
    component (Tarjan's algorithm). A chain may cross a component of k
    nodes in k - 1 edges and then needs one edge to leave it, so cycles
    stay finite and the result depends only on the edges, never on key
    order. Dangling labels count as one final edge.

    Args:
        graph: Mapping from node label to referenced labels

    Returns:
        Longest chain length; 0 for graphs without edges

    Example:
        >>> max_dependency_depth({"a": ["b"], "b": ["c"], "c": []})
        2
        >>> max_dependency_depth({"x": ["a"], "a": ["b"], "b": ["a"]})
        2
    """
    check_graph(graph)

    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    component_stack: list[str] = []
    on_stack: set[str] = set()
    # Longest chain starting anywhere in the node's component
    depth: dict[str, int] = {}

    def enter(node: str) -> None:
        index[node] = lowlink[node] = len(index)
        component_stack.append(node)
        on_stack.add(node)

    for root in graph:
        if root in index:
            continue

        enter(root)
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(graph[root]))]

        while stack:
            node, neighbours = stack[-1]
            neighbour = next(neighbours, None)

            if neighbour is not None:
                if neighbour not in graph:
                    continue
                if neighbour not in index:
                    enter(neighbour)
                    stack.append((neighbour, iter(graph[neighbour])))
                elif neighbour in on_stack:
                    lowlink[node] = min(lowlink[node], index[neighbour])
                continue

            stack.pop()
            if stack:
                parent = stack[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])
            if lowlink[node] != index[node]:
                continue

            members: list[str] = []
            while True:
                member = component_stack.pop()
                on_stack.discard(member)
                members.append(member)
                if member == node:
                    break

            # Components reachable from this one are already finished
            inside = set(members)
            onward = max(
                (
                    1 + depth.get(dep, 0)
                    for member in members
                    for dep in graph[member]
                    if dep not in inside
                ),
                default=0,
            )
            for member in members:
                depth[member] = len(members) - 1 + onward

    return max(depth.values(), default=0)
