"""Hypothesis strategies for reference graph generation.

Provides reusable strategies for generating graph stores used by
``refgraphengine.analysis``. Strategies produce adjacency lists (with
optional dangling references, duplicates, and self references) and
closed cycle paths.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - reference_graphs: Emits ``strategy=graph_{topology}``
    - cycle_paths: Emits ``strategy=cycle_{shape}``

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

__all__ = [
    "arbitrary_graphs",
    "cycle_paths",
    "node_names",
    "reference_graphs",
]

# Constrained alphabet avoids slow text generation while covering
# enough variety for meaningful graph exploration.
node_names: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from("abcdefghij"),
    min_size=1,
    max_size=4,
)


@composite
def reference_graphs(  # noqa: PLR0912 - topology dispatch + cycle injection
    draw: st.DrawFn,
    *,
    max_nodes: int = 8,
    allow_cycles: bool | None = None,
) -> dict[str, list[str]]:
    """Generate reference graphs as adjacency lists.

    Args:
        draw: Hypothesis draw function.
        max_nodes: Maximum number of nodes.
        allow_cycles: ``True`` forces at least one cycle, ``False``
            guarantees acyclic, ``None`` draws randomly.

    Events emitted:
        - ``strategy=graph_{topology}``: Graph topology category.
    """
    nodes = draw(st.lists(node_names, min_size=1, max_size=max_nodes, unique=True))
    n = len(nodes)

    force_cycle = draw(st.booleans()) if allow_cycles is None else allow_cycles

    acyclic_topologies = ["empty", "linear", "star", "dag"]
    cyclic_topologies = ["ring", "self_loop"]

    if force_cycle:
        topology = draw(st.sampled_from([*acyclic_topologies, *cyclic_topologies]))
    else:
        topology = draw(st.sampled_from(acyclic_topologies))

    graph: dict[str, list[str]] = {node: [] for node in nodes}

    match topology:
        case "empty":
            event("strategy=graph_empty")

        case "linear":
            event("strategy=graph_linear")
            for i in range(n - 1):
                graph[nodes[i]].append(nodes[i + 1])

        case "ring":
            event("strategy=graph_ring")
            for i in range(n):
                graph[nodes[i]].append(nodes[(i + 1) % n])

        case "self_loop":
            event("strategy=graph_self_loop")
            graph[nodes[0]].append(nodes[0])

        case "star":
            event("strategy=graph_star")
            for spoke in nodes[1:]:
                graph[nodes[0]].append(spoke)

        case "dag":
            event("strategy=graph_dag")
            if n >= 2:
                edge_count = draw(st.integers(min_value=0, max_value=n * 2))
                for _ in range(edge_count):
                    src_idx = draw(st.integers(min_value=0, max_value=n - 2))
                    dst_idx = draw(st.integers(min_value=src_idx + 1, max_value=n - 1))
                    # Duplicates allowed: extractors may report a call twice
                    graph[nodes[src_idx]].append(nodes[dst_idx])

    if force_cycle and n >= 2 and topology in acyclic_topologies:
        i = draw(st.integers(min_value=0, max_value=n - 2))
        j = draw(st.integers(min_value=i + 1, max_value=n - 1))
        graph[nodes[j]].append(nodes[i])
        for k in range(i, j):
            graph[nodes[k]].append(nodes[k + 1])
    elif force_cycle and topology in acyclic_topologies:
        graph[nodes[0]].append(nodes[0])

    return graph


@composite
def arbitrary_graphs(
    draw: st.DrawFn,
    *,
    max_nodes: int = 7,
    max_degree: int = 4,
) -> dict[str, list[str]]:
    """Generate unconstrained graphs, including dangling references.

    Dependency labels are drawn from the node set plus a few labels that
    never become keys.
    """
    nodes = draw(st.lists(node_names, min_size=0, max_size=max_nodes, unique=True))
    dangling = ["zz", "zzz"]
    targets = st.sampled_from([*nodes, *dangling])
    return {
        node: draw(st.lists(targets, min_size=0, max_size=max_degree))
        for node in nodes
    }


@composite
def cycle_paths(
    draw: st.DrawFn,
    *,
    max_length: int = 6,
) -> list[str]:
    """Generate cycle paths in ``[A, B, C, A]`` closed format.

    Events emitted:
        - ``strategy=cycle_{shape}``: Cycle shape category.
    """
    shape = draw(st.sampled_from(["self_loop", "pair", "ring"]))

    match shape:
        case "self_loop":
            event("strategy=cycle_self_loop")
            node = draw(node_names)
            return [node, node]

        case "pair":
            event("strategy=cycle_pair")
            pair = draw(st.lists(node_names, min_size=2, max_size=2, unique=True))
            return [pair[0], pair[1], pair[0]]

        case "ring":
            event("strategy=cycle_ring")
            nodes = draw(st.lists(node_names, min_size=3, max_size=max_length, unique=True))
            return [*nodes, nodes[0]]

        case _:  # pragma: no cover
            msg = f"unexpected shape: {shape}"
            raise AssertionError(msg)
