"""Hypothesis strategies for refgraphengine property-based testing.

Strategies are organized by domain:

- graph: Reference graph stores and closed cycle paths

Usage:
    from tests.strategies import reference_graphs, cycle_paths
    from tests.strategies.graph import arbitrary_graphs, node_names

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - reference_graphs, cycle_paths
"""

from .graph import arbitrary_graphs, cycle_paths, node_names, reference_graphs

__all__ = [
    "arbitrary_graphs",
    "cycle_paths",
    "node_names",
    "reference_graphs",
]
