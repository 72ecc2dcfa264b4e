"""Reference-graph analysis algorithms.

Stateless functions over a graph store (node label -> referenced labels):
cycle detection, deletion-order planning, impact queries, path finding,
and statistics. Locale-aware summaries live in
``refgraphengine.analysis.summary`` and require Babel.

Python 3.13+.
"""

from .cycles import detect_cycles, is_rotation
from .impact import (
    ImpactReport,
    assess_impact,
    build_usage_map,
    collect_dependencies,
    collect_dependents,
    find_dependents,
    find_entry_points,
    find_leaf_nodes,
    find_missing_references,
    find_orphans,
)
from .ordering import DeletionPlan, count_dependents, plan_deletion_order, plan_load_order
from .paths import find_path, max_dependency_depth
from .report import AnalysisReport, analyze_graph
from .stats import GraphStats, compute_stats
from .store import GraphStore, check_graph, iter_edges, snapshot_graph

__all__ = [
    "AnalysisReport",
    "DeletionPlan",
    "GraphStats",
    "GraphStore",
    "ImpactReport",
    "analyze_graph",
    "assess_impact",
    "build_usage_map",
    "check_graph",
    "collect_dependencies",
    "collect_dependents",
    "compute_stats",
    "count_dependents",
    "detect_cycles",
    "find_dependents",
    "find_entry_points",
    "find_leaf_nodes",
    "find_missing_references",
    "find_orphans",
    "find_path",
    "is_rotation",
    "iter_edges",
    "max_dependency_depth",
    "plan_deletion_order",
    "plan_load_order",
    "snapshot_graph",
]
