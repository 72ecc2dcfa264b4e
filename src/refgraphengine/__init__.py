"""refgraphengine - Reference-graph analysis for game-configuration content.

Analyzes cross-references between named content entities (skills, mobs,
items, drop tables) that invoke one another by name. The engine consumes
an already-extracted adjacency mapping and never parses or renders.

Public API:
    detect_cycles - Enumerate distinct circular references
    plan_deletion_order - Safe deletion order, or a cycle-present signal
    find_dependents - Direct dependents of an entity
    find_orphans - Candidates nothing references
    find_path - Shortest reference path between two entities
    compute_stats - Aggregate metrics for summaries
    analyze_graph - Run everything and collect diagnostics

Exceptions:
    RefGraphError - Base exception class
    GraphInputError - Malformed graph store
    GraphSizeLimitError - Graph store exceeds the node limit

Submodules:
    refgraphengine.analysis - All analysis algorithms and result types
    refgraphengine.analysis.summary - Locale-aware summaries (requires Babel)
    refgraphengine.diagnostics - Diagnostic codes, templates, formatter
"""

from .analysis import (
    AnalysisReport,
    DeletionPlan,
    GraphStats,
    GraphStore,
    analyze_graph,
    compute_stats,
    detect_cycles,
    find_dependents,
    find_orphans,
    find_path,
    plan_deletion_order,
)
from .diagnostics import GraphInputError, GraphSizeLimitError, RefGraphError

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("refgraphengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnalysisReport",
    "DeletionPlan",
    "GraphInputError",
    "GraphSizeLimitError",
    "GraphStats",
    "GraphStore",
    "RefGraphError",
    "__version__",
    "analyze_graph",
    "compute_stats",
    "detect_cycles",
    "find_dependents",
    "find_orphans",
    "find_path",
    "plan_deletion_order",
]
