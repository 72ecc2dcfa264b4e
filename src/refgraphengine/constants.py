"""Shared constants for refgraphengine.

Centralized configuration constants used across the analysis and
diagnostics packages. Every constant here is a default; public functions
accept keyword overrides.

Constants are grouped by domain:
- Input limits: Size bounds for graphs handed to the analysis engine
- Presentation: Number formatting for statistics and summaries

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_GRAPH_NODES",
    # Presentation
    "STATS_DECIMAL_PLACES",
    "DEFAULT_LOCALE",
    "CYCLE_ARROW",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================
#
# Cycle enumeration is the only super-linear operation in practice: each
# discovered cycle is compared against every recorded cycle of the same
# length, at every rotation offset. Highly interconnected graphs therefore
# cost more than their edge count suggests.
#
# analyze_graph() rejects stores above this size before running anything.
# Individual algorithms do not enforce a bound; callers that invoke them
# directly should call check_graph(graph, max_nodes=...) first.
#
# A full content pack in the editor rarely exceeds a few thousand entities.
# ============================================================================

MAX_GRAPH_NODES: int = 10_000

# ============================================================================
# PRESENTATION
# ============================================================================

# Decimal places used for average out-degree in summaries and exports.
STATS_DECIMAL_PLACES: int = 2

# Locale used by summary rendering when none is supplied.
DEFAULT_LOCALE: str = "en_US"

# Separator used when rendering a cycle path for humans.
CYCLE_ARROW: str = " -> "
