"""Full analysis of a reference graph.

Runs every analysis over one store and gathers the findings into a single
immutable report, with diagnostics ready for a warning surface and a
JSON export for offline review.

Architecture:
    - analyze_graph(): Main entry point, validates then runs each pass
    - _collect_diagnostics(): Turns findings into Diagnostic records
    - AnalysisReport.to_dict() / to_json(): Export

Python 3.13+.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

from refgraphengine.constants import MAX_GRAPH_NODES
from refgraphengine.diagnostics import Diagnostic, ErrorTemplate, Severity

from .cycles import _find_cycles
from .impact import _dangling_references, _unreferenced
from .ordering import DeletionPlan, _eliminate
from .stats import GraphStats, _measure
from .store import GraphStore, check_graph

__all__ = ["AnalysisReport", "analyze_graph"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Immutable result of analyze_graph().

    Attributes:
        generated_at: UTC timestamp of the analysis
        stats: Aggregate metrics
        cycles: Distinct cycles in discovery order
        orphans: Unreferenced candidates
        missing: Dangling references per referencing node (read-only view)
        deletion_plan: Safe deletion order or cycle-present signal
        diagnostics: Findings for a warning surface, errors first
    """

    generated_at: datetime
    stats: GraphStats
    cycles: tuple[tuple[str, ...], ...]
    orphans: tuple[str, ...]
    missing: Mapping[str, tuple[str, ...]] = field(hash=False)
    deletion_plan: DeletionPlan
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_cycles(self) -> bool:
        """True when at least one circular reference exists."""
        return bool(self.cycles)

    @property
    def has_orphans(self) -> bool:
        """True when at least one candidate is unreferenced."""
        return bool(self.orphans)

    @property
    def has_missing(self) -> bool:
        """True when at least one reference is dangling."""
        return bool(self.missing)

    @property
    def error_count(self) -> int:
        """Number of error-severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready export of the report.

        Cycles are numbered from 1 and carry their loop length (the number
        of distinct nodes in the loop).
        """
        return {
            "timestamp": self.generated_at.isoformat(),
            "stats": self.stats.to_dict(),
            "cycles": [
                {"number": index, "length": len(cycle) - 1, "path": list(cycle)}
                for index, cycle in enumerate(self.cycles, start=1)
            ],
            "orphans": list(self.orphans),
            "missing": {node: list(targets) for node, targets in self.missing.items()},
            "deletion_order": (
                None if self.deletion_plan.order is None else list(self.deletion_plan.order)
            ),
            "diagnostics": [
                {
                    "code": d.code.name,
                    "severity": d.severity.value,
                    "message": d.message,
                    "nodes": list(d.nodes),
                }
                for d in self.diagnostics
            ],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize to_dict() as JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.INFO: 2,
}


def _collect_diagnostics(
    cycles: list[list[str]],
    missing: dict[str, list[str]],
    orphans: list[str],
    plan: DeletionPlan,
) -> tuple[Diagnostic, ...]:
    diagnostics: list[Diagnostic] = [ErrorTemplate.circular_reference(c) for c in cycles]
    diagnostics.extend(
        ErrorTemplate.missing_reference(node, target)
        for node, targets in missing.items()
        for target in targets
    )
    if plan.has_cycle:
        diagnostics.append(ErrorTemplate.deletion_blocked(plan.unresolved))
    diagnostics.extend(ErrorTemplate.unused_entity(label) for label in orphans)
    # Stable sort keeps discovery order within a severity
    diagnostics.sort(key=lambda d: _SEVERITY_RANK[d.severity])
    return tuple(diagnostics)


def analyze_graph(
    graph: GraphStore,
    candidates: Iterable[str] | None = None,
    *,
    max_nodes: int | None = MAX_GRAPH_NODES,
) -> AnalysisReport:
    """Run every analysis over a graph store.

    Args:
        graph: Mapping from node label to referenced labels
        candidates: Labels to check for orphans; defaults to every key
        max_nodes: Reject stores larger than this (None disables the check)

    Returns:
        AnalysisReport with statistics, cycles, orphans, dangling
        references, deletion plan, and diagnostics

    Raises:
        GraphInputError: If the store is malformed
        GraphSizeLimitError: If the store exceeds max_nodes

    Example:
        >>> report = analyze_graph({"a": ["b"], "b": ["a"], "x": []})
        >>> report.cycles
        (('a', 'b', 'a'),)
        >>> report.deletion_plan.has_cycle
        True
    """
    check_graph(graph, max_nodes=max_nodes)

    stats = _measure(graph)
    cycles = _find_cycles(graph)
    orphans = _unreferenced(graph, graph.keys() if candidates is None else candidates)
    missing = _dangling_references(graph)
    plan = _eliminate(graph)

    logger.debug(
        "Analyzed graph: %d nodes, %d edges, %d cycles, %d orphans, %d nodes with missing refs",
        stats.node_count,
        stats.edge_count,
        len(cycles),
        len(orphans),
        len(missing),
    )

    return AnalysisReport(
        generated_at=datetime.now(UTC),
        stats=stats,
        cycles=tuple(tuple(c) for c in cycles),
        orphans=tuple(orphans),
        missing=MappingProxyType({node: tuple(targets) for node, targets in missing.items()}),
        deletion_plan=plan,
        diagnostics=_collect_diagnostics(cycles, missing, orphans, plan),
    )
