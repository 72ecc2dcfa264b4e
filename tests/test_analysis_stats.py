"""Tests for analysis.stats module."""

from __future__ import annotations

from hypothesis import given, settings

from refgraphengine.analysis.stats import GraphStats, compute_stats
from tests.strategies.graph import arbitrary_graphs


class TestComputeStats:
    """Unit tests for compute_stats."""

    def test_empty_graph(self) -> None:
        stats = compute_stats({})
        assert stats == GraphStats(
            node_count=0,
            edge_count=0,
            max_out_degree=0,
            max_in_degree=0,
            avg_out_degree=0.0,
        )

    def test_basic_metrics(self) -> None:
        stats = compute_stats({"a": ["b", "c"], "b": ["c"], "c": []})
        assert stats.node_count == 3
        assert stats.edge_count == 3
        assert stats.max_out_degree == 2
        assert stats.max_in_degree == 2
        assert stats.avg_out_degree == 1.0
        assert stats.entry_point_count == 1
        assert stats.leaf_count == 1
        assert stats.dangling_count == 0

    def test_duplicates_and_dangling(self) -> None:
        stats = compute_stats({"a": ["ghost", "ghost", "b"], "b": []})
        assert stats.edge_count == 3
        assert stats.max_in_degree == 2
        assert stats.dangling_count == 1
        assert stats.avg_out_degree == 1.5

    def test_to_dict_rounds_average(self) -> None:
        stats = compute_stats({"a": ["b"], "b": ["c", "a"], "c": []})
        data = stats.to_dict()
        assert data["avg_out_degree"] == 1.0
        assert compute_stats({"a": ["b"], "b": [], "c": []}).to_dict()["avg_out_degree"] == 0.33
        assert data["node_count"] == 3


class TestComputeStatsProperties:
    """Property-based tests for compute_stats."""

    @given(graph=arbitrary_graphs())
    @settings(max_examples=200)
    def test_arithmetic_consistency(self, graph: dict[str, list[str]]) -> None:
        """PROPERTY: Metrics agree with direct computation."""
        stats = compute_stats(graph)
        edges = sum(len(deps) for deps in graph.values())
        assert stats.node_count == len(graph)
        assert stats.edge_count == edges
        assert stats.max_out_degree == max((len(d) for d in graph.values()), default=0)
        expected_avg = edges / len(graph) if graph else 0.0
        assert stats.avg_out_degree == expected_avg
        assert stats.max_in_degree <= stats.edge_count
