"""Tests for analysis.summary module (requires Babel)."""

from __future__ import annotations

import logging

import pytest

pytest.importorskip("babel")

from refgraphengine.analysis.impact import assess_impact  # noqa: E402
from refgraphengine.analysis.stats import compute_stats  # noqa: E402
from refgraphengine.analysis.summary import (  # noqa: E402
    format_impact_summary,
    format_stats_summary,
    resolve_locale,
)


class TestResolveLocale:
    """Tests for resolve_locale."""

    def test_hyphenated_code(self) -> None:
        assert str(resolve_locale("de-DE")) == "de_DE"

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        resolve_locale.cache_clear()
        with caplog.at_level(logging.WARNING):
            locale = resolve_locale("xx_XX")
        assert str(locale) == "en_US"
        assert "Falling back to en_US" in caplog.text


class TestFormatStatsSummary:
    """Tests for format_stats_summary."""

    def test_english(self) -> None:
        stats = compute_stats({"a": ["b", "c"], "b": ["c"], "c": []})
        assert format_stats_summary(stats) == (
            "3 entities, 3 references (1.00 per entity on average); "
            "at most 2 outgoing and 2 incoming references"
        )

    def test_singular_forms(self) -> None:
        stats = compute_stats({"a": ["b"]})
        summary = format_stats_summary(stats)
        assert summary.startswith("1 entity, 1 reference (1.00 per entity")

    def test_locale_separators(self) -> None:
        graph = {f"n{i}": ["n0"] * 3 for i in range(1200)}
        graph["n0"] = ["n1"]
        stats = compute_stats(graph)
        english = format_stats_summary(stats, "en_US")
        german = format_stats_summary(stats, "de_DE")
        assert english.startswith("1,200 entities, 3,598 references (3.00")
        assert german.startswith("1.200 entities, 3.598 references (3,00")

    def test_decimal_places(self) -> None:
        stats = compute_stats({"a": ["b"], "b": [], "c": []})
        assert "(0.3 per entity" in format_stats_summary(stats, decimal_places=1)


class TestFormatImpactSummary:
    """Tests for format_impact_summary."""

    def test_safe_to_remove(self) -> None:
        report = assess_impact("a", {"a": ["b"], "b": []})
        assert format_impact_summary(report) == (
            "'a' is not referenced and can be removed safely"
        )

    def test_direct_only(self) -> None:
        report = assess_impact("b", {"a": ["b"], "b": []})
        assert format_impact_summary(report) == "1 entity depends on 'b'"

    def test_with_indirect(self) -> None:
        report = assess_impact("c", {"a": ["b"], "b": ["c"], "x": ["c"], "c": []})
        assert format_impact_summary(report) == (
            "2 entities depend on 'c' (3 including indirect references)"
        )


class TestBabelCompat:
    """Tests for the optional-dependency guard."""

    def test_babel_available(self) -> None:
        from refgraphengine.core import is_babel_available  # noqa: PLC0415

        assert is_babel_available()

    def test_missing_babel_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from refgraphengine.core import babel_compat  # noqa: PLC0415

        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(babel_compat.BabelImportError, match=r"refgraphengine\[babel\]"):
            babel_compat.get_babel_numbers()
