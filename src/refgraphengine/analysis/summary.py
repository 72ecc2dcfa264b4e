"""Locale-aware summary text for analysis results.

Renders statistics and impact reports as short sentences for a warning
surface. Numbers go through Babel's CLDR data so grouping and decimal
separators follow the user's locale ("1,234.50" vs "1.234,50").

Requires the optional Babel dependency: pip install refgraphengine[babel]

Python 3.13+.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from refgraphengine.constants import DEFAULT_LOCALE, STATS_DECIMAL_PLACES
from refgraphengine.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
)

if TYPE_CHECKING:
    from babel import Locale

    from .impact import ImpactReport
    from .stats import GraphStats

__all__ = [
    "format_impact_summary",
    "format_stats_summary",
    "resolve_locale",
]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def resolve_locale(locale_code: str) -> Locale:
    """Parse a locale code, falling back to the default locale.

    Accepts both "en_US" and "en-US" forms. Unknown or malformed codes
    log a warning and resolve to DEFAULT_LOCALE.

    Raises:
        BabelImportError: If Babel is not installed
    """
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return locale_class.parse(locale_code.replace("-", "_"))
    except unknown_locale_error as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_LOCALE,
        )
    return locale_class.parse(DEFAULT_LOCALE)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def format_stats_summary(
    stats: GraphStats,
    locale_code: str = DEFAULT_LOCALE,
    *,
    decimal_places: int = STATS_DECIMAL_PLACES,
) -> str:
    """Render graph statistics as a one-line summary.

    Args:
        stats: Statistics from compute_stats()
        locale_code: Locale for number formatting
        decimal_places: Fixed decimals for the average out-degree

    Returns:
        Summary such as "1,200 entities, 3,400 references (2.83 per entity on
        average); at most 12 outgoing and 40 incoming references"

    Raises:
        BabelImportError: If Babel is not installed
    """
    numbers = get_babel_numbers()
    locale = resolve_locale(locale_code)
    average_format = "#,##0." + "0" * decimal_places if decimal_places > 0 else "#,##0"

    def num(value: int) -> str:
        return numbers.format_decimal(value, locale=locale)

    nodes = f"{num(stats.node_count)} {_plural(stats.node_count, 'entity', 'entities')}"
    edges = f"{num(stats.edge_count)} {_plural(stats.edge_count, 'reference', 'references')}"
    average = numbers.format_decimal(stats.avg_out_degree, format=average_format, locale=locale)

    return (
        f"{nodes}, {edges} ({average} per entity on average); "
        f"at most {num(stats.max_out_degree)} outgoing and "
        f"{num(stats.max_in_degree)} incoming references"
    )


def format_impact_summary(report: ImpactReport, locale_code: str = DEFAULT_LOCALE) -> str:
    """Render an impact report as a confirmation-dialog sentence.

    Args:
        report: Result of assess_impact()
        locale_code: Locale for number formatting

    Returns:
        "'x' is not referenced and can be removed safely" when nothing
        depends on the target, otherwise a count of direct and indirect
        dependents

    Raises:
        BabelImportError: If Babel is not installed
    """
    if report.safe_to_remove:
        return f"'{report.target}' is not referenced and can be removed safely"

    numbers = get_babel_numbers()
    locale = resolve_locale(locale_code)

    direct = report.impact_count
    total = len(report.transitive_dependents)
    direct_text = numbers.format_decimal(direct, locale=locale)
    verb = _plural(direct, "entity depends", "entities depend")
    summary = f"{direct_text} {verb} on '{report.target}'"

    if total > direct:
        total_text = numbers.format_decimal(total, locale=locale)
        summary += f" ({total_text} including indirect references)"
    return summary
