"""Weighted allocation of keyword clusters across themes."""

import math
from typing import Dict, Iterable, List, Optional, Sequence

from ..models import KeywordCluster
from .models import (
    HIGH_PRIORITY_THRESHOLD,
    MEDIUM_PRIORITY_THRESHOLD,
    AllocationPlan,
    Emphasis,
    ThemeAllocation,
)

DEFAULT_THEME = "General"
MIN_KEYWORDS_PER_CLUSTER = 3
MAX_KEYWORDS_PER_CLUSTER = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def emphasis_for(weight: float) -> Emphasis:
    """Emphasis label for an average weight."""
    if weight >= HIGH_PRIORITY_THRESHOLD:
        return Emphasis.HIGH
    if weight >= MEDIUM_PRIORITY_THRESHOLD:
        return Emphasis.MEDIUM
    return Emphasis.LOW


def keyword_allocation(weight: int) -> int:
    """Number of leading keywords a cluster of this weight contributes."""
    return max(
        MIN_KEYWORDS_PER_CLUSTER,
        round_half_up(weight / 100 * MAX_KEYWORDS_PER_CLUSTER),
    )


def average_weight(clusters: Sequence[KeywordCluster]) -> float:
    """Arithmetic mean of cluster weights (0.0 for no clusters)."""
    if not clusters:
        return 0.0
    return sum(c.priority_weight for c in clusters) / len(clusters)


def theme_of(cluster: KeywordCluster) -> str:
    return cluster.primary_theme or DEFAULT_THEME


def group_by_theme(clusters: Iterable[KeywordCluster]) -> Dict[str, List[KeywordCluster]]:
    """Group clusters by primary theme in first-seen order."""
    groups: Dict[str, List[KeywordCluster]] = {}
    for cluster in clusters:
        groups.setdefault(theme_of(cluster), []).append(cluster)
    return groups


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop repeats, keeping first-seen order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class AllocationCalculator:
    """Turn clusters and a theme selection into a weighted allocation plan."""

    def __init__(self, top_theme_limit: int = 5) -> None:
        """
        Initialize allocation calculator.

        Args:
            top_theme_limit: Themes kept when no explicit selection is given
        """
        self.top_theme_limit = top_theme_limit

    def select_clusters(
        self,
        clusters: Sequence[KeywordCluster],
        selected_themes: Optional[Sequence[str]] = None,
    ) -> List[KeywordCluster]:
        """
        Filter clusters to the selected themes.

        With no selection, keep clusters of the top themes, ranking themes by
        their clusters in descending weight order, and return them in that
        order. Ties keep input order.
        """
        if selected_themes:
            wanted = set(selected_themes)
            return [c for c in clusters if c.primary_theme in wanted]

        # sorted() is stable, so equal weights keep their input order
        by_weight = sorted(clusters, key=lambda c: c.priority_weight, reverse=True)
        top_themes = set(dedupe(c.primary_theme for c in by_weight)[: self.top_theme_limit])
        return [c for c in by_weight if c.primary_theme in top_themes]

    def _theme_keywords(self, clusters: Sequence[KeywordCluster]) -> List[str]:
        keywords: List[str] = []
        for cluster in clusters:
            keywords.extend(cluster.keywords[: keyword_allocation(cluster.priority_weight)])
        return dedupe(keywords)

    def allocate(
        self,
        clusters: Sequence[KeywordCluster],
        selected_themes: Optional[Sequence[str]] = None,
    ) -> AllocationPlan:
        """
        Build the allocation plan.

        Args:
            clusters: Taxonomy snapshot
            selected_themes: Themes to keep; empty selects the top themes

        Returns:
            Themes ordered by descending average weight
        """
        selected = self.select_clusters(clusters or [], selected_themes)
        total_weight = sum(c.priority_weight for c in selected)

        themes = []
        for theme, members in group_by_theme(selected).items():
            avg = average_weight(members)
            # Scaled by member count, so multi-cluster themes can exceed 100
            percent = (
                round_half_up(avg / total_weight * 100 * len(members))
                if total_weight > 0
                else 0
            )
            themes.append(
                ThemeAllocation(
                    theme=theme,
                    clusters=members,
                    average_weight=avg,
                    allocation_percent=percent,
                    emphasis=emphasis_for(avg),
                    sub_themes=dedupe(c.sub_theme for c in members if c.sub_theme),
                    keywords=self._theme_keywords(members),
                )
            )

        themes.sort(key=lambda t: t.average_weight, reverse=True)
        return AllocationPlan(themes=themes, total_weight=total_weight)
