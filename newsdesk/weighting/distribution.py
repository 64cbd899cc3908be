"""Per-cluster weight distribution and theme summaries."""

from typing import List, Optional, Sequence

from ..models import KeywordCluster
from .allocator import (
    average_weight,
    dedupe,
    emphasis_for,
    group_by_theme,
    keyword_allocation,
    round_half_up,
)
from .models import (
    ClusterWeightShare,
    Emphasis,
    ScoringPercentages,
    ThemeGroup,
    WeightedScoringCriteria,
)


def _filter(
    clusters: Sequence[KeywordCluster],
    selected_themes: Optional[Sequence[str]],
) -> List[KeywordCluster]:
    if selected_themes:
        wanted = set(selected_themes)
        return [c for c in clusters if c.primary_theme in wanted]
    return list(clusters)


def group_themes(clusters: Sequence[KeywordCluster]) -> List[ThemeGroup]:
    """Summarise clusters per primary theme, in first-seen order."""
    groups = []
    for theme, members in group_by_theme(clusters).items():
        avg = average_weight(members)
        groups.append(
            ThemeGroup(
                theme=theme,
                clusters=members,
                average_weight=avg,
                total_keywords=sum(len(c.keywords) for c in members),
                sub_themes=dedupe(c.sub_theme for c in members if c.sub_theme),
                emphasis=emphasis_for(avg),
            )
        )
    return groups


def calculate_cluster_weight_distribution(
    clusters: Sequence[KeywordCluster],
    selected_themes: Optional[Sequence[str]] = None,
) -> List[ClusterWeightShare]:
    """Each selected cluster's share of the total weight and keyword budget."""
    filtered = _filter(clusters, selected_themes)
    total_weight = sum(c.priority_weight for c in filtered)

    return [
        ClusterWeightShare(
            cluster=cluster,
            weight_percentage=(
                round_half_up(cluster.priority_weight / total_weight * 100)
                if total_weight > 0
                else 0
            ),
            keyword_allocation=keyword_allocation(cluster.priority_weight),
        )
        for cluster in filtered
    ]


def generate_weighted_scoring_criteria(
    clusters: Sequence[KeywordCluster],
    selected_themes: Optional[Sequence[str]] = None,
) -> WeightedScoringCriteria:
    """Bucket cluster themes by weight tier and suggest a scoring split."""
    shares = calculate_cluster_weight_distribution(clusters, selected_themes)

    buckets = {Emphasis.HIGH: [], Emphasis.MEDIUM: [], Emphasis.LOW: []}
    for share in shares:
        cluster = share.cluster
        buckets[emphasis_for(cluster.priority_weight)].append(cluster.primary_theme)

    high_count = len(buckets[Emphasis.HIGH])
    return WeightedScoringCriteria(
        high_priority=buckets[Emphasis.HIGH],
        medium_priority=buckets[Emphasis.MEDIUM],
        low_priority=buckets[Emphasis.LOW],
        scoring_percentages=ScoringPercentages(
            high=max(30, min(50, high_count * 10)),
            competitive=max(5, 30 - high_count * 5),
        ),
    )
