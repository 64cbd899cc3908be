"""Cluster weighting, allocation and source classification."""

from .allocator import (
    AllocationCalculator,
    emphasis_for,
    keyword_allocation,
    round_half_up,
)
from .distribution import (
    calculate_cluster_weight_distribution,
    generate_weighted_scoring_criteria,
    group_themes,
)
from .models import (
    AllocationPlan,
    ClusterWeightShare,
    Emphasis,
    ScoringPercentages,
    SourcePartition,
    ThemeAllocation,
    ThemeGroup,
    WeightedScoringCriteria,
)
from .sources import SourceClassifier, site_host

__all__ = [
    "AllocationCalculator",
    "AllocationPlan",
    "ClusterWeightShare",
    "Emphasis",
    "ScoringPercentages",
    "SourceClassifier",
    "SourcePartition",
    "ThemeAllocation",
    "ThemeGroup",
    "WeightedScoringCriteria",
    "calculate_cluster_weight_distribution",
    "emphasis_for",
    "generate_weighted_scoring_criteria",
    "group_themes",
    "keyword_allocation",
    "round_half_up",
    "site_host",
]
