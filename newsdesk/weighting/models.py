"""Weighting models."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from ..models import KeywordCluster, Source

HIGH_PRIORITY_THRESHOLD = 70
MEDIUM_PRIORITY_THRESHOLD = 40


class Emphasis(str, Enum):
    """Emphasis label derived from a theme's average weight."""

    HIGH = "HIGH PRIORITY"
    MEDIUM = "MEDIUM PRIORITY"
    LOW = "LOW PRIORITY"

    @property
    def guidance(self) -> str:
        """Coverage guidance appended to the label in prompts."""
        return EMPHASIS_GUIDANCE[self]


EMPHASIS_GUIDANCE: Dict[Emphasis, str] = {
    Emphasis.HIGH: "Focus heavily on this area",
    Emphasis.MEDIUM: "Balanced coverage",
    Emphasis.LOW: "Minimal but representative coverage",
}


class ThemeGroup(BaseModel):
    """Clusters sharing a primary theme, with aggregate metrics."""

    theme: str = Field(..., description="Primary theme")
    clusters: List[KeywordCluster] = Field(..., description="Member clusters")
    average_weight: float = Field(..., description="Mean member priority weight")
    total_keywords: int = Field(..., description="Sum of member keyword counts")
    sub_themes: List[str] = Field(..., description="Deduplicated sub-themes")
    emphasis: Emphasis = Field(..., description="Emphasis label")


class ThemeAllocation(BaseModel):
    """A ranked theme in an allocation plan."""

    theme: str = Field(..., description="Primary theme")
    clusters: List[KeywordCluster] = Field(..., description="Selected member clusters")
    average_weight: float = Field(..., description="Mean member priority weight")
    allocation_percent: int = Field(..., description="Search allocation percentage")
    emphasis: Emphasis = Field(..., description="Emphasis label")
    sub_themes: List[str] = Field(..., description="Deduplicated sub-themes")
    keywords: List[str] = Field(..., description="Weight-allocated, deduplicated keywords")


class AllocationPlan(BaseModel):
    """Ordered, weighted allocation of the selected themes."""

    themes: List[ThemeAllocation] = Field(default_factory=list, description="Themes by weight")
    total_weight: int = Field(0, description="Raw sum of selected cluster weights")

    @property
    def high_priority_themes(self) -> List[str]:
        """Themes whose average weight reaches the high threshold."""
        return [t.theme for t in self.themes if t.emphasis is Emphasis.HIGH]

    @property
    def medium_priority_themes(self) -> List[str]:
        return [t.theme for t in self.themes if t.emphasis is Emphasis.MEDIUM]


class SourcePartition(BaseModel):
    """Sources split into priority and competitor buckets."""

    priority: List[Source] = Field(default_factory=list, description="Tier 1-2 non-competitors")
    competitors: List[Source] = Field(default_factory=list, description="Competitor sources")


class ClusterWeightShare(BaseModel):
    """A cluster's share of the total selected weight."""

    cluster: KeywordCluster
    weight_percentage: int = Field(..., description="Rounded share of total weight")
    keyword_allocation: int = Field(..., description="Keywords taken from the cluster")


class ScoringPercentages(BaseModel):
    """Scoring split across rubric categories."""

    high: int
    regulatory: int = 25
    market: int = 20
    technology: int = 15
    competitive: int


class WeightedScoringCriteria(BaseModel):
    """Themes bucketed by weight tier plus a suggested scoring split."""

    high_priority: List[str] = Field(default_factory=list)
    medium_priority: List[str] = Field(default_factory=list)
    low_priority: List[str] = Field(default_factory=list)
    scoring_percentages: ScoringPercentages
