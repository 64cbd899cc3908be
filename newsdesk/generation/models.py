"""Data models for prompt generation."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Recency(str, Enum):
    """Search recency filter values."""

    THIRTY_MINUTES = "30m"
    HOUR = "hour"
    DAY = "day"
    FORTY_EIGHT_HOURS = "48h"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


RECENCY_LABELS: Dict[str, str] = {
    Recency.THIRTY_MINUTES.value: "30 minutes",
    Recency.HOUR.value: "1 hour",
    Recency.DAY.value: "24 hours",
    Recency.FORTY_EIGHT_HOURS.value: "48 hours",
    Recency.WEEK.value: "7 days",
    Recency.MONTH.value: "30 days",
    Recency.YEAR.value: "365 days",
}
DEFAULT_RECENCY_LABEL = "24 hours"


def recency_label(recency: Optional[str]) -> str:
    """Human-readable time range for a recency filter value."""
    if isinstance(recency, Recency):
        recency = recency.value
    return RECENCY_LABELS.get(recency or "", DEFAULT_RECENCY_LABEL)


class SelectedThemes(BaseModel):
    """Theme selection recorded alongside a prompt."""

    primary: List[str] = Field(default_factory=list, description="Primary themes")
    sub: List[str] = Field(default_factory=list, description="Sub-themes")
    professions: List[str] = Field(default_factory=list, description="Target professions")


class SearchSettings(BaseModel):
    """Search settings embedded as metadata in a prompt document."""

    domain_filter: str = Field("auto", description="Search domain filter")
    recency_filter: str = Field(Recency.DAY.value, description="Search recency filter")
    temperature: float = Field(0.2, description="Sampling temperature", ge=0.0, le=2.0)
    max_tokens: int = Field(1000, description="Response token budget", ge=1)
    is_news_search: bool = Field(True, description="Marks the prompt as a news search")
    selected_themes: SelectedThemes = Field(default_factory=SelectedThemes)

    @property
    def time_range(self) -> str:
        """Human-readable recency window."""
        return recency_label(self.recency_filter)


class SearchArticle(BaseModel):
    """One article returned by a search model for a rendered prompt."""

    title: str = Field(..., description="Full headline")
    url: str = Field(..., description="Direct link to the article")
    focus_area: Optional[str] = Field(None, description="Weighted theme matched")
    summary: Optional[str] = Field(None, description="Business-impact summary")
    source: Optional[str] = Field(None, description="Source name and tier")
    relevance_score: int = Field(0, description="Relevance from 0 to 100", ge=0, le=100)
    cluster_weight: Optional[int] = Field(None, description="Weight of the matched cluster")
    justification: Optional[str] = Field(None, description="Scoring rationale")


class SearchTestResult(BaseModel):
    """Outcome of sending a prompt to a search model."""

    model: str = Field(..., description="Model used")
    raw_output: str = Field(..., description="Raw response text")
    articles: List[SearchArticle] = Field(default_factory=list, description="Parsed articles")
    duration_ms: int = Field(0, description="Round-trip time in milliseconds")
    error: Optional[str] = Field(None, description="Error message if the call failed")
