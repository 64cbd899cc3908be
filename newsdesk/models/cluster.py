"""Keyword cluster model for the editorial taxonomy."""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import DBModel

DEFAULT_PRIORITY_WEIGHT = 50


class KeywordCluster(DBModel):
    """A sub-topic of a primary theme with keywords and a priority weight."""

    primary_theme: str = Field(..., description="Theme shared by related clusters")
    sub_theme: str = Field("", description="Human-readable sub-topic within the theme")
    description: Optional[str] = Field(None, description="Editorial notes")
    keywords: List[str] = Field(default_factory=list, description="Ordered search keywords")
    priority_weight: int = Field(
        DEFAULT_PRIORITY_WEIGHT,
        description="Search emphasis from 0 to 100",
        ge=0,
        le=100,
    )

    @field_validator("priority_weight", mode="before")
    @classmethod
    def default_missing_weight(cls, v: Any) -> Any:
        """Treat a null weight as the default weight."""
        if v is None:
            return DEFAULT_PRIORITY_WEIGHT
        return v

    @field_validator("keywords", mode="before")
    @classmethod
    def default_missing_keywords(cls, v: Any) -> Any:
        """Treat null keywords as an empty list."""
        if v is None:
            return []
        return v

    @field_validator("sub_theme", mode="before")
    @classmethod
    def default_missing_sub_theme(cls, v: Any) -> Any:
        """Treat a null sub-theme as empty."""
        if v is None:
            return ""
        return v
