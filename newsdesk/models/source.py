"""Content source model."""

from typing import Optional

from pydantic import Field

from .base import DBModel


class Source(DBModel):
    """News source with a priority tier (1 is highest)."""

    source_name: str = Field(..., description="Source name")
    source_url: str = Field(..., description="Source homepage URL")
    priority_tier: int = Field(4, description="Priority tier, 1 (highest) through 4", ge=1)
    source_type: Optional[str] = Field(None, description="Free-text classification")

    @property
    def is_competitor(self) -> bool:
        """Whether the source is classified as competitor coverage."""
        return bool(self.source_type) and "competitor" in self.source_type.lower()
