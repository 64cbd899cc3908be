"""Stored LLM prompt model."""

from typing import Optional

from pydantic import Field

from .base import DBModel


class LlmPrompt(DBModel):
    """Prompt row; prompt_text may carry an embedded metadata header."""

    function_name: str = Field(..., description="Function the prompt serves")
    model: str = Field(..., description="Model identifier")
    prompt_text: str = Field(..., description="Prompt text, optionally with metadata header")
    include_clusters: bool = Field(False, description="Attach keyword clusters when run")
    include_tracking_summary: bool = Field(False, description="Attach keyword tracking summary")
    include_sources_map: bool = Field(False, description="Attach the sources map")
    is_active: bool = Field(True, description="Whether the prompt is active")
    last_updated_by: Optional[str] = Field(None, description="Last editor")
