"""LLM usage log model."""

from typing import Optional

from pydantic import Field

from .base import DBModel


class LlmUsageLog(DBModel):
    """One LLM call as recorded by the calling function."""

    function_name: str = Field(..., description="Calling function")
    model: str = Field(..., description="Model identifier")
    prompt_tokens: int = Field(0, description="Input tokens", ge=0)
    completion_tokens: int = Field(0, description="Output tokens", ge=0)
    total_tokens: int = Field(0, description="Total tokens", ge=0)
    estimated_cost: float = Field(0.0, description="Estimated cost in USD")
    duration_ms: Optional[int] = Field(None, description="Call duration in milliseconds")
    status: str = Field("success", description="Call status (success, error)")
    error_message: Optional[str] = Field(None, description="Error detail when failed")
