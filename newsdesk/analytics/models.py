"""Usage analytics models."""

from typing import List

from pydantic import BaseModel, Field


class UsageBreakdown(BaseModel):
    """Aggregate usage for one function, model or day."""

    key: str = Field(..., description="Function name, model id or ISO date")
    tokens: int = Field(0, description="Total tokens")
    cost: float = Field(0.0, description="Total estimated cost in USD")
    operations: int = Field(0, description="Number of calls")


class UsageAnalytics(BaseModel):
    """Aggregated LLM usage over a time window."""

    total_tokens: int = Field(0, description="Total tokens across all calls")
    total_cost: float = Field(0.0, description="Total estimated cost in USD")
    operation_count: int = Field(0, description="Number of calls")
    average_duration: float = Field(0.0, description="Mean duration in ms of timed calls")
    success_rate: float = Field(0.0, description="Percentage of successful calls")
    function_breakdown: List[UsageBreakdown] = Field(default_factory=list)
    model_breakdown: List[UsageBreakdown] = Field(default_factory=list)
    daily_usage: List[UsageBreakdown] = Field(default_factory=list)

    @property
    def cost_per_operation(self) -> float:
        if self.operation_count == 0:
            return 0.0
        return self.total_cost / self.operation_count
