"""Per-function model recommendations with cost estimates."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

REQUESTS_PER_DAY = 30
DAYS_PER_MONTH = 30
INPUT_TOKENS_PER_REQUEST = 500
OUTPUT_TOKENS_PER_REQUEST = 1500


class RecommendationKind(str, Enum):
    EFFECTIVE = "effective"
    BUDGET = "budget"
    BALANCED = "balanced"


class ModelRecommendation(BaseModel):
    """A recommended model for a function category."""

    model: str = Field(..., description="Model identifier")
    provider: str = Field(..., description="Model provider")
    input_cost_per_1m: float = Field(..., description="USD per million input tokens", ge=0.0)
    output_cost_per_1m: float = Field(..., description="USD per million output tokens", ge=0.0)
    avg_latency: str = Field(..., description="Typical latency range")
    strengths: List[str] = Field(default_factory=list, description="Why to pick it")
    recommendation: RecommendationKind = Field(..., description="Recommendation kind")

    @property
    def monthly_cost(self) -> float:
        return estimate_monthly_cost(self.input_cost_per_1m, self.output_cost_per_1m)


class CategoryRecommendations(BaseModel):
    """Effective and budget picks for one function category."""

    effective: ModelRecommendation
    budget: ModelRecommendation
    balanced: Optional[ModelRecommendation] = None


def estimate_monthly_cost(input_cost_per_1m: float, output_cost_per_1m: float) -> float:
    """Monthly USD cost at the assumed request volume and token mix."""
    per_request = (
        INPUT_TOKENS_PER_REQUEST * input_cost_per_1m
        + OUTPUT_TOKENS_PER_REQUEST * output_cost_per_1m
    ) / 1_000_000
    return per_request * REQUESTS_PER_DAY * DAYS_PER_MONTH


def _pick(
    kind: RecommendationKind,
    model: str,
    provider: str,
    input_cost: float,
    output_cost: float,
    latency: str,
    strengths: List[str],
) -> ModelRecommendation:
    return ModelRecommendation(
        model=model,
        provider=provider,
        input_cost_per_1m=input_cost,
        output_cost_per_1m=output_cost,
        avg_latency=latency,
        strengths=strengths,
        recommendation=kind,
    )


_EFFECTIVE = RecommendationKind.EFFECTIVE
_BUDGET = RecommendationKind.BUDGET

SONAR_SMALL = "llama-3.1-sonar-small-128k-online"
SONAR_LARGE = "llama-3.1-sonar-large-128k-online"
SONAR_HUGE = "llama-3.1-sonar-huge-128k-online"

MODEL_RECOMMENDATIONS: Dict[str, CategoryRecommendations] = {
    "news_search": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, SONAR_LARGE, "perplexity", 1.00, 1.00, "2-4s",
                        ["Real-time search", "Large context", "High accuracy"]),
        budget=_pick(_BUDGET, SONAR_SMALL, "perplexity", 0.20, 0.20, "1-2s",
                     ["Cost effective", "Real-time search", "Fast response"]),
    ),
    "breaking_news": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, SONAR_HUGE, "perplexity", 5.00, 5.00, "3-6s",
                        ["Highest accuracy", "Real-time data", "Complex reasoning"]),
        budget=_pick(_BUDGET, SONAR_SMALL, "perplexity", 0.20, 0.20, "1-2s",
                     ["Fast alerts", "Cost effective", "Good accuracy"]),
    ),
    "website_scraping": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, "gpt-4o", "openai", 2.50, 10.00, "2-5s",
                        ["Complex parsing", "Vision capability", "High accuracy"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-2s",
                     ["Very fast", "Low cost", "Good for simple scraping"]),
    ),
    "article_analysis": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, "gpt-4o", "openai", 2.50, 10.00, "2-5s",
                        ["Deep analysis", "Complex reasoning", "High quality"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-2s",
                     ["Fast analysis", "Cost effective", "Good insights"]),
    ),
    "content_generation": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, "gpt-4o", "openai", 2.50, 10.00, "3-8s",
                        ["High quality writing", "Creative content", "Professional tone"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-3s",
                     ["Fast generation", "Low cost", "Good quality"]),
    ),
    "editorial_research": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, SONAR_LARGE, "perplexity", 1.00, 1.00, "2-4s",
                        ["Real-time research", "Large context", "Source citations"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-2s",
                     ["Fast research", "Cost effective", "Good synthesis"]),
    ),
    "fact_checking": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, SONAR_LARGE, "perplexity", 1.00, 1.00, "2-4s",
                        ["Real-time verification", "Source access", "High accuracy"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-2s",
                     ["Fast checking", "Low cost", "Good logic"]),
    ),
    "seo_optimization": CategoryRecommendations(
        effective=_pick(_EFFECTIVE, "gpt-4o", "openai", 2.50, 10.00, "2-4s",
                        ["Advanced SEO knowledge", "Keyword optimization", "Technical SEO"]),
        budget=_pick(_BUDGET, "gpt-4o-mini", "openai", 0.15, 0.60, "1-2s",
                     ["Basic optimization", "Fast results", "Cost effective"]),
    ),
}


def get_recommendations(category_id: str) -> Optional[CategoryRecommendations]:
    return MODEL_RECOMMENDATIONS.get(category_id)
