"""Function categories, model labels and model recommendations."""

from .categories import FUNCTION_CATEGORIES, FunctionCategory, get_function_category
from .models import (
    MODEL_FAMILY_LABELS,
    ModelFamily,
    classify_model,
    is_search_model,
    model_label,
    model_provider,
)
from .recommendations import (
    MODEL_RECOMMENDATIONS,
    CategoryRecommendations,
    ModelRecommendation,
    RecommendationKind,
    estimate_monthly_cost,
    get_recommendations,
)

__all__ = [
    "CategoryRecommendations",
    "FUNCTION_CATEGORIES",
    "FunctionCategory",
    "MODEL_FAMILY_LABELS",
    "MODEL_RECOMMENDATIONS",
    "ModelFamily",
    "ModelRecommendation",
    "RecommendationKind",
    "classify_model",
    "estimate_monthly_cost",
    "get_function_category",
    "get_recommendations",
    "is_search_model",
    "model_label",
    "model_provider",
]
