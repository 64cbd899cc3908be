"""News-search prompt generation and testing."""

from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider
from .metadata import (
    embed_metadata,
    extract_metadata,
    filter_news_search_prompts,
    is_news_search_prompt,
    search_settings_of,
    split_prompt,
    strip_metadata,
)
from .models import (
    RECENCY_LABELS,
    Recency,
    SearchArticle,
    SearchSettings,
    SearchTestResult,
    SelectedThemes,
    recency_label,
)
from .results import parse_articles, run_prompt_test
from .template import NewsSearchPromptTemplate, generate_news_search_prompt

__all__ = [
    "LLMProvider",
    "MockLLMProvider",
    "NewsSearchPromptTemplate",
    "OpenAIProvider",
    "RECENCY_LABELS",
    "Recency",
    "SearchArticle",
    "SearchSettings",
    "SearchTestResult",
    "SelectedThemes",
    "embed_metadata",
    "extract_metadata",
    "filter_news_search_prompts",
    "generate_news_search_prompt",
    "is_news_search_prompt",
    "parse_articles",
    "recency_label",
    "run_prompt_test",
    "search_settings_of",
    "split_prompt",
    "strip_metadata",
]
