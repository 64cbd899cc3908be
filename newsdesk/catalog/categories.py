"""LLM function categories."""

from typing import List, Optional

from pydantic import BaseModel, Field


class FunctionCategory(BaseModel):
    """A family of LLM-backed functions."""

    id: str = Field(..., description="Category identifier")
    label: str = Field(..., description="Display label")
    description: str = Field(..., description="What the functions do")
    db_patterns: List[str] = Field(..., description="Substrings of matching function names")

    def matches(self, function_name: str) -> bool:
        name = function_name.lower()
        return any(pattern.lower() in name for pattern in self.db_patterns)


FUNCTION_CATEGORIES: List[FunctionCategory] = [
    FunctionCategory(
        id="news_search",
        label="News Search",
        description="Search for real-time news and industry developments",
        db_patterns=["news_search", "Daily_news_search", "fetch-perplexity-news"],
    ),
    FunctionCategory(
        id="breaking_news",
        label="Breaking News Detection",
        description="Identify and analyze breaking news stories",
        db_patterns=["breaking_news", "urgent_news", "alert"],
    ),
    FunctionCategory(
        id="website_scraping",
        label="Website Scraping",
        description="Extract and process content from websites",
        db_patterns=["scrape-article", "scrape_website", "content_extraction"],
    ),
    FunctionCategory(
        id="article_analysis",
        label="Article Analysis",
        description="Analyze article content, quality, and performance",
        db_patterns=["analyze-article-content", "article_analysis", "content_analysis"],
    ),
    FunctionCategory(
        id="content_generation",
        label="Content Generation",
        description="Generate articles, summaries, and editorial content",
        db_patterns=["generate-article", "content_creation", "draft_generation"],
    ),
    FunctionCategory(
        id="editorial_research",
        label="Editorial Research",
        description="Research topics and gather supporting information",
        db_patterns=["magazine-research", "editorial_research", "topic_research"],
    ),
    FunctionCategory(
        id="fact_checking",
        label="Fact Checking",
        description="Verify information and check source credibility",
        db_patterns=["fact_check", "verify", "credibility_check"],
    ),
    FunctionCategory(
        id="seo_optimization",
        label="SEO Optimization",
        description="Optimize content for search engines and keywords",
        db_patterns=["seo_optimize", "keyword_optimize", "search_optimize"],
    ),
]


def get_function_category(function_name: str) -> Optional[FunctionCategory]:
    """First category whose patterns match a stored function name."""
    for category in FUNCTION_CATEGORIES:
        if category.matches(function_name):
            return category
    return None
