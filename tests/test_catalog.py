"""Tests for the model catalog."""
import pytest


class TestModelFamilies:
    def test_classify(self):
        from newsdesk.catalog import ModelFamily, classify_model
        assert classify_model("llama-3.1-sonar-small-128k-online") is ModelFamily.SONAR
        assert classify_model("perplexity/sonar") is ModelFamily.PERPLEXITY
        assert classify_model("some-online-model") is ModelFamily.ONLINE
        assert classify_model("gpt-4o-mini") is ModelFamily.GPT
        assert classify_model("claude-3-5-sonnet") is ModelFamily.CLAUDE
        assert classify_model("mistral-large") is ModelFamily.OTHER
        assert classify_model("") is ModelFamily.OTHER

    def test_labels(self):
        from newsdesk.catalog import model_label
        assert model_label("llama-3.1-sonar-large-128k-online") == "Llama Sonar with online search"
        assert model_label("perplexity-news") == "Perplexity News Search"
        assert model_label("mistral-large") == "mistral-large"

    def test_search_models(self):
        from newsdesk.catalog import is_search_model
        assert is_search_model("llama-3.1-sonar-small-128k-online")
        assert is_search_model("PERPLEXITY")
        assert not is_search_model("gpt-4o")

    def test_provider(self):
        from newsdesk.catalog import model_provider
        assert model_provider("sonar-pro") == "perplexity"
        assert model_provider("gpt-4o") == "openai"
        assert model_provider("mistral-large") == "unknown"


class TestFunctionCategories:
    def test_eight_categories(self):
        from newsdesk.catalog import FUNCTION_CATEGORIES
        assert len(FUNCTION_CATEGORIES) == 8

    def test_match_function_names(self):
        from newsdesk.catalog import get_function_category
        assert get_function_category("Daily_news_search").id == "news_search"
        assert get_function_category("scrape-article-content").id == "website_scraping"
        assert get_function_category("unrelated") is None


class TestRecommendations:
    def test_every_category_has_recommendations(self):
        from newsdesk.catalog import FUNCTION_CATEGORIES, get_recommendations
        for category in FUNCTION_CATEGORIES:
            recommendations = get_recommendations(category.id)
            assert recommendations is not None, category.id
            assert recommendations.effective.recommendation.value == "effective"
            assert recommendations.budget.recommendation.value == "budget"

    def test_unknown_category(self):
        from newsdesk.catalog import get_recommendations
        assert get_recommendations("nope") is None

    def test_monthly_cost(self):
        from newsdesk.catalog import estimate_monthly_cost
        # (500 * in + 1500 * out) / 1M per request, 30 requests a day for 30 days
        assert estimate_monthly_cost(0.15, 0.60) == pytest.approx(0.8775)
        assert estimate_monthly_cost(0.20, 0.20) == pytest.approx(0.36)

    def test_recommendation_monthly_cost(self):
        from newsdesk.catalog import get_recommendations
        budget = get_recommendations("news_search").budget
        assert budget.model == "llama-3.1-sonar-small-128k-online"
        assert budget.monthly_cost == pytest.approx(0.36)
