"""Tests for generation/llm_provider.py and generation/results.py."""
import json
from unittest.mock import MagicMock, patch

import pytest

ARTICLES_JSON = json.dumps({
    "articles": [
        {
            "title": "Fed holds rates",
            "url": "https://example.com/fed",
            "focus_area": "Rates",
            "relevance_score": 90,
            "cluster_weight": 80,
        },
        {
            "title": "Bad score",
            "url": "https://example.com/bad",
            "relevance_score": 150,
        },
    ]
})


def make_response(content, prompt_tokens=100, completion_tokens=200):
    response = MagicMock()
    response.choices[0].message.content = content
    response.usage.prompt_tokens = prompt_tokens
    response.usage.completion_tokens = completion_tokens
    return response


class TestOpenAIProvider:
    def test_sends_body_without_metadata(self):
        from newsdesk.generation import OpenAIProvider, SearchSettings, embed_metadata
        with patch("newsdesk.generation.llm_provider.OpenAI") as mock_openai:
            client = mock_openai.return_value
            client.chat.completions.create.return_value = make_response("  answer  ")

            provider = OpenAIProvider(api_key="k", model="llama-3.1-sonar-small-128k-online")
            settings = SearchSettings(temperature=0.7, max_tokens=500)
            output = provider.search_news(embed_metadata("Find news", settings), settings)

        assert output == "answer"
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "Find news"}]
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 500

    def test_usage_stats_and_cost(self):
        from newsdesk.generation import OpenAIProvider
        with patch("newsdesk.generation.llm_provider.OpenAI") as mock_openai:
            mock_openai.return_value.chat.completions.create.return_value = make_response(
                "ok", prompt_tokens=1_000_000, completion_tokens=1_000_000
            )
            provider = OpenAIProvider(api_key="k", model="llama-3.1-sonar-small-128k-online")
            provider.search_news("prompt")

        stats = provider.get_usage_stats()
        assert stats["api_calls"] == 1
        assert stats["total_tokens"] == 2_000_000
        assert stats["estimated_cost"] == pytest.approx(0.40)

    def test_unknown_model_has_no_cost(self):
        from newsdesk.generation import OpenAIProvider
        with patch("newsdesk.generation.llm_provider.OpenAI"):
            provider = OpenAIProvider(api_key="k", model="custom-model")
        assert provider._calculate_cost(1000, 1000) == 0.0

    def test_error_returns_failure_message(self):
        from newsdesk.generation import OpenAIProvider
        with patch("newsdesk.generation.llm_provider.OpenAI") as mock_openai:
            mock_openai.return_value.chat.completions.create.side_effect = RuntimeError("boom")
            provider = OpenAIProvider(api_key="k")
            output = provider.search_news("prompt")
        assert output == "Failed to run news search: boom"


class TestParseArticles:
    def test_plain_json_skips_invalid_items(self):
        from newsdesk.generation import parse_articles
        articles = parse_articles(ARTICLES_JSON)
        assert [a.title for a in articles] == ["Fed holds rates"]
        assert articles[0].cluster_weight == 80

    def test_code_fence(self):
        from newsdesk.generation import parse_articles
        text = f"Here you go:\n```json\n{ARTICLES_JSON}\n```\nDone."
        assert len(parse_articles(text)) == 1

    def test_surrounding_prose(self):
        from newsdesk.generation import parse_articles
        text = f"Results follow. {ARTICLES_JSON} Hope this helps."
        assert len(parse_articles(text)) == 1

    def test_unparseable(self):
        from newsdesk.generation import parse_articles
        assert parse_articles("no json here") == []
        assert parse_articles('{"items": []}') == []
        assert parse_articles("") == []


class TestRunPromptTest:
    def test_mock_provider(self):
        from newsdesk.generation import MockLLMProvider, embed_metadata, run_prompt_test
        provider = MockLLMProvider()
        result = run_prompt_test(provider, embed_metadata("Find news", {"recency_filter": "week"}))

        assert result.error is None
        assert result.model == "mock"
        assert len(result.articles) == 1
        assert provider.calls == ["Find news"]

    def test_uses_embedded_settings(self):
        from newsdesk.generation import embed_metadata, run_prompt_test
        provider = MagicMock()
        provider.model = "sonar"
        provider.search_news.return_value = ARTICLES_JSON

        run_prompt_test(provider, embed_metadata("Body", {"temperature": 0.9, "max_tokens": 42}))

        settings = provider.search_news.call_args.args[1]
        assert settings.temperature == 0.9
        assert settings.max_tokens == 42

    def test_invalid_settings_fall_back_to_defaults(self):
        from newsdesk.generation import SearchSettings, embed_metadata, run_prompt_test
        provider = MagicMock()
        provider.model = "sonar"
        provider.search_news.return_value = "{}"

        run_prompt_test(provider, embed_metadata("Body", {"temperature": 9}))

        assert provider.search_news.call_args.args[1] == SearchSettings()

    def test_failure(self):
        from newsdesk.generation import run_prompt_test
        provider = MagicMock()
        provider.model = "sonar"
        provider.search_news.return_value = "Failed to run news search: timeout"

        result = run_prompt_test(provider, "Body")
        assert result.error == "Failed to run news search: timeout"
        assert result.articles == []
