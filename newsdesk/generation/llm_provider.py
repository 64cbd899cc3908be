"""LLM provider interface and implementations for testing search prompts."""

import json
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from openai import OpenAI
from rich.console import Console

from ..catalog import MODEL_RECOMMENDATIONS
from .metadata import strip_metadata
from .models import SearchSettings

console = Console()


def _price_table() -> Dict[str, Dict[str, float]]:
    """USD per million tokens for every recommended model."""
    prices = {}
    for picks in MODEL_RECOMMENDATIONS.values():
        for pick in (picks.effective, picks.budget, picks.balanced):
            if pick is not None:
                prices[pick.model] = {
                    "input": pick.input_cost_per_1m,
                    "output": pick.output_cost_per_1m,
                }
    return prices


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def search_news(self, prompt_text: str, settings: Optional[SearchSettings] = None) -> str:
        """
        Run a news-search prompt.

        Args:
            prompt_text: Prompt text; a metadata header is removed before sending
            settings: Search settings supplying temperature and token budget

        Returns:
            Raw model response text
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible chat completions provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: API key
            model: Model name to use
            base_url: Custom base URL for OpenAI-compatible search endpoints
        """
        self.client = OpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.prompt_tokens = 0
        self.completion_tokens = 0
        self.api_calls = 0
        self.cost_per_1m_tokens = _price_table()

    def _calculate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        """Calculate cost from token counts."""
        if self.model not in self.cost_per_1m_tokens:
            return 0.0

        rates = self.cost_per_1m_tokens[self.model]
        return (
            prompt_tokens / 1_000_000 * rates["input"]
            + completion_tokens / 1_000_000 * rates["output"]
        )

    def search_news(self, prompt_text: str, settings: Optional[SearchSettings] = None) -> str:
        """Send the prompt body to the model."""
        settings = settings or SearchSettings()
        body = strip_metadata(prompt_text)

        try:
            self.api_calls += 1
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": body}],
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
            )

            if response.usage:
                self.prompt_tokens += response.usage.prompt_tokens
                self.completion_tokens += response.usage.completion_tokens

            return (response.choices[0].message.content or "").strip()

        except Exception as e:
            console.print(f"[red]Error running news search with {self.model}: {e}[/red]")
            return f"Failed to run news search: {str(e)}"

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.prompt_tokens + self.completion_tokens,
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "api_calls": self.api_calls,
            "estimated_cost": self._calculate_cost(self.prompt_tokens, self.completion_tokens),
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing."""

    def __init__(self) -> None:
        """Initialize mock provider."""
        self.model = "mock"
        self.calls: List[str] = []

    def search_news(self, prompt_text: str, settings: Optional[SearchSettings] = None) -> str:
        """Return a canned search result."""
        self.calls.append(strip_metadata(prompt_text))

        return json.dumps(
            {
                "articles": [
                    {
                        "title": "Mock headline for prompt testing",
                        "url": "https://example.com/mock-article",
                        "focus_area": "General",
                        "summary": "Mock summary of a relevant development.",
                        "source": "Example News (Tier 1)",
                        "relevance_score": 80,
                        "cluster_weight": 50,
                        "justification": "Mock justification",
                    }
                ]
            },
            indent=2,
        )

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "estimated_cost": 0.0,
            "model": self.model,
        }
