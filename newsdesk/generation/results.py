"""Parse and run search-model responses."""

import json
import re
import time
from typing import Any, List, Optional

from pydantic import ValidationError
from rich.console import Console

from .llm_provider import LLMProvider
from .metadata import search_settings_of
from .models import SearchArticle, SearchSettings, SearchTestResult

console = Console()

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def _decode_json(text: str) -> Optional[Any]:
    candidates = [m.group(1) for m in CODE_FENCE_PATTERN.finditer(text)]
    candidates.append(text)

    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate.strip())
        except json.JSONDecodeError:
            continue
    return None


def parse_articles(text: str) -> List[SearchArticle]:
    """Articles from a response's JSON "articles" array; invalid items are skipped."""
    data = _decode_json(text or "")
    if not isinstance(data, dict) or not isinstance(data.get("articles"), list):
        return []

    articles = []
    for item in data["articles"]:
        if not isinstance(item, dict):
            continue
        try:
            articles.append(SearchArticle(**item))
        except ValidationError as e:
            console.print(f"[yellow]Skipping invalid article {item.get('title', 'unknown')}: {e}[/yellow]")
    return articles


def run_prompt_test(provider: LLMProvider, prompt_text: str) -> SearchTestResult:
    """Send a stored prompt to a provider using its embedded search settings."""
    try:
        settings = SearchSettings(**search_settings_of(prompt_text))
    except ValidationError:
        console.print("[yellow]Ignoring invalid search settings in prompt metadata[/yellow]")
        settings = SearchSettings()

    started = time.monotonic()
    output = provider.search_news(prompt_text, settings)
    duration_ms = int((time.monotonic() - started) * 1000)

    error = output if output.startswith("Failed to run news search") else None
    return SearchTestResult(
        model=provider.model,
        raw_output=output,
        articles=[] if error else parse_articles(output),
        duration_ms=duration_ms,
        error=error,
    )
