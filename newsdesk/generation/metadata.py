"""Embedded search-settings metadata in prompt text.

Prompt documents may start with a comment block holding JSON:

    /*
    { "search_settings": { ... } }
    */

The block is admin metadata only and is removed before a prompt is shown
to a reader or sent to a model.
"""

import json
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel

from ..catalog import is_search_model
from ..models import LlmPrompt

METADATA_PATTERN = re.compile(r"\A/\*\n(.*?)\n\*/", re.DOTALL)
METADATA_BLOCK_PATTERN = re.compile(r"\A/\*\n.*?\n\*/\n", re.DOTALL)


def embed_metadata(body: str, settings: Union[BaseModel, Dict[str, Any]]) -> str:
    """Prefix body with a search_settings metadata block."""
    if body.startswith("/*"):
        return body

    if isinstance(settings, BaseModel):
        settings = settings.model_dump(mode="json")

    header = json.dumps({"search_settings": settings}, indent=2, ensure_ascii=False)
    return f"/*\n{header}\n*/\n{body}"


def extract_metadata(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decoded metadata block, or None if absent or not a JSON object."""
    if not text:
        return None

    match = METADATA_PATTERN.match(text)
    if not match:
        return None

    try:
        metadata = json.loads(match.group(1))
    except json.JSONDecodeError:
        return None

    return metadata if isinstance(metadata, dict) else None


def strip_metadata(text: str) -> str:
    """Prompt text without its leading metadata block."""
    return METADATA_BLOCK_PATTERN.sub("", text, count=1)


def split_prompt(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    """Split prompt text into (metadata, body)."""
    return extract_metadata(text), strip_metadata(text)


def search_settings_of(text: str) -> Dict[str, Any]:
    """The search_settings object of a prompt, or an empty dict."""
    metadata = extract_metadata(text) or {}
    settings = metadata.get("search_settings")
    return settings if isinstance(settings, dict) else {}


def is_news_search_prompt(prompt: LlmPrompt) -> bool:
    """Whether a stored prompt is a news search prompt."""
    if search_settings_of(prompt.prompt_text).get("is_news_search") is True:
        return True

    if prompt.model and is_search_model(prompt.model):
        return True

    return "news_search" in (prompt.function_name or "").lower()


def filter_news_search_prompts(prompts: Iterable[LlmPrompt]) -> List[LlmPrompt]:
    return [p for p in prompts if is_news_search_prompt(p)]
