"""Model families and display labels."""

from enum import Enum
from typing import Dict, List, Tuple


class ModelFamily(str, Enum):
    """Model families recognised from model identifiers."""

    PERPLEXITY = "perplexity"
    SONAR = "sonar"
    ONLINE = "online"
    GPT = "gpt"
    CLAUDE = "claude"
    GEMINI = "gemini"
    OTHER = "other"


MODEL_FAMILY_LABELS: Dict[ModelFamily, str] = {
    ModelFamily.PERPLEXITY: "Perplexity News Search",
    ModelFamily.SONAR: "Llama Sonar with online search",
    ModelFamily.ONLINE: "Online search model",
    ModelFamily.GPT: "OpenAI GPT",
    ModelFamily.CLAUDE: "Anthropic Claude",
    ModelFamily.GEMINI: "Google Gemini",
}

MODEL_FAMILY_PROVIDERS: Dict[ModelFamily, str] = {
    ModelFamily.PERPLEXITY: "perplexity",
    ModelFamily.SONAR: "perplexity",
    ModelFamily.ONLINE: "perplexity",
    ModelFamily.GPT: "openai",
    ModelFamily.CLAUDE: "anthropic",
    ModelFamily.GEMINI: "google",
}

SEARCH_FAMILIES = frozenset({ModelFamily.PERPLEXITY, ModelFamily.SONAR, ModelFamily.ONLINE})

# Checked in order; the first marker found in the identifier wins
_FAMILY_MARKERS: List[Tuple[str, ModelFamily]] = [
    ("perplexity", ModelFamily.PERPLEXITY),
    ("sonar", ModelFamily.SONAR),
    ("online", ModelFamily.ONLINE),
    ("gpt", ModelFamily.GPT),
    ("claude", ModelFamily.CLAUDE),
    ("gemini", ModelFamily.GEMINI),
]


def classify_model(model_id: str) -> ModelFamily:
    """Family of a model identifier."""
    model = (model_id or "").lower()
    for marker, family in _FAMILY_MARKERS:
        if marker in model:
            return family
    return ModelFamily.OTHER


def model_label(model_id: str) -> str:
    """Display label for a model; unknown models show their own id."""
    return MODEL_FAMILY_LABELS.get(classify_model(model_id), model_id)


def model_provider(model_id: str) -> str:
    return MODEL_FAMILY_PROVIDERS.get(classify_model(model_id), "unknown")


def is_search_model(model_id: str) -> bool:
    """Whether the model can search the live web."""
    return classify_model(model_id) in SEARCH_FAMILIES
