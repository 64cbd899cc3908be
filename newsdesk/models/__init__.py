"""Data models for the news desk."""

from .cluster import DEFAULT_PRIORITY_WEIGHT, KeywordCluster
from .prompt import LlmPrompt
from .source import Source
from .usage import LlmUsageLog

__all__ = ["DEFAULT_PRIORITY_WEIGHT", "KeywordCluster", "LlmPrompt", "LlmUsageLog", "Source"]
