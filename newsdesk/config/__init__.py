"""Configuration management for the news desk."""

from .loader import (
    Config,
    load_clusters,
    load_config,
    load_sources,
    save_clusters,
    save_config,
    save_sources,
)
from .models import ConfigModel, LLMConfig, PostgresConfig, TemplateConfig

__all__ = [
    "Config",
    "ConfigModel",
    "LLMConfig",
    "PostgresConfig",
    "TemplateConfig",
    "load_clusters",
    "load_config",
    "load_sources",
    "save_clusters",
    "save_config",
    "save_sources",
]
