"""Configuration and taxonomy file loader."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError
from rich.console import Console

from ..models import KeywordCluster, Source
from .models import ConfigModel

console = Console()

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "newsdesk"

ModelT = TypeVar("ModelT", bound=BaseModel)


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_dir = Path(os.environ.get("NEWSDESK_CONFIG_DIR", DEFAULT_CONFIG_DIR))
            config_path = config_dir / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    @property
    def clusters_path(self) -> Path:
        return self.config_path.parent / "clusters.yaml"

    @property
    def sources_path(self) -> Path:
        return self.config_path.parent / "sources.yaml"

    def get_db_config(self) -> Dict[str, Any]:
        """Get database configuration dict."""
        db_config = self.config.postgres.model_dump()

        # Handle password from environment if specified
        if db_config.get("password_env"):
            password = os.environ.get(db_config["password_env"])
            if password:
                db_config["password"] = password

        return db_config

    def get_llm_config(self) -> Dict[str, Any]:
        """Get LLM configuration dict."""
        llm_config = self.config.llm.model_dump()

        # Handle API key from environment if specified
        if llm_config.get("api_key_env"):
            api_key = os.environ.get(llm_config["api_key_env"])
            if api_key:
                llm_config["api_key"] = api_key

        return llm_config


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def _load_entries(path: Path, key: str, model: Type[ModelT], label: str) -> List[ModelT]:
    if not path.exists():
        raise FileNotFoundError(f"{key.capitalize()} file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {key} file: {e}")

    if not isinstance(data, dict) or not data.get(key):
        return []

    entries = []
    for entry in data[key]:
        try:
            entries.append(model(**entry))
        except (TypeError, ValidationError) as e:
            name = entry.get(label, "unknown") if isinstance(entry, dict) else "unknown"
            console.print(f"[yellow]Skipping invalid {key[:-1]} {name}: {e}[/yellow]")

    return entries


def _save_entries(path: Path, key: str, entries: List[BaseModel]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {key: [e.model_dump(mode="json", exclude_none=True) for e in entries]}

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def load_clusters(clusters_path: Path) -> List[KeywordCluster]:
    """Load keyword clusters from YAML file."""
    return _load_entries(clusters_path, "clusters", KeywordCluster, "sub_theme")


def save_clusters(clusters: List[KeywordCluster], clusters_path: Path) -> None:
    """Save keyword clusters to YAML file."""
    _save_entries(clusters_path, "clusters", clusters)


def load_sources(sources_path: Path) -> List[Source]:
    """Load sources from YAML file."""
    return _load_entries(sources_path, "sources", Source, "source_name")


def save_sources(sources: List[Source], sources_path: Path) -> None:
    """Save sources to YAML file."""
    _save_entries(sources_path, "sources", sources)
