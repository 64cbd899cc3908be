"""Shared CLI helpers."""

from typing import List, Tuple

import typer
from rich.console import Console

from ..config import Config, load_clusters, load_sources
from ..models import KeywordCluster, Source

console = Console()


def load_config_or_exit() -> Config:
    """Load configuration, exiting with a message if it is missing or invalid."""
    config = Config()
    try:
        config.config
    except FileNotFoundError:
        console.print("[red]Config file not found. Run 'newsdesk init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return config


def load_taxonomy(config: Config) -> Tuple[List[KeywordCluster], List[Source]]:
    """Load clusters and sources, exiting with a message on failure."""
    try:
        return load_clusters(config.clusters_path), load_sources(config.sources_path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}. Run 'newsdesk init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
