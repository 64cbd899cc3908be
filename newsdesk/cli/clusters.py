"""Keyword cluster management commands."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, save_clusters
from ..db import ClusterStore, get_connection
from ..models import KeywordCluster
from ..weighting import emphasis_for, group_themes, keyword_allocation
from .common import load_config_or_exit, load_taxonomy, split_csv

console = Console()
clusters_app = typer.Typer(help="Manage keyword clusters")


def _find(clusters: List[KeywordCluster], theme: str, sub_theme: str) -> Optional[KeywordCluster]:
    for cluster in clusters:
        if cluster.primary_theme == theme and cluster.sub_theme == sub_theme:
            return cluster
    return None


@clusters_app.command("list")
def clusters_list(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Only show this theme"),
) -> None:
    """List all keyword clusters."""
    clusters, _ = load_taxonomy(Config())

    if theme:
        clusters = [c for c in clusters if c.primary_theme == theme]

    if not clusters:
        console.print("[yellow]No clusters configured.[/yellow]")
        return

    table = Table(title="Keyword Clusters")
    table.add_column("Theme", style="cyan")
    table.add_column("Sub-theme", style="magenta")
    table.add_column("Weight", style="green", justify="right")
    table.add_column("Emphasis", style="yellow")
    table.add_column("Keywords", style="blue")

    for cluster in clusters:
        allocated = min(keyword_allocation(cluster.priority_weight), len(cluster.keywords))
        table.add_row(
            cluster.primary_theme,
            cluster.sub_theme,
            str(cluster.priority_weight),
            emphasis_for(cluster.priority_weight).value,
            f"{allocated}/{len(cluster.keywords)}",
        )

    console.print(table)


@clusters_app.command("themes")
def clusters_themes() -> None:
    """Show primary themes with aggregate weights."""
    clusters, _ = load_taxonomy(Config())
    groups = sorted(group_themes(clusters), key=lambda g: g.average_weight, reverse=True)

    if not groups:
        console.print("[yellow]No clusters configured.[/yellow]")
        return

    table = Table(title="Themes")
    table.add_column("Theme", style="cyan")
    table.add_column("Avg Weight", style="green", justify="right")
    table.add_column("Emphasis", style="yellow")
    table.add_column("Clusters", justify="right")
    table.add_column("Keywords", justify="right")
    table.add_column("Sub-themes", style="magenta")

    for group in groups:
        table.add_row(
            group.theme,
            f"{group.average_weight:.1f}",
            group.emphasis.value,
            str(len(group.clusters)),
            str(group.total_keywords),
            ", ".join(group.sub_themes),
        )

    console.print(table)


@clusters_app.command("add")
def clusters_add(
    theme: str = typer.Option(..., "--theme", "-t", help="Primary theme"),
    sub_theme: str = typer.Option(..., "--sub-theme", "-s", help="Sub-theme"),
    keywords: str = typer.Option("", "--keywords", "-k", help="Comma-separated keywords"),
    weight: int = typer.Option(50, "--weight", "-w", help="Priority weight (0-100)", min=0, max=100),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Notes"),
) -> None:
    """Add a new keyword cluster."""
    config = Config()
    clusters, _ = load_taxonomy(config)

    if _find(clusters, theme, sub_theme):
        console.print(f"[red]Cluster '{theme} / {sub_theme}' already exists.[/red]")
        raise typer.Exit(1)

    clusters.append(
        KeywordCluster(
            primary_theme=theme,
            sub_theme=sub_theme,
            keywords=split_csv(keywords),
            priority_weight=weight,
            description=description,
        )
    )
    save_clusters(clusters, config.clusters_path)

    console.print(f"[green]✅ Added cluster: {theme} / {sub_theme}[/green]")


@clusters_app.command("weight")
def clusters_weight(
    theme: str = typer.Argument(..., help="Primary theme"),
    sub_theme: str = typer.Argument(..., help="Sub-theme"),
    weight: int = typer.Argument(..., help="New priority weight (0-100)", min=0, max=100),
) -> None:
    """Set a cluster's priority weight."""
    config = Config()
    clusters, _ = load_taxonomy(config)

    cluster = _find(clusters, theme, sub_theme)
    if cluster is None:
        console.print(f"[red]Cluster '{theme} / {sub_theme}' not found.[/red]")
        raise typer.Exit(1)

    old_weight = cluster.priority_weight
    cluster.priority_weight = weight
    save_clusters(clusters, config.clusters_path)

    console.print(
        f"[green]✅ {theme} / {sub_theme}: {old_weight} → {weight} "
        f"({emphasis_for(weight).value})[/green]"
    )


@clusters_app.command("remove")
def clusters_remove(
    theme: str = typer.Argument(..., help="Primary theme"),
    sub_theme: str = typer.Argument(..., help="Sub-theme"),
) -> None:
    """Remove a keyword cluster."""
    config = Config()
    clusters, _ = load_taxonomy(config)

    remaining = [
        c for c in clusters
        if not (c.primary_theme == theme and c.sub_theme == sub_theme)
    ]
    if len(remaining) == len(clusters):
        console.print(f"[red]Cluster '{theme} / {sub_theme}' not found.[/red]")
        raise typer.Exit(1)

    save_clusters(remaining, config.clusters_path)
    console.print(f"[green]✅ Removed cluster: {theme} / {sub_theme}[/green]")


@clusters_app.command("sync")
def clusters_sync() -> None:
    """Push clusters from the taxonomy file to the database."""
    config = load_config_or_exit()
    clusters, _ = load_taxonomy(config)

    try:
        with get_connection(config.get_db_config()) as conn:
            synced = ClusterStore().sync_clusters(conn, clusters)
    except Exception as e:
        console.print(f"[red]❌ Cluster sync failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Synced {len(synced)} clusters[/green]")
