"""Sources management commands."""

from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, save_sources
from ..db import SourceStore, get_connection
from ..models import Source
from ..weighting import SourceClassifier, site_host
from .common import load_config_or_exit, load_taxonomy

console = Console()
sources_app = typer.Typer(help="Manage news sources")


@sources_app.command("list")
def sources_list() -> None:
    """List all configured sources."""
    _, sources = load_taxonomy(Config())

    if not sources:
        console.print("[yellow]No sources configured.[/yellow]")
        return

    partition = SourceClassifier().classify(sources)
    priority_names = {s.source_name for s in partition.priority}

    table = Table(title="Configured Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Tier", style="green", justify="right")
    table.add_column("Type", style="magenta")
    table.add_column("Role", style="yellow")
    table.add_column("Site", style="blue")

    for source in sorted(sources, key=lambda s: s.priority_tier):
        if source.is_competitor:
            role = "exclude"
        elif source.source_name in priority_names:
            role = "priority"
        else:
            role = "-"
        table.add_row(
            source.source_name,
            str(source.priority_tier),
            source.source_type or "",
            role,
            site_host(source.source_url),
        )

    console.print(table)


@sources_app.command("add")
def sources_add(
    name: str = typer.Option(..., "--name", "-n", help="Source name"),
    url: str = typer.Option(..., "--url", "-u", help="Source URL"),
    tier: int = typer.Option(2, "--tier", "-t", help="Priority tier (1 = highest)", min=1, max=4),
    source_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Source type (e.g. Government, Industry, Competitor News)",
    ),
) -> None:
    """Add a new news source."""
    config = Config()
    _, sources = load_taxonomy(config)

    if any(s.source_name == name or s.source_url == url for s in sources):
        console.print(f"[red]Source '{name}' or URL already exists.[/red]")
        raise typer.Exit(1)

    sources.append(
        Source(
            source_name=name,
            source_url=url,
            priority_tier=tier,
            source_type=source_type,
        )
    )
    save_sources(sources, config.sources_path)

    console.print(f"[green]✅ Added source: {name}[/green]")


@sources_app.command("remove")
def sources_remove(
    name: str = typer.Argument(..., help="Source name to remove"),
) -> None:
    """Remove a source."""
    config = Config()
    _, sources = load_taxonomy(config)

    original_count = len(sources)
    sources = [s for s in sources if s.source_name != name]

    if len(sources) == original_count:
        console.print(f"[red]Source '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_sources(sources, config.sources_path)
    console.print(f"[green]✅ Removed source: {name}[/green]")


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all)"),
) -> None:
    """Test source URL reachability."""
    _, sources = load_taxonomy(Config())

    if name:
        sources = [s for s in sources if s.source_name == name]
        if not sources:
            console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)

    with httpx.Client(timeout=10.0, follow_redirects=True) as client:
        for source in sources:
            try:
                response = client.get(source.source_url)
                response.raise_for_status()
                console.print(f"[green]✅ {source.source_name}: OK ({response.status_code})[/green]")
            except httpx.HTTPError as e:
                console.print(f"[red]❌ {source.source_name}: Failed - {e}[/red]")


@sources_app.command("sync")
def sources_sync() -> None:
    """Push sources from the taxonomy file to the database."""
    config = load_config_or_exit()
    _, sources = load_taxonomy(config)

    try:
        with get_connection(config.get_db_config()) as conn:
            synced = SourceStore().sync_sources(conn, sources)
    except Exception as e:
        console.print(f"[red]❌ Source sync failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Synced {len(synced)} sources[/green]")
