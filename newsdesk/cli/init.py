"""Init command implementation."""

from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_clusters, save_config, save_sources
from ..config.loader import DEFAULT_CONFIG_DIR
from ..db import close_connection_pool, init_database, validate_connection
from ..models import KeywordCluster, Source

console = Console()


def create_default_clusters() -> List[KeywordCluster]:
    """Create a starter mortgage-industry taxonomy."""
    return [
        KeywordCluster(
            primary_theme="Rates",
            sub_theme="Mortgage Rates",
            keywords=["mortgage rates", "30-year fixed", "rate lock", "MBS spreads"],
            priority_weight=80,
        ),
        KeywordCluster(
            primary_theme="Policy",
            sub_theme="Federal Regulation",
            keywords=["CFPB", "HUD", "FHFA", "Fed"],
            priority_weight=60,
        ),
        KeywordCluster(
            primary_theme="Servicing",
            sub_theme="Default Servicing",
            keywords=["foreclosure", "loss mitigation", "forbearance", "delinquency"],
            priority_weight=70,
        ),
        KeywordCluster(
            primary_theme="Housing Market",
            sub_theme="Home Prices",
            keywords=["home prices", "inventory", "existing home sales"],
            priority_weight=50,
        ),
        KeywordCluster(
            primary_theme="Technology",
            sub_theme="Mortgage Tech",
            keywords=["digital mortgage", "AI underwriting", "eClosing"],
            priority_weight=40,
        ),
    ]


def create_default_sources() -> List[Source]:
    """Create starter news sources."""
    return [
        Source(
            source_name="Consumer Financial Protection Bureau",
            source_url="https://www.consumerfinance.gov/about-us/newsroom/",
            priority_tier=1,
            source_type="Government",
        ),
        Source(
            source_name="Federal Housing Finance Agency",
            source_url="https://www.fhfa.gov/news",
            priority_tier=1,
            source_type="Government",
        ),
        Source(
            source_name="Fannie Mae",
            source_url="https://www.fanniemae.com/newsroom",
            priority_tier=2,
            source_type="Industry",
        ),
        Source(
            source_name="Mortgage Bankers Association",
            source_url="https://www.mba.org/news-and-research",
            priority_tier=2,
            source_type="Trade Association",
        ),
        Source(
            source_name="HousingWire",
            source_url="https://www.housingwire.com",
            priority_tier=3,
            source_type="Competitor News",
        ),
    ]


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        envvar="NEWSDESK_CONFIG_DIR",
        help="Configuration directory",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("newsdesk", "--db-name", help="Database name"),
    db_user: str = typer.Option("newsdesk_user", "--db-user", help="Database user"),
    seed: bool = typer.Option(
        True,
        "--seed/--no-seed",
        help="Seed starter clusters and sources",
    ),
    init_db: bool = typer.Option(
        True,
        "--init-db/--no-init-db",
        help="Create the database schema",
    ),
) -> None:
    """Initialize News Desk configuration, taxonomy files and database."""
    console.print(Panel.fit("News Desk - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    clusters_path = config_dir / "clusters.yaml"
    sources_path = config_dir / "sources.yaml"

    config = ConfigModel(
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "NEWSDESK_DB_PASSWORD",
        },
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    clusters = create_default_clusters() if seed else []
    sources = create_default_sources() if seed else []
    save_clusters(clusters, clusters_path)
    save_sources(sources, sources_path)
    console.print(f"✅ Created clusters: {clusters_path} ({len(clusters)} clusters)")
    console.print(f"✅ Created sources: {sources_path} ({len(sources)} sources)")

    if init_db:
        console.print("\n[bold]Testing database connection...[/bold]")
        db_config = config.postgres.model_dump()

        if not validate_connection(db_config):
            console.print(
                "[red]❌ Database connection failed![/red]\n"
                "Please ensure Postgres is running and credentials are correct.\n"
                "Set the password via environment variable: "
                "[bold]export NEWSDESK_DB_PASSWORD=your_password[/bold]"
            )
            raise typer.Exit(1)

        console.print("\n[bold]Initializing database schema...[/bold]")
        try:
            init_database(db_config)
        except Exception as e:
            console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
            raise typer.Exit(1)
        finally:
            close_connection_pool()

    console.print(
        Panel(
            f"[green]✅ News Desk initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Clusters: {clusters_path}\n"
            f"Sources: {sources_path}\n\n"
            f"Next steps:\n"
            f"1. Edit clusters and weights: [bold]newsdesk clusters list[/bold]\n"
            f"2. Generate a prompt: [bold]newsdesk prompt generate[/bold]",
            style="green",
        )
    )
