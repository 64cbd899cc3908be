"""Usage analytics commands."""

import typer
from rich.console import Console

from ..analytics import analytics_window_start, calculate_analytics, print_usage_summary
from ..analytics.usage import DEFAULT_WINDOW_HOURS
from ..db import UsageLogStore, get_connection
from .common import load_config_or_exit

console = Console()
usage_app = typer.Typer(help="LLM usage analytics")


@usage_app.command("report")
def usage_report(
    hours: int = typer.Option(DEFAULT_WINDOW_HOURS, "--hours", "-h", help="Window in hours", min=1),
) -> None:
    """Summarize LLM usage logs for a recent window."""
    config = load_config_or_exit()

    try:
        with get_connection(config.get_db_config()) as conn:
            logs = UsageLogStore().get_logs_since(conn, analytics_window_start(hours))
    except Exception as e:
        console.print(f"[red]❌ Failed to load usage logs: {e}[/red]")
        raise typer.Exit(1)

    if not logs:
        console.print(f"[yellow]No LLM usage in the last {hours} hours.[/yellow]")
        return

    print_usage_summary(calculate_analytics(logs), hours)
