"""Aggregate LLM usage logs into analytics."""

from datetime import datetime
from typing import Callable, Dict, Iterable, List, Union

import pendulum
from rich.console import Console
from rich.table import Table

from ..catalog import model_label
from ..models import LlmUsageLog
from .models import UsageAnalytics, UsageBreakdown

console = Console()

DEFAULT_WINDOW_HOURS = 168


def analytics_window_start(hours: int = DEFAULT_WINDOW_HOURS) -> pendulum.DateTime:
    """Earliest log timestamp included in a window ending now."""
    return pendulum.now("UTC").subtract(hours=hours)


def _usage_day(created_at: Union[datetime, str, None]) -> str:
    """UTC calendar day of a log timestamp."""
    if created_at is None:
        return "unknown"
    if isinstance(created_at, str):
        moment = pendulum.parse(created_at)
    elif created_at.tzinfo is None:
        moment = pendulum.instance(created_at, tz="UTC")
    else:
        moment = pendulum.instance(created_at)
    return moment.in_timezone("UTC").to_date_string()


def _breakdown(
    logs: List[LlmUsageLog],
    key: Callable[[LlmUsageLog], str],
) -> List[UsageBreakdown]:
    stats: Dict[str, UsageBreakdown] = {}
    for log in logs:
        name = key(log)
        row = stats.setdefault(name, UsageBreakdown(key=name))
        row.tokens += log.total_tokens
        row.cost += log.estimated_cost
        row.operations += 1
    return list(stats.values())


def calculate_analytics(logs: Iterable[LlmUsageLog]) -> UsageAnalytics:
    """Totals, success rate and breakdowns for a set of usage logs."""
    logs = list(logs)
    operation_count = len(logs)
    successful = sum(1 for log in logs if log.status == "success")

    durations = [log.duration_ms for log in logs if log.duration_ms]
    average_duration = sum(durations) / len(durations) if durations else 0.0

    daily = _breakdown(logs, lambda log: _usage_day(log.created_at))
    daily.sort(key=lambda row: row.key)

    return UsageAnalytics(
        total_tokens=sum(log.total_tokens for log in logs),
        total_cost=sum(log.estimated_cost for log in logs),
        operation_count=operation_count,
        average_duration=average_duration,
        success_rate=(successful / operation_count * 100) if operation_count else 0.0,
        function_breakdown=_breakdown(logs, lambda log: log.function_name),
        model_breakdown=_breakdown(logs, lambda log: log.model),
        daily_usage=daily,
    )


def print_usage_summary(analytics: UsageAnalytics, hours: int = DEFAULT_WINDOW_HOURS) -> None:
    """Print usage summary."""
    console.print(f"\n[bold]LLM Usage (last {hours} hours):[/bold]")
    console.print(f"  Operations: {analytics.operation_count}")
    console.print(f"  Tokens: {analytics.total_tokens:,}")
    console.print(f"  Cost: ${analytics.total_cost:.4f} (${analytics.cost_per_operation:.3f}/op)")
    console.print(f"  Success rate: {analytics.success_rate:.1f}%")
    console.print(f"  Avg duration: {analytics.average_duration:.0f} ms")

    if analytics.model_breakdown:
        table = Table(title="By Model")
        table.add_column("Model", style="cyan")
        table.add_column("Family", style="magenta")
        table.add_column("Calls", style="yellow", justify="right")
        table.add_column("Tokens", style="green", justify="right")
        table.add_column("Cost", style="blue", justify="right")
        for row in sorted(analytics.model_breakdown, key=lambda r: r.cost, reverse=True):
            table.add_row(
                row.key,
                model_label(row.key),
                str(row.operations),
                f"{row.tokens:,}",
                f"${row.cost:.4f}",
            )
        console.print(table)

    if analytics.function_breakdown:
        table = Table(title="By Function")
        table.add_column("Function", style="cyan")
        table.add_column("Calls", style="yellow", justify="right")
        table.add_column("Tokens", style="green", justify="right")
        table.add_column("Cost", style="blue", justify="right")
        for row in sorted(analytics.function_breakdown, key=lambda r: r.cost, reverse=True):
            table.add_row(row.key, str(row.operations), f"{row.tokens:,}", f"${row.cost:.4f}")
        console.print(table)
