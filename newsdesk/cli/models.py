"""Model catalog commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..catalog import (
    FUNCTION_CATEGORIES,
    ModelRecommendation,
    get_function_category,
    get_recommendations,
    model_label,
)

console = Console()
models_app = typer.Typer(help="Model catalog and recommendations")


def _recommendation_row(category: str, pick: ModelRecommendation) -> list:
    return [
        category,
        pick.recommendation.value,
        pick.model,
        model_label(pick.model),
        f"${pick.input_cost_per_1m:.2f} / ${pick.output_cost_per_1m:.2f}",
        pick.avg_latency,
        f"${pick.monthly_cost:.2f}",
    ]


def _recommendation_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Category", style="cyan")
    table.add_column("Pick", style="yellow")
    table.add_column("Model", style="magenta")
    table.add_column("Family")
    table.add_column("In / Out per 1M", style="blue", justify="right")
    table.add_column("Latency")
    table.add_column("Monthly", style="green", justify="right")
    return table


@models_app.command("list")
def models_list() -> None:
    """List function categories with effective and budget picks."""
    table = _recommendation_table("Model Recommendations")

    for category in FUNCTION_CATEGORIES:
        recommendations = get_recommendations(category.id)
        if recommendations is None:
            continue
        for pick in (recommendations.effective, recommendations.budget, recommendations.balanced):
            if pick is not None:
                table.add_row(*_recommendation_row(category.label, pick))

    console.print(table)


@models_app.command("recommend")
def models_recommend(
    category: str = typer.Argument(..., help="Category id or function name"),
) -> None:
    """Show recommendations for a category or a function name."""
    recommendations = get_recommendations(category)
    label = category

    if recommendations is None:
        matched = get_function_category(category)
        if matched is not None:
            recommendations = get_recommendations(matched.id)
            label = matched.label

    if recommendations is None:
        valid = ", ".join(c.id for c in FUNCTION_CATEGORIES)
        console.print(f"[red]Unknown category '{category}'. Valid: {valid}[/red]")
        raise typer.Exit(1)

    table = _recommendation_table(f"Recommendations: {label}")
    for pick in (recommendations.effective, recommendations.budget, recommendations.balanced):
        if pick is not None:
            table.add_row(*_recommendation_row(label, pick))
    console.print(table)

    effective = recommendations.effective
    console.print(f"\n[bold]Why {effective.model}:[/bold] {', '.join(effective.strengths)}")
