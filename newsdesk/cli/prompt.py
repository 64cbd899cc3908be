"""Prompt generation, inspection and testing commands."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..catalog import model_label
from ..config import Config
from ..db import PromptStore, get_connection
from ..generation import (
    LLMProvider,
    MockLLMProvider,
    NewsSearchPromptTemplate,
    OpenAIProvider,
    Recency,
    SearchSettings,
    SelectedThemes,
    run_prompt_test,
    split_prompt,
)
from ..models import LlmPrompt
from ..weighting import AllocationCalculator
from .common import load_config_or_exit, load_taxonomy

console = Console()
prompt_app = typer.Typer(help="Generate and test search prompts")


def get_llm_provider(config: Config) -> LLMProvider:
    """Get configured LLM provider."""
    llm_config = config.get_llm_config()

    if llm_config.get("provider") in ("openai", "perplexity"):
        api_key = llm_config.get("api_key")
        if not api_key:
            console.print("[yellow]Warning: No API key found. Using mock LLM provider.[/yellow]")
            return MockLLMProvider()

        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model", "gpt-4o-mini"),
            base_url=llm_config.get("base_url"),
        )

    if llm_config.get("provider") != "mock":
        console.print("[yellow]Warning: Unknown LLM provider. Using mock provider.[/yellow]")
    return MockLLMProvider()


def _read_prompt_file(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Prompt file not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


@prompt_app.command("generate")
def prompt_generate(
    themes: Optional[List[str]] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Primary theme to include (repeatable). Default: top-weighted themes",
    ),
    recency: Optional[Recency] = typer.Option(
        None,
        "--recency",
        "-r",
        help="Recency filter. Default: from config",
    ),
    domain: Optional[str] = typer.Option(None, "--domain", help="Domain filter"),
    temperature: Optional[float] = typer.Option(None, "--temperature", help="Sampling temperature"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", help="Response token budget"),
    metadata: bool = typer.Option(
        True,
        "--metadata/--no-metadata",
        help="Prefix the prompt with a search_settings metadata block",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write prompt to file"),
) -> None:
    """Render a weighted news-search prompt from the configured taxonomy."""
    config = load_config_or_exit()
    clusters, sources = load_taxonomy(config)

    updates = {}
    if recency is not None:
        updates["recency_filter"] = recency.value
    if domain is not None:
        updates["domain_filter"] = domain
    if temperature is not None:
        updates["temperature"] = temperature
    if max_tokens is not None:
        updates["max_tokens"] = max_tokens
    if themes:
        updates["selected_themes"] = SelectedThemes(primary=list(themes))

    settings = SearchSettings(**{**config.config.search_defaults.model_dump(), **updates})

    template_config = config.config.template
    template = NewsSearchPromptTemplate(
        publication=template_config.publication,
        beat=template_config.beat,
        calculator=AllocationCalculator(top_theme_limit=template_config.top_theme_limit),
    )
    document = template.render_document(
        clusters,
        sources,
        settings=settings,
        selected_themes=settings.selected_themes.primary,
        include_metadata=metadata,
    )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        console.print(f"[green]✅ Wrote prompt: {output}[/green]")
    else:
        # Plain stdout so the prompt can be piped
        typer.echo(document)


@prompt_app.command("show")
def prompt_show(
    path: Path = typer.Argument(..., help="Prompt file"),
) -> None:
    """Show a prompt's search settings and body."""
    metadata, body = split_prompt(_read_prompt_file(path))

    settings = (metadata or {}).get("search_settings")
    if isinstance(settings, dict):
        console.print(Panel(json.dumps(settings, indent=2), title="Search Settings", style="cyan"))
    else:
        console.print("[yellow]No search settings metadata.[/yellow]")

    typer.echo(body)


@prompt_app.command("test")
def prompt_test(
    path: Path = typer.Argument(..., help="Prompt file"),
) -> None:
    """Send a prompt to the configured search model."""
    config = load_config_or_exit()
    provider = get_llm_provider(config)

    console.print(f"[dim]Running prompt with {model_label(provider.model)} ({provider.model})...[/dim]")
    result = run_prompt_test(provider, _read_prompt_file(path))

    if result.error:
        console.print(f"[red]❌ {result.error}[/red]")
        raise typer.Exit(1)

    if not result.articles:
        console.print("[yellow]No articles parsed from response:[/yellow]")
        typer.echo(result.raw_output)
        return

    table = Table(title=f"Articles ({result.duration_ms} ms)")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Focus", style="magenta")
    table.add_column("Title", style="cyan")
    table.add_column("Source", style="blue")

    for article in sorted(result.articles, key=lambda a: a.relevance_score, reverse=True):
        table.add_row(
            str(article.relevance_score),
            article.focus_area or "",
            article.title,
            article.source or "",
        )

    console.print(table)


@prompt_app.command("save")
def prompt_save(
    path: Path = typer.Argument(..., help="Prompt file"),
    function_name: str = typer.Option("news_search_daily", "--function", "-f", help="Function name"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model. Default: from config"),
    prompt_id: Optional[str] = typer.Option(None, "--id", help="Update an existing prompt"),
) -> None:
    """Store a prompt file in the database."""
    config = load_config_or_exit()
    prompt = LlmPrompt(
        id=prompt_id,
        function_name=function_name,
        model=model or config.config.llm.model,
        prompt_text=_read_prompt_file(path),
        include_clusters=True,
        is_active=True,
    )

    try:
        with get_connection(config.get_db_config()) as conn:
            saved_id = PromptStore().save_prompt(conn, prompt)
    except Exception as e:
        console.print(f"[red]❌ Failed to save prompt: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Saved prompt {function_name} ({saved_id})[/green]")


@prompt_app.command("list")
def prompt_list(
    news_only: bool = typer.Option(False, "--news-only", help="Only news search prompts"),
) -> None:
    """List stored prompts."""
    config = load_config_or_exit()

    try:
        with get_connection(config.get_db_config()) as conn:
            prompts = PromptStore().list_prompts(conn, news_search_only=news_only)
    except Exception as e:
        console.print(f"[red]❌ Failed to load prompts: {e}[/red]")
        raise typer.Exit(1)

    if not prompts:
        console.print("[yellow]No prompts stored.[/yellow]")
        return

    table = Table(title="Prompts")
    table.add_column("Function", style="cyan")
    table.add_column("Model", style="magenta")
    table.add_column("Recency", style="green")
    table.add_column("Active", style="yellow")
    table.add_column("ID", style="dim")

    for prompt in prompts:
        metadata, _ = split_prompt(prompt.prompt_text)
        settings = (metadata or {}).get("search_settings") or {}
        table.add_row(
            prompt.function_name,
            model_label(prompt.model),
            str(settings.get("recency_filter", "-")),
            "✓" if prompt.is_active else "✗",
            prompt.id or "",
        )

    console.print(table)
