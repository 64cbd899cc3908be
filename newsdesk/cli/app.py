"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .clusters import clusters_app
from .init import init_command
from .models import models_app
from .prompt import prompt_app
from .sources import sources_app
from .usage import usage_app

app = typer.Typer(
    name="newsdesk",
    help="News Desk - Weighted news-search prompt generator",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.add_typer(clusters_app, name="clusters", help="Manage keyword clusters")
app.add_typer(sources_app, name="sources", help="Manage news sources")
app.add_typer(prompt_app, name="prompt", help="Generate and test search prompts")
app.add_typer(models_app, name="models", help="Model catalog and recommendations")
app.add_typer(usage_app, name="usage", help="LLM usage analytics")


if __name__ == "__main__":
    app()
