"""
Typer CLI for the dsa-survey service.

Commands:
    dsa-survey serve                       - Run the API server
    dsa-survey categories                  - List categories and question counts
    dsa-survey answers ACTOR CATEGORY      - Show answers recorded for an actor
    dsa-survey generate ACTOR CATEGORY     - Print or save a generate payload

Usage:
    dsa-survey --help
    dsa-survey serve --port 3000 --reload
    dsa-survey generate 4f1c... best-documentation --output payload.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from config import get_settings
from dsa_survey.core.errors import SurveyError
from dsa_survey.core.log_config import configure_logging

app = typer.Typer(
    help="dsa-survey CLI: award questions, answers and generate payloads",
    no_args_is_help=True,
)

console = Console()


class CLIContext:
    """
    Dependency container for CLI commands.

    The survey service is built on first use so `serve` never opens the store.
    """

    def __init__(self):
        self.settings = get_settings()
        self._service = None

    @property
    def service(self):
        """Lazy load SurveyService."""
        if self._service is None:
            from dsa_survey.api.main import build_service

            try:
                self._service = build_service(self.settings, mirror_questions=False)
            except SurveyError as e:
                logger.error(str(e))
                raise typer.Exit(code=1)
        return self._service


def _build_context() -> CLIContext:
    return CLIContext()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (defaults to settings)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to settings)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dsa_survey.api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("categories")
def list_categories():
    """List categories with question counts and whether general answers apply."""
    ctx = _build_context()
    service = ctx.service

    table = Table(title="Award Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Questions", justify="right")
    table.add_column("Needs general", justify="center")

    for category in service.bank.list_categories():
        table.add_row(
            category,
            str(len(service.bank.get_questions(category))),
            "[green]yes[/green]" if service.needs_general(category) else "[dim]no[/dim]",
        )

    console.print(table)


@app.command("answers")
def show_answers(
    actor_id: str = typer.Argument(..., help="User or session identifier"),
    category: str = typer.Argument(..., help="Category name"),
):
    """Show general and category answers recorded for an actor."""
    ctx = _build_context()
    try:
        view = ctx.service.get_answers(actor_id, category)
    except SurveyError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"{actor_id} / {category}")
    table.add_column("Scope", style="dim")
    table.add_column("Question")
    table.add_column("Answer", style="green")

    for question, answer in view.general.items():
        table.add_row("general", question, answer)
    for question, answer in view.answers.items():
        table.add_row(category, question, answer)

    console.print(table)


@app.command("generate")
def generate_payload(
    actor_id: str = typer.Argument(..., help="User or session identifier"),
    category: str = typer.Argument(..., help="Category name"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file"),
):
    """Print the generate payload, or write it to a file."""
    ctx = _build_context()
    try:
        payload = ctx.service.generate(actor_id, category)
    except SurveyError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    text = json.dumps(payload.to_dict(), indent=2, ensure_ascii=False)
    if output:
        output.write_text(text, encoding="utf-8")
        rprint(f"[green]Wrote payload to {output}[/green]")
    else:
        console.print_json(text)


def main() -> None:
    """CLI entry point."""
    configure_logging(get_settings(), level="WARNING")
    app()


if __name__ == "__main__":
    main()
