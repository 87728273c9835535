"""Trivia API category commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from jeopardy.config import settings
from jeopardy.exceptions import TriviaAPIError
from jeopardy.services.jservice import TriviaClient

console = Console()
app = typer.Typer(help="Browse trivia API categories")


@app.command("pool")
def pool(
    count: int = typer.Option(settings.category_pool_size, "--count", "-c", help="Categories to fetch"),
    min_clues: int = typer.Option(
        settings.clues_per_category, "--min-clues", "-m", help="Clues needed to be playable"
    ),
):
    """List a candidate pool and which categories could fill a column."""

    async def _pool():
        console.print(f"[dim]Fetching {count} categories from {settings.trivia_api_url}...[/dim]")

        async with TriviaClient() as client:
            try:
                candidates = await client.get_categories(count)
            except TriviaAPIError as e:
                console.print(f"[red]Error:[/red] {e}")
                raise typer.Exit(1) from e

        if not candidates:
            console.print("[yellow]No categories returned[/yellow]")
            return

        table = Table(title="Candidate categories")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="green")
        table.add_column("Clues", style="magenta", justify="right")
        table.add_column("Playable", justify="center")

        eligible = 0
        for candidate in candidates:
            playable = candidate.clues_count >= min_clues
            eligible += playable
            table.add_row(
                str(candidate.id),
                candidate.title or "-",
                str(candidate.clues_count),
                "[green]yes[/green]" if playable else "[dim]no[/dim]",
            )

        console.print(table)
        console.print(f"\n[dim]{eligible} of {len(candidates)} have at least {min_clues} clues[/dim]")

    asyncio.run(_pool())


@app.command("show")
def show(
    category_id: int = typer.Argument(..., help="Trivia API category ID"),
):
    """Show a category's title and clues."""

    async def _show():
        async with TriviaClient() as client:
            try:
                category = await client.get_category(category_id)
            except TriviaAPIError as e:
                console.print(f"[red]Error:[/red] {e}")
                raise typer.Exit(1) from e

        console.print(f"\n[bold]{category.title}[/bold] ({len(category.clues)} clues)")
        for index, clue in enumerate(category.clues, start=1):
            console.print(f"  {index}. {clue.question}")
            console.print(f"     [dim]{clue.answer}[/dim]")

    asyncio.run(_show())
