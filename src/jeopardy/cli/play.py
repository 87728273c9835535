"""Play a game in the terminal."""

import asyncio
import random
from collections.abc import Sequence
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from jeopardy.exceptions import AcquisitionError
from jeopardy.models import Category
from jeopardy.services.game import GameSession
from jeopardy.services.jservice import TriviaClient
from jeopardy.services.render import BoardGrid

console = Console()

HELP_TEXT = (
    "Enter [bold]<column> <row>[/bold] to reveal a clue (e.g. [cyan]3 2[/cyan]), "
    "[bold]r[/bold] to restart, [bold]q[/bold] to quit."
)


class ConsoleRenderer:
    """Draws the board as a rich table, redrawing it after every change."""

    def __init__(self, output: Console):
        self.console = output
        self.grid = BoardGrid()

    def build_board(self, categories: Sequence[Category]) -> None:
        self.grid.build_board(categories)
        self.show()

    def update_cell(self, category_index: int, clue_index: int, text: str) -> None:
        self.grid.update_cell(category_index, clue_index, text)
        self.show()

    def show(self) -> None:
        if not self.grid.is_built:
            return

        table = Table(title="Jeopardy!", show_lines=True)
        table.add_column("#", style="dim", justify="right")
        for index, title in enumerate(self.grid.titles, start=1):
            table.add_column(f"{index}. {title}", style="cyan", justify="center")

        for row_number, row in enumerate(self.grid.rows(), start=1):
            table.add_row(str(row_number), *row)

        self.console.print(table)


def parse_move(raw: str) -> tuple[int, int] | None:
    """Parse "<column> <row>" (1-based) into zero-based (category, clue) indices."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        column, row = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return column - 1, row - 1


async def run_game(session: GameSession, renderer: ConsoleRenderer) -> int:
    """Interactive loop. Returns the process exit code."""
    console.print("[dim]Loading a new board...[/dim]")
    try:
        await session.restart()
    except AcquisitionError as e:
        console.print(f"[red]Error:[/red] Could not load a board: {e}")
        return 1

    console.print(HELP_TEXT)

    while True:
        try:
            raw = (await asyncio.to_thread(console.input, "[bold green]Move:[/bold green] ")).strip().lower()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return 0

        if not raw:
            continue

        if raw in ("q", "quit", "exit"):
            console.print("[dim]Goodbye![/dim]")
            return 0

        if raw in ("r", "restart"):
            console.print("[dim]Loading a new board...[/dim]")
            try:
                await session.restart()
            except AcquisitionError as e:
                console.print(f"[yellow]Could not load a new board, keeping this one:[/yellow] {e}")
                renderer.show()
            continue

        move = parse_move(raw)
        if move is None:
            console.print(HELP_TEXT)
            continue

        if session.reveal(*move) is None:
            console.print("[dim]Nothing more to reveal there[/dim]")


def play(
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Random seed for a repeatable board")] = None,
):
    """Play a game in the terminal."""
    rng = random.Random(seed) if seed is not None else None

    async def _play() -> int:
        async with TriviaClient() as client:
            renderer = ConsoleRenderer(console)
            session = GameSession(client, renderer, rng=rng)
            return await run_game(session, renderer)

    exit_code = asyncio.run(_play())
    if exit_code:
        raise typer.Exit(exit_code)
