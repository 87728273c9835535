"""Render surface the game core draws through."""

from collections.abc import Sequence
from typing import Protocol

from jeopardy.config import settings
from jeopardy.models import Category


class BoardRenderer(Protocol):
    """What a presentation layer must provide to display a board."""

    def build_board(self, categories: Sequence[Category]) -> None:
        """Draw a fresh grid: one header per category, a placeholder in every cell."""
        ...

    def update_cell(self, category_index: int, clue_index: int, text: str) -> None:
        """Replace the displayed text of one cell."""
        ...


class BoardGrid:
    """In-memory renderer that records what each cell is displaying."""

    def __init__(self, placeholder: str | None = None):
        self.placeholder = placeholder if placeholder is not None else settings.cell_placeholder
        self.titles: list[str] = []
        # cells[category_index][clue_index]
        self.cells: list[list[str]] = []

    @property
    def is_built(self) -> bool:
        return bool(self.titles)

    def build_board(self, categories: Sequence[Category]) -> None:
        self.titles = [category.title for category in categories]
        self.cells = [[self.placeholder] * len(category.clues) for category in categories]

    def update_cell(self, category_index: int, clue_index: int, text: str) -> None:
        self.cells[category_index][clue_index] = text

    def rows(self) -> list[list[str]]:
        """Cells in display order: one list per clue row, left to right by category."""
        if not self.cells:
            return []
        return [list(row) for row in zip(*self.cells, strict=False)]
