"""Game models."""

from jeopardy.models.board import Board, BoardShapeError, Category
from jeopardy.models.clue import Clue, ShowingState

__all__ = [
    "Board",
    "BoardShapeError",
    "Category",
    "Clue",
    "ShowingState",
]
