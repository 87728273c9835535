"""Game board endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from jeopardy.api.deps import GameDep, GridDep
from jeopardy.exceptions import AcquisitionError
from jeopardy.models import ShowingState
from jeopardy.schemas import ErrorResponse
from jeopardy.services.render import BoardGrid

logger = logging.getLogger(__name__)

router = APIRouter()


class ColumnResponse(BaseModel):
    """One category column as the player sees it."""

    title: str
    cells: list[str]


class BoardResponse(BaseModel):
    """The displayed board."""

    ready: bool
    loading: bool = False
    categories: list[ColumnResponse]


class RevealResponse(BaseModel):
    """Result of selecting a cell."""

    category_index: int
    clue_index: int
    changed: bool
    showing: ShowingState | None = None
    text: str | None = None


def _board_response(grid: BoardGrid, ready: bool, loading: bool = False) -> BoardResponse:
    return BoardResponse(
        ready=ready,
        loading=loading,
        categories=[
            ColumnResponse(title=title, cells=list(cells))
            for title, cells in zip(grid.titles, grid.cells, strict=True)
        ],
    )


@router.get("", response_model=BoardResponse)
async def get_board(game: GameDep, grid: GridDep):
    """Get the current board with each cell's displayed text."""
    return _board_response(grid, ready=game.is_ready, loading=game.is_loading)


@router.post(
    "/restart",
    response_model=BoardResponse,
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}},
)
async def restart_game(game: GameDep, grid: GridDep):
    """Load a new board from the trivia API.

    On failure the previous board (if any) stays in play.
    """
    try:
        await game.restart()
    except AcquisitionError as e:
        logger.error(f"Restart failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not load a new board from the trivia API",
        ) from e

    return _board_response(grid, ready=True)


@router.post("/clues/{category_index}/{clue_index}", response_model=RevealResponse)
async def select_clue(category_index: int, clue_index: int, game: GameDep):
    """Select a cell: first shows the question, then the answer.

    Selecting an answered cell, a cell off the board, or any cell before a
    board is loaded changes nothing.
    """
    text = game.reveal(category_index, clue_index)

    showing = None
    if game.board is not None:
        clue = game.board.get_clue(category_index, clue_index)
        if clue is not None:
            showing = clue.showing

    return RevealResponse(
        category_index=category_index,
        clue_index=clue_index,
        changed=text is not None,
        showing=showing,
        text=text,
    )
