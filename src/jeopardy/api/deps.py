"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from jeopardy.services.game import GameSession
from jeopardy.services.render import BoardGrid


def get_game_session(request: Request) -> GameSession:
    """Get the process-wide game session set up at startup."""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Game session not initialized",
        )
    return game


def get_board_grid(request: Request) -> BoardGrid:
    """Get the grid the game session renders into."""
    grid = getattr(request.app.state, "grid", None)
    if grid is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Game session not initialized",
        )
    return grid


GameDep = Annotated[GameSession, Depends(get_game_session)]
GridDep = Annotated[BoardGrid, Depends(get_board_grid)]
