"""Health check endpoints."""

from fastapi import APIRouter

from jeopardy.api.deps import GameDep

router = APIRouter()


@router.get("")
async def health_check():
    """Basic health check - just confirms the service is running."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness_check(game: GameDep):
    """Readiness check - reports whether a board has been loaded."""
    return {"status": "ok", "board_loaded": game.is_ready, "loading": game.is_loading}
