"""Main API router that aggregates all route modules."""

from fastapi import APIRouter

from jeopardy.api import game, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(game.router, prefix="/game", tags=["game"])
