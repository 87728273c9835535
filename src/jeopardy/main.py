"""FastAPI application entrypoint."""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jeopardy import __version__
from jeopardy.api.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from jeopardy.api.router import api_router
from jeopardy.config import settings
from jeopardy.exceptions import AcquisitionError
from jeopardy.services.game import GameSession
from jeopardy.services.jservice import TriviaClient
from jeopardy.services.render import BoardGrid

logger = logging.getLogger(__name__)


def attach_game(app: FastAPI, client: TriviaClient) -> GameSession:
    """Create the process-wide game session and the grid it renders into."""
    grid = BoardGrid()
    game = GameSession(client, grid)
    app.state.trivia_client = client
    app.state.grid = grid
    app.state.game = game
    return game


async def load_initial_board(game: GameSession) -> None:
    """Load the first board. Failures are logged; players can still restart."""
    try:
        await game.restart()
    except AcquisitionError as e:
        logger.warning(f"Initial board load failed, waiting for a restart: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    client = TriviaClient()
    game = attach_game(app, client)
    logger.info(f"Using trivia API at {client.base_url}")

    # Loaded in the background; startup does not wait on the trivia API
    initial_load = None
    if settings.load_board_on_startup:
        initial_load = asyncio.create_task(load_initial_board(game))
    app.state.initial_load = initial_load

    yield

    if initial_load is not None and not initial_load.done():
        initial_load.cancel()
        with suppress(asyncio.CancelledError):
            await initial_load
    await client.close()


app = FastAPI(
    title="Jeopardy API",
    description="Trivia board game backed by the jService API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs" if settings.debug_enabled else None,
    redoc_url="/api/redoc" if settings.debug_enabled else None,
    openapi_url="/api/openapi.json" if settings.debug_enabled else None,
)

app.add_middleware(RequestIDMiddleware)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)

app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    from jeopardy.logging import get_log_config

    uvicorn.run(
        "jeopardy.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_config=get_log_config(),
    )
