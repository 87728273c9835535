"""Application startup tests."""

import logging
from unittest.mock import patch

import pytest

from jeopardy.config import settings
from jeopardy.main import app, lifespan
from jeopardy.services.jservice import TriviaClient


@pytest.fixture
def patched_client(fake_api):
    """Make the lifespan build its TriviaClient on the fake API."""

    def _factory() -> TriviaClient:
        return TriviaClient(base_url="http://jservice.test/api", transport=fake_api.transport)

    with patch("jeopardy.main.TriviaClient", _factory):
        yield

    for name in ("game", "grid", "trivia_client", "initial_load"):
        if hasattr(app.state, name):
            delattr(app.state, name)


@pytest.mark.asyncio
async def test_startup_loads_first_board(patched_client, fake_api):
    """Test that a board is loaded without waiting for a restart request."""
    async with lifespan(app):
        await app.state.initial_load

        assert app.state.game.is_ready is True
        assert len(app.state.grid.titles) == 6
        assert all(column == ["?"] * 5 for column in app.state.grid.cells)


@pytest.mark.asyncio
async def test_startup_load_failure_is_not_fatal(patched_client, fake_api, caplog):
    """Test that a failed first load is logged and the app keeps running."""
    fake_api.status_code = 500

    with caplog.at_level(logging.WARNING):
        async with lifespan(app):
            await app.state.initial_load

            assert app.state.initial_load.exception() is None
            assert app.state.game.is_ready is False

    assert "Initial board load failed" in caplog.text


@pytest.mark.asyncio
async def test_startup_load_can_be_disabled(patched_client, fake_api, monkeypatch):
    """Test that no board is requested when startup loading is off."""
    monkeypatch.setattr(settings, "load_board_on_startup", False)

    async with lifespan(app):
        assert app.state.initial_load is None
        assert app.state.game.is_ready is False

    assert fake_api.requests == []
