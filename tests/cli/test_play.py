"""Terminal play command tests."""

import inspect
import io
import random
import threading

import pytest
from rich.console import Console

from jeopardy.cli import play as play_module
from jeopardy.cli.play import ConsoleRenderer, parse_move, run_game
from jeopardy.models import ShowingState
from jeopardy.services.game import GameSession


@pytest.fixture
def output(monkeypatch) -> io.StringIO:
    buffer = io.StringIO()
    monkeypatch.setattr(play_module, "console", Console(file=buffer, width=400, color_system=None))
    return buffer


def feed_input(monkeypatch, lines: list[str]) -> None:
    remaining = iter(lines)

    def _input(*_args):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", _input)


def test_play_submodule_not_shadowed_by_command():
    from jeopardy.cli import app

    assert inspect.ismodule(play_module)
    assert play_module.run_game is run_game
    assert "play" in [command.name for command in app.registered_commands]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1 1", (0, 0)),
        ("6 5", (5, 4)),
        ("3,2", (2, 1)),
        ("  2   4 ", (1, 3)),
        ("0 1", (-1, 0)),
        ("1", None),
        ("1 2 3", None),
        ("a b", None),
        ("", None),
    ],
)
def test_parse_move(raw, expected):
    assert parse_move(raw) == expected


@pytest.mark.asyncio
async def test_play_reveals_and_quits(monkeypatch, output, trivia_client):
    renderer = ConsoleRenderer(play_module.console)
    session = GameSession(trivia_client, renderer, rng=random.Random(5))
    feed_input(monkeypatch, ["1 1", "1 1", "1 1", "huh", "q"])

    exit_code = await run_game(session, renderer)

    assert exit_code == 0
    clue = session.board.get_clue(0, 0)
    assert clue.showing == ShowingState.ANSWER
    assert renderer.grid.cells[0][0] == clue.answer

    text = output.getvalue()
    assert clue.question in text
    assert clue.answer in text
    assert "Nothing more to reveal there" in text
    assert "Goodbye!" in text


@pytest.mark.asyncio
async def test_play_restart_replaces_board(monkeypatch, output, trivia_client):
    renderer = ConsoleRenderer(play_module.console)
    session = GameSession(trivia_client, renderer)
    feed_input(monkeypatch, ["2 3", "r"])

    exit_code = await run_game(session, renderer)

    assert exit_code == 0
    assert all(column == ["?"] * 5 for column in renderer.grid.cells)


@pytest.mark.asyncio
async def test_play_restart_failure_keeps_board(monkeypatch, output, trivia_client, fake_api):
    renderer = ConsoleRenderer(play_module.console)
    session = GameSession(trivia_client, renderer)
    board_before: list = []

    def _input(*_args):
        if not board_before:
            board_before.append(session.board)
            fake_api.status_code = 500
            return "r"
        raise EOFError

    monkeypatch.setattr("builtins.input", _input)

    exit_code = await run_game(session, renderer)

    assert exit_code == 0
    assert session.board is board_before[0]
    assert "keeping this one" in output.getvalue()


@pytest.mark.asyncio
async def test_play_initial_load_failure(monkeypatch, output, trivia_client, fake_api):
    renderer = ConsoleRenderer(play_module.console)
    session = GameSession(trivia_client, renderer)
    fake_api.status_code = 503

    exit_code = await run_game(session, renderer)

    assert exit_code == 1
    assert "Could not load a board" in output.getvalue()


@pytest.mark.asyncio
async def test_moves_are_read_off_the_event_loop(monkeypatch, output, trivia_client):
    renderer = ConsoleRenderer(play_module.console)
    session = GameSession(trivia_client, renderer)
    input_threads: list[threading.Thread] = []

    def _input(*_args):
        input_threads.append(threading.current_thread())
        raise EOFError

    monkeypatch.setattr("builtins.input", _input)

    exit_code = await run_game(session, renderer)

    assert exit_code == 0
    assert len(input_threads) == 1
    assert input_threads[0] is not threading.main_thread()
