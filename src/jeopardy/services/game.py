"""Game session and the clue reveal handler."""

import asyncio
import logging
import random

from jeopardy.exceptions import AcquisitionError
from jeopardy.models import Board
from jeopardy.services.acquisition import build_board
from jeopardy.services.jservice import TriviaClient
from jeopardy.services.render import BoardRenderer

logger = logging.getLogger(__name__)


class GameSession:
    """One player's game: the current board plus the surface it is drawn on.

    ``board`` is None until the first successful restart. A restart swaps in
    a complete new board or, on failure, leaves the current one untouched.
    Restarts are serialized; a restart requested while another is loading
    waits for it and then loads its own board.
    """

    def __init__(
        self,
        client: TriviaClient,
        renderer: BoardRenderer,
        *,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.renderer = renderer
        self.board: Board | None = None
        self._rng = rng
        self._restart_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self.board is not None

    @property
    def is_loading(self) -> bool:
        return self._restart_lock.locked()

    async def restart(self) -> Board:
        """Load a fresh board and draw it.

        Raises:
            AcquisitionError: If the board could not be loaded; the previous board is kept
        """
        async with self._restart_lock:
            try:
                board = await build_board(self.client, rng=self._rng)
            except AcquisitionError as e:
                if self.board is not None:
                    logger.warning(f"Board setup failed, keeping previous board: {e}")
                else:
                    logger.error(f"Board setup failed: {e}")
                raise

            self.board = board
            self.renderer.build_board(board.categories)
            return board

    def reveal(self, category_index: int, clue_index: int) -> str | None:
        """Handle a selection of one cell. See ``reveal_clue``."""
        return reveal_clue(self, category_index, clue_index)


def reveal_clue(session: GameSession, category_index: int, clue_index: int) -> str | None:
    """Advance one clue's reveal state and redraw that cell.

    Selecting a cell shows its question, selecting it again shows the answer,
    and any later selection is ignored. Selections before a board is loaded
    or outside the board are no-ops.

    Returns:
        The newly displayed text, or None if nothing changed
    """
    if session.board is None:
        logger.debug("Ignoring selection, no board loaded")
        return None

    clue = session.board.get_clue(category_index, clue_index)
    if clue is None:
        logger.debug(f"Ignoring selection of missing cell ({category_index}, {clue_index})")
        return None

    text = clue.reveal()
    if text is not None:
        session.renderer.update_cell(category_index, clue_index, text)
    return text
