"""Game service owning the current board and its restart protocol."""

from __future__ import annotations

import logging
import random

from .config import BoardConfig
from .loader import CategorySource, build_board
from .models import Board
from .reveal import on_interact

logger = logging.getLogger(__name__)


class GameService:
    """Holds the one live board and replaces it on restart.

    Restarts follow a latest-request-wins rule: every build gets a generation
    number and only the newest generation may install its board. A build that
    was overtaken by a later restart still returns its board to its own caller,
    but the live board is not touched. A failed build leaves the live board as
    it was.
    """

    def __init__(
        self,
        client: CategorySource,
        config: BoardConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client
        self.config = config or BoardConfig()
        self._rng = rng
        self._board: Board | None = None
        self._generation = 0
        self._in_flight = 0

    @property
    def board(self) -> Board | None:
        """Current board, or None before the first successful build."""
        return self._board

    @property
    def building(self) -> bool:
        """True while a build is running; a UI can disable restart meanwhile."""
        return self._in_flight > 0

    async def restart(self) -> Board:
        """Build a new board and install it unless a newer restart began."""
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            board = await build_board(self.client, self.config, self._rng)
        finally:
            self._in_flight -= 1

        if generation == self._generation:
            self._board = board
        else:
            logger.info("Discarding board from superseded build %d (latest is %d)", generation, self._generation)
        return board

    def interact(self, category_index: int, clue_index: int) -> str:
        """Advance one clue on the live board and return its shown text."""
        if self._board is None:
            raise RuntimeError("No board loaded; call restart() first.")
        return on_interact(self._board, category_index, clue_index)

    def close(self) -> None:
        """Release the data service client."""
        close = getattr(self.client, "close", None)
        if close is not None:
            close()
