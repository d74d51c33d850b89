from __future__ import annotations

import logging
from typing import List, Sequence

from .core import Board
from .directions import Direction


logger = logging.getLogger(__name__)


def format_window_title(level_index: int, size: int = 4) -> str:
    return f"{size * size - 1} Puzzle - Level {level_index + 1}"


class GameSession:
    """Driver-side policy over a single Board.

    Slides are ignored once the board is solved until the player advances to
    the next level. Restarting puts back the layout the level started with.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.completed_level_count = 0
        self.move_count = 0
        self.level_cells: List[int] = board.cells.tolist()

    @property
    def window_title(self) -> str:
        return format_window_title(self.completed_level_count, self.board.size)

    def load_level(self, cells: Sequence[int]) -> None:
        self.board.set_cells(cells)
        self.level_cells = self.board.cells.tolist()
        self.move_count = 0

    def start_level(self) -> None:
        self.board.scramble()
        self.load_level(self.board.cells.tolist())

    def slide(self, direction: Direction) -> bool:
        if self.board.solved:
            return False
        moved = self.board.move_empty(direction)
        if moved:
            self.move_count += 1
            if self.board.solved:
                logger.info("Level %d solved in %d moves", self.completed_level_count + 1, self.move_count)
        return moved

    def restart_level(self) -> None:
        self.board.set_cells(self.level_cells)
        self.move_count = 0

    def advance_level(self) -> bool:
        if not self.board.solved:
            return False
        self.completed_level_count += 1
        self.start_level()
        logger.info("Advanced to level %d", self.completed_level_count + 1)
        return True
