"""Game module for the fifteen puzzle.

Exports the puzzle state machine and the driver-side session:
- Board: Tile layout, legal moves, solved detection and scrambling
- BoardConfig: Board size and scramble tuning
- Direction: Enum of the four slide directions
- GameSession: Level counter, restart and advance policy over one Board
"""

from .directions import Direction
from .core import Board, BoardConfig, solved_cells
from .session import GameSession, format_window_title

__all__ = [
    "Board",
    "BoardConfig",
    "Direction",
    "GameSession",
    "format_window_title",
    "solved_cells",
]
