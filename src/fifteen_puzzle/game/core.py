from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import numpy as np

from .directions import Direction


logger = logging.getLogger(__name__)


@dataclass
class BoardConfig:
    size: int = 4
    scramble_rounds: int = 20
    min_scramble_moves: int = 20
    max_scramble_moves: int = 100  # exclusive
    random_seed: Optional[int] = None


def solved_cells(size: int) -> List[int]:
    return list(range(1, size * size + 1))


class Board:
    """Square sliding-tile board stored as a flat row-major array.

    The value ``size * size`` marks the empty slot. ``solved`` is recomputed
    after every mutation and is true iff ``cells[i] == i + 1`` for every index.
    Callers must pass a permutation of ``1..size * size``; it is not checked.
    """

    def __init__(self, cells: Sequence[int], size: int, config: Optional[BoardConfig] = None) -> None:
        self.size = int(size)
        # The board size wins over whatever size the config carries
        self.config = replace(config, size=self.size) if config is not None else BoardConfig(size=self.size)
        self.rng = random.Random(self.config.random_seed)
        self._goal = np.arange(1, self.size * self.size + 1, dtype=np.int16)
        self.cells = self._goal.copy()
        self.solved = True
        self.set_cells(cells)

    @classmethod
    def new_solved(cls, config: Optional[BoardConfig] = None) -> "Board":
        config = config or BoardConfig()
        return cls(solved_cells(config.size), config.size, config)

    @property
    def empty_value(self) -> int:
        return self.size * self.size

    def set_cells(self, cells: Sequence[int]) -> None:
        self.cells = np.array(cells, dtype=np.int16).reshape(-1)
        self.check_solved()

    def check_solved(self) -> None:
        self.solved = bool(np.array_equal(self.cells, self._goal))

    def get_empty_index(self) -> int:
        hits = np.flatnonzero(self.cells == self.empty_value)
        if hits.size != 1:
            raise ValueError(f"board must hold exactly one empty slot, found {hits.size}")
        return int(hits[0])

    def get_neighbor_index(self, index: int, direction: Direction) -> Optional[int]:
        row, col = divmod(index, self.size)
        last = self.size - 1
        if direction == Direction.UP:
            return None if row == 0 else (row - 1) * self.size + col
        if direction == Direction.DOWN:
            return None if row == last else (row + 1) * self.size + col
        if direction == Direction.LEFT:
            return None if col == 0 else row * self.size + col - 1
        if direction == Direction.RIGHT:
            return None if col == last else row * self.size + col + 1
        raise ValueError(f"unknown direction: {direction!r}")

    def legal_directions(self) -> List[Direction]:
        empty_index = self.get_empty_index()
        return [d for d in Direction if self.get_neighbor_index(empty_index, d) is not None]

    def move_empty(self, direction: Direction) -> bool:
        """Slide the tile next to the empty slot into it.

        Moving into a wall is a no-op. Returns whether a tile moved.
        """
        empty_index = self.get_empty_index()
        neighbor_index = self.get_neighbor_index(empty_index, direction)
        moved = neighbor_index is not None
        if moved:
            tile = int(self.cells[neighbor_index])
            self.cells[empty_index] = tile
            self.cells[neighbor_index] = self.empty_value
            logger.debug("Tile %d moved: %d -> %d", tile, neighbor_index, empty_index)
        else:
            logger.debug("Blocked move %s at index %d", direction.value, empty_index)
        self.check_solved()
        return moved

    def scramble(self) -> None:
        """Randomize the board by playing legal moves from the solved layout.

        Every result is reachable, hence solvable. Up to ``scramble_rounds``
        rounds are played, stopping at the first one that ends unsolved; if
        all of them land on solved the board is left solved.
        """
        self.set_cells(solved_cells(self.size))
        directions = list(Direction)
        rounds = 0
        for _ in range(self.config.scramble_rounds):
            rounds += 1
            move_count = self.rng.randrange(self.config.min_scramble_moves, self.config.max_scramble_moves)
            for _ in range(move_count):
                self.move_empty(self.rng.choice(directions))
            if not self.solved:
                break
        if self.solved:
            logger.warning("Scramble left the board solved after %d rounds", rounds)
        else:
            logger.info("Board scrambled in %d round(s)", rounds)

    def as_grid(self) -> np.ndarray:
        return self.cells.reshape(self.size, self.size).copy()
