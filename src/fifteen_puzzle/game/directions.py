from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Direction the empty slot travels when a tile slides into it."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
