"""Gymnasium environments for the fifteen puzzle."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Classic 4x4 fifteen puzzle
register(
    id="FifteenPuzzle-4x4-v0",
    entry_point="fifteen_puzzle.env.fifteen_puzzle_env:FifteenPuzzleEnv",
)

# 3x3 variant
register(
    id="EightPuzzle-3x3-v0",
    entry_point="fifteen_puzzle.env.fifteen_puzzle_env:FifteenPuzzleEnv",
    kwargs={"size": 3},
)

__all__ = ["FifteenPuzzle-4x4-v0", "EightPuzzle-3x3-v0"]
