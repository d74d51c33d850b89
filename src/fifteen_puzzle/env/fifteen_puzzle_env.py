from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from fifteen_puzzle.game import Board, BoardConfig, Direction


ACTIONS: Tuple[Direction, ...] = tuple(Direction)


def _compute_action_mask(board: Board) -> np.ndarray:
    legal = board.legal_directions()
    return np.array([d in legal for d in ACTIONS], dtype=np.bool_)


class FifteenPuzzleEnv(gym.Env):
    """Sliding puzzle as a gym environment.

    Observation is the ``size x size`` grid of tile values, the largest value
    being the empty slot. Action ``i`` moves the empty slot in ``ACTIONS[i]``.
    Every episode starts from a fresh scramble.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        size: Optional[int] = None,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        solved_reward: float = 1.0,
        step_penalty: float = -0.01,
        invalid_action_penalty: float = -0.1,
        max_episode_steps: int = 500,
    ) -> None:
        super().__init__()
        if config is None:
            config = BoardConfig() if size is None else BoardConfig(size=size)
        elif size is not None:
            config = replace(config, size=size)
        self.board = Board.new_solved(config)
        self.render_mode = render_mode

        self.solved_reward = float(solved_reward)
        self.step_penalty = float(step_penalty)
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.max_episode_steps = int(max_episode_steps)

        n = self.board.size
        self.observation_space = spaces.Box(low=1, high=n * n, shape=(n, n), dtype=np.int16)
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.board.as_grid()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.board),
            "legal_directions": self.board.legal_directions(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.board.rng.seed(seed)
        self.board.scramble()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        direction = ACTIONS[int(action)]
        moved = self.board.move_empty(direction)
        self._steps += 1

        reward = self.step_penalty
        if not moved:
            reward += self.invalid_action_penalty
        terminated = self.board.solved
        if terminated:
            reward += self.solved_reward
        truncated = not terminated and self._steps >= self.max_episode_steps

        info = self._get_info()
        info["moved"] = moved
        return self._get_obs(), float(reward), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        # Empty slot dark, tiles shaded by value
        grid = self.board.as_grid()
        cell = 12
        n = self.board.size
        img = np.zeros((n * cell, n * cell, 3), dtype=np.uint8)
        for y in range(n):
            for x in range(n):
                v = int(grid[y, x])
                if v == self.board.empty_value:
                    color = (11, 11, 11)
                else:
                    shade = 60 + int(180 * v / self.board.empty_value)
                    color = (shade, shade, shade)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
