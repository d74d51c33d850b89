from __future__ import annotations

import random

import gymnasium as gym
import numpy as np

import fifteen_puzzle.env  # noqa: F401  ensure registration


def run_random(steps: int = 200, env_id: str = "FifteenPuzzle-4x4-v0", seed: int | None = None) -> float:
    env = gym.make(env_id)
    rng = random.Random(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    for _ in range(steps):
        # Only pick directions that slide a tile
        legal = np.flatnonzero(info["action_mask"])
        action = int(rng.choice(legal))
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            obs, info = env.reset()
    env.close()
    print(f"Random agent total reward: {total_reward:.2f}")
    return total_reward


if __name__ == "__main__":  # pragma: no cover
    run_random()
