"""Pytest configuration and fixtures for fifteen puzzle tests."""

import os

# Headless pygame for renderer and key handling tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from fifteen_puzzle.game import Board, BoardConfig, GameSession


ALMOST_SOLVED = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 15]


@pytest.fixture
def almost_solved_cells():
    """The 4x4 layout with 15 and the empty slot swapped."""
    return list(ALMOST_SOLVED)


@pytest.fixture
def solved_board():
    """A solved 4x4 board with a fixed seed."""
    return Board.new_solved(BoardConfig(size=4, random_seed=1234))


@pytest.fixture
def almost_solved_board():
    """A 4x4 board one slide away from solved (empty at index 14)."""
    return Board(list(ALMOST_SOLVED), 4, BoardConfig(size=4, random_seed=1234))


@pytest.fixture
def session(almost_solved_board):
    """A session whose current level is the almost-solved layout."""
    return GameSession(almost_solved_board)
