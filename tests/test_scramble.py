"""Tests for board scrambling."""

import logging
import random

from fifteen_puzzle.game import Board, BoardConfig, solved_cells


class TestScramble:
    def test_scramble_yields_permutations_and_rarely_solved(self):
        """1000 scrambles all stay permutations and almost never end solved."""
        board = Board.new_solved(BoardConfig(size=4, random_seed=2024))
        solved_count = 0
        for _ in range(1000):
            board.scramble()
            assert sorted(board.cells.tolist()) == solved_cells(4)
            assert board.solved == (board.cells.tolist() == solved_cells(4))
            solved_count += board.solved
        assert solved_count / 1000 < 0.01

    def test_scramble_starts_from_solved_layout(self, almost_solved_board):
        """The previous layout does not leak into the scramble."""
        a = Board(list(almost_solved_board.cells), 4, BoardConfig(random_seed=5))
        b = Board(solved_cells(4), 4, BoardConfig(random_seed=5))
        a.scramble()
        b.scramble()
        assert a.cells.tolist() == b.cells.tolist()

    def test_same_seed_same_scramble(self):
        a = Board.new_solved(BoardConfig(random_seed=99))
        b = Board.new_solved(BoardConfig(random_seed=99))
        a.scramble()
        b.scramble()
        assert a.cells.tolist() == b.cells.tolist()

    def test_injected_rng_drives_scramble(self, solved_board):
        """Replacing the generator makes the scramble reproducible."""
        solved_board.rng = random.Random(3)
        solved_board.scramble()
        first = solved_board.cells.tolist()
        solved_board.rng = random.Random(3)
        solved_board.scramble()
        assert solved_board.cells.tolist() == first

    def test_small_board_scrambles_unsolved(self):
        """A 2x2 board has few states but still ends unsolved."""
        board = Board.new_solved(BoardConfig(size=2, random_seed=11))
        for _ in range(50):
            board.scramble()
            assert sorted(board.cells.tolist()) == [1, 2, 3, 4]
            assert board.solved is False

    def test_all_rounds_solved_leaves_board_solved(self, caplog, almost_solved_cells):
        """With zero moves per round every round lands on solved; the board is served solved."""
        config = BoardConfig(size=4, min_scramble_moves=0, max_scramble_moves=1, random_seed=1)
        board = Board(almost_solved_cells, 4, config)
        with caplog.at_level(logging.WARNING, logger="fifteen_puzzle.game.core"):
            board.scramble()
        assert board.solved is True
        assert "left the board solved after 20 rounds" in caplog.text

    def test_zero_rounds_resets_to_solved(self, almost_solved_cells):
        config = BoardConfig(scramble_rounds=0)
        board = Board(almost_solved_cells, 4, config)
        board.scramble()
        assert board.solved is True
