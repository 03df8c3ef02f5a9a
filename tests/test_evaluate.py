"""
Tests for the 4-window evaluation.
"""

import unittest

import numpy as np

from c4minimax.board import BoardConfig, SIDE_O, SIDE_X
from c4minimax.evaluate import WIN, assess, evaluate, is_terminal, score_window, window_count
from tests.helpers import OPEN_THREE, board_from_rows, random_board


class TestScoreWindow(unittest.TestCase):

    def test_open_runs(self):
        self.assertEqual(score_window(1, 0), 1)
        self.assertEqual(score_window(2, 0), 10)
        self.assertEqual(score_window(3, 0), 100)
        self.assertEqual(score_window(0, 1), -1)
        self.assertEqual(score_window(0, 2), -10)
        self.assertEqual(score_window(0, 3), -100)

    def test_decisive_windows(self):
        self.assertEqual(score_window(4, 0), WIN)
        self.assertEqual(score_window(0, 4), -WIN)

    def test_blocked_and_empty_windows(self):
        self.assertEqual(score_window(0, 0), 0)
        for mine, theirs in [(1, 1), (2, 1), (1, 3), (2, 2), (3, 1)]:
            self.assertEqual(score_window(mine, theirs), 0)


class TestWindows(unittest.TestCase):

    def test_standard_board_window_count(self):
        # 24 horizontal + 21 vertical + 12 per diagonal direction
        self.assertEqual(window_count(6, 7), 69)

    def test_small_boards_have_no_windows(self):
        self.assertEqual(window_count(3, 3), 0)
        self.assertEqual(window_count(1, 1), 0)

    def test_narrow_boards_keep_one_direction(self):
        self.assertEqual(window_count(4, 1), 1)  # vertical only
        self.assertEqual(window_count(1, 5), 2)  # horizontal only
        self.assertEqual(window_count(4, 4), 10)


class TestEvaluate(unittest.TestCase):

    def test_empty_board(self):
        ev = assess(BoardConfig().empty_board(), SIDE_X)
        self.assertEqual(ev.score, 0)
        assert not ev.terminal

    def test_corner_token(self):
        """A bottom-left token sits in one horizontal, one vertical and one rising window."""
        board = BoardConfig().empty_board()
        board[5, 0] = SIDE_X
        self.assertEqual(evaluate(board, SIDE_X), 3)
        self.assertEqual(evaluate(board, SIDE_O), -3)

    def test_bottom_centre_token(self):
        board = BoardConfig().empty_board()
        board[5, 3] = SIDE_X
        self.assertEqual(evaluate(board, SIDE_X), 7)

    def test_blocked_windows_score_zero(self):
        board = board_from_rows("XO..")
        # windows: only the single horizontal one, holding both colours
        self.assertEqual(evaluate(board, SIDE_X), 0)

    def test_vertical_only_board(self):
        board = board_from_rows(".", ".", "X", "X")
        self.assertEqual(evaluate(board, SIDE_X), 10)
        self.assertEqual(evaluate(board, SIDE_O), -10)

    def test_tiny_board_does_not_crash(self):
        board = board_from_rows("X.", "OX")
        ev = assess(board, SIDE_X)
        self.assertEqual(ev.score, 0)
        assert not ev.terminal

    def test_four_in_a_row_is_decisive(self):
        board = board_from_rows(
            ".......",
            ".......",
            ".......",
            ".......",
            "OOO....",
            "XXXX...",
        )
        self.assertEqual(evaluate(board, SIDE_X), WIN)
        self.assertEqual(evaluate(board, SIDE_O), -WIN)
        assert assess(board, SIDE_X).terminal
        assert is_terminal(board)

    def test_diagonal_win(self):
        board = board_from_rows(
            ".......",
            ".......",
            "...O...",
            "..OX...",
            ".OXX...",
            "OXXX...",
        )
        self.assertEqual(evaluate(board, SIDE_O), WIN)
        self.assertEqual(evaluate(board, SIDE_X), -WIN)

    def test_first_decisive_window_in_scan_order_wins(self):
        """With lines for both sides the bottom-most, left-most one is reported."""
        board = board_from_rows(
            ".......",
            ".......",
            "......O",
            "......O",
            "......O",
            "XXXX..O",
        )
        self.assertEqual(evaluate(board, SIDE_X), WIN)
        self.assertEqual(evaluate(board, SIDE_O), -WIN)

    def test_open_three(self):
        assert not is_terminal(OPEN_THREE)
        self.assertEqual(evaluate(OPEN_THREE, SIDE_X), -evaluate(OPEN_THREE, SIDE_O))

    def test_antisymmetric_without_lines(self):
        checked = 0
        for seed in range(20):
            board = random_board(seed=seed, plies=14)
            if is_terminal(board):
                continue
            checked += 1
            self.assertEqual(evaluate(board, SIDE_X), -evaluate(board, SIDE_O))
        assert checked > 0

    def test_does_not_mutate_board(self):
        board = random_board(seed=11, plies=10)
        before = board.copy()
        evaluate(board, SIDE_X)
        np.testing.assert_array_equal(board, before)


if __name__ == "__main__":
    unittest.main()
