"""Shared board fixtures for the test modules."""

import random

import numpy as np

from c4minimax.board import BoardConfig, SIDE_O, SIDE_X
from c4minimax.moves import apply_move, legal_moves


def board_from_rows(*rows):
    """Build a board from strings written top to bottom with X, O and '.'."""
    sym = {"X": SIDE_X, "O": SIDE_O, ".": 0}
    return np.array([[sym[ch] for ch in row] for row in rows], dtype=np.int8)


def full_board(height=6, width=7):
    r = np.arange(height)[:, None]
    c = np.arange(width)[None, :]
    return np.where((r + c // 2) % 2 == 0, SIDE_X, SIDE_O).astype(np.int8)


def random_board(seed, plies, cfg=BoardConfig()):
    rng = random.Random(seed)
    board = cfg.empty_board()
    side = SIDE_X
    for _ in range(plies):
        legal = legal_moves(board)
        if not legal:
            break
        board = apply_move(board, rng.choice(legal), side)
        side = -side
    return board


# X to move with a horizontal three open at both ends on the bottom row;
# O threatens to finish column 0.
OPEN_THREE = board_from_rows(
    ".......",
    ".......",
    ".......",
    "O......",
    "O......",
    "O.XXX..",
)

# O to move; X has three on the bottom row with only column 3 open.
EDGE_THREE = board_from_rows(
    ".......",
    ".......",
    ".......",
    ".......",
    "OO.....",
    "XXX....",
)
