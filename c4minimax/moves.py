"""Move generation: playability checks and gravity drops."""

from __future__ import annotations

from typing import List

import numpy as np

from c4minimax.board import EMPTY, check_side


def _check_column(board: np.ndarray, column: int) -> int:
    col = int(column)
    if col < 0 or col >= board.shape[1]:
        raise ValueError("col out of range")
    return col


def is_playable(board: np.ndarray, column: int) -> bool:
    col = _check_column(board, column)
    return int(board[0, col]) == EMPTY


def legal_moves(board: np.ndarray) -> List[int]:
    return np.nonzero(board[0] == EMPTY)[0].tolist()


def apply_move(board: np.ndarray, column: int, side: int) -> np.ndarray:
    """
    Drop a token for ``side`` into ``column`` and return the new board.

    The token lands in the last empty cell above the first occupied one
    (or on the bottom row of an empty column). A full column gives back an
    unchanged copy; callers are expected to check ``is_playable`` first.
    The input board is never modified.
    """

    col = _check_column(board, column)
    side = check_side(side)

    child = board.copy()
    if child[0, col] != EMPTY:
        return child

    occupied = np.flatnonzero(child[:, col] != EMPTY)
    row = int(occupied[0]) - 1 if occupied.size else child.shape[0] - 1
    child[row, col] = side
    return child
