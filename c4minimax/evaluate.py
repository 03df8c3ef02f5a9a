"""Static evaluation over every 4-cell window of the board."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np

from c4minimax.board import SIDE_X, check_side

WINDOW = 4

# Reserved score for "a 4-in-a-row already exists". No sum of non-terminal
# windows on a realistic board gets anywhere near it.
WIN = 1_100_000


@dataclass(frozen=True)
class Evaluation:
    score: int
    terminal: bool


def score_window(mine: int, theirs: int) -> int:
    """
    Score a single window from the perspective of the side owning ``mine``.

    Open runs (only one side present) are worth 1 / 10 / 100 for 1 / 2 / 3
    tokens, four tokens are decisive, and blocked windows are neutral.
    """

    if mine == 4:
        return WIN
    if theirs == 4:
        return -WIN
    if theirs == 0:
        return {0: 0, 1: 1, 2: 10, 3: 100}[mine]
    if mine == 0:
        return {1: -1, 2: -10, 3: -100}[theirs]
    return 0


_TABLE = np.array(
    [[score_window(m, t) if m + t <= WINDOW else 0 for t in range(WINDOW + 1)] for m in range(WINDOW + 1)],
    dtype=np.int64,
)


@lru_cache(maxsize=None)
def _window_index(height: int, width: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row/column indices of every window, shape ``(n_windows, 4)`` each.

    Windows are listed in scan order: anchor rows from the bottom up, anchor
    columns left to right, and at each anchor horizontal, vertical, rising
    diagonal, falling diagonal. The evaluator reports the first decisive
    window in this order, so the order is part of its contract.
    """

    rows = []
    cols = []
    span = range(WINDOW)
    for r in range(height - 1, -1, -1):
        for c in range(width):
            fits_right = c <= width - WINDOW
            fits_up = r >= WINDOW - 1

            if fits_right:
                rows.append([r] * WINDOW)
                cols.append([c + i for i in span])
            if fits_up:
                rows.append([r - i for i in span])
                cols.append([c] * WINDOW)
            if fits_up and fits_right:
                rows.append([r - i for i in span])
                cols.append([c + i for i in span])
            if fits_up and c >= WINDOW - 1:
                rows.append([r - i for i in span])
                cols.append([c - i for i in span])

    shape = (len(rows), WINDOW)
    row_idx = np.array(rows, dtype=np.intp).reshape(shape)
    col_idx = np.array(cols, dtype=np.intp).reshape(shape)
    row_idx.setflags(write=False)
    col_idx.setflags(write=False)
    return row_idx, col_idx


def window_count(height: int, width: int) -> int:
    return int(_window_index(height, width)[0].shape[0])


def assess(board: np.ndarray, side: int) -> Evaluation:
    """
    Score ``board`` for ``side`` and report whether it is decisive.

    If any window holds four tokens of one colour the result is that
    window's +/-WIN and ``terminal`` is set; otherwise the score is the sum
    of all window scores. One pass serves both as the search cutoff test
    and as the leaf score.
    """

    side = check_side(side)
    row_idx, col_idx = _window_index(*board.shape)
    if row_idx.shape[0] == 0:
        return Evaluation(score=0, terminal=False)

    cells = board[row_idx, col_idx]
    mine = np.count_nonzero(cells == side, axis=1)
    theirs = np.count_nonzero(cells == -side, axis=1)
    scores = _TABLE[mine, theirs]

    decisive = np.flatnonzero(np.abs(scores) == WIN)
    if decisive.size:
        return Evaluation(score=int(scores[decisive[0]]), terminal=True)
    return Evaluation(score=int(scores.sum()), terminal=False)


def evaluate(board: np.ndarray, side: int) -> int:
    return assess(board, side).score


def is_terminal(board: np.ndarray) -> bool:
    return assess(board, SIDE_X).terminal
