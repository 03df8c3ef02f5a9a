"""Board model for the minimax engine.

A board is a plain ``numpy.ndarray`` of shape ``(height, width)``:

  - row 0 is the top row, rows grow downward
  - column 0 is the leftmost column
  - cells hold 0 (empty), +1 (side X) or -1 (side O)

The two sides are each other's negation, which the evaluator and the search
rely on when flipping perspective.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

EMPTY = 0
SIDE_X = +1
SIDE_O = -1
SIDES = (SIDE_X, SIDE_O)

BoardLike = Union[np.ndarray, Sequence[Sequence[int]]]


@dataclass(frozen=True)
class BoardConfig:
    width: int = 7
    height: int = 6

    def validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width/height must be >= 1")

    def empty_board(self) -> np.ndarray:
        self.validate()
        return np.zeros((self.height, self.width), dtype=np.int8)


def check_side(side: int) -> int:
    if side not in SIDES:
        raise ValueError(f"side must be +1 or -1, got {side!r}")
    return int(side)


def as_board(grid: BoardLike) -> np.ndarray:
    """
    Validate a caller-owned grid and return an independent int8 copy.

    Malformed input is rejected up front rather than letting the search run
    on a board it cannot reason about.
    """

    if not isinstance(grid, np.ndarray):
        try:
            rows = [list(r) for r in grid]
        except TypeError as err:
            raise ValueError("board must be two-dimensional") from err
        if not rows:
            raise ValueError("board must have at least one row")
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise ValueError("board rows must all have the same length")
        grid = rows

    board = np.array(grid)
    if board.ndim != 2:
        raise ValueError("board must be two-dimensional")
    height, width = board.shape
    if height < 1 or width < 1:
        raise ValueError("board must have at least one row and one column")
    if not np.isin(board, (EMPTY, SIDE_X, SIDE_O)).all():
        raise ValueError("board cells must be 0, +1 or -1")

    board = board.astype(np.int8)

    # Gravity: once a column has an occupied cell, nothing below it is empty.
    occupied = board != EMPTY
    floating = occupied[:-1, :] & ~occupied[1:, :]
    if floating.any():
        col = int(np.nonzero(floating.any(axis=0))[0][0])
        raise ValueError(f"column {col} has an empty cell below a token")

    return board


def is_full(board: np.ndarray) -> bool:
    return not bool((board[0] == EMPTY).any())


def side_symbol(side: int) -> str:
    return "X" if side == SIDE_X else "O"
