"""Fixed-depth minimax agent using the 4-window evaluation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from c4minimax.agents.base import Agent
from c4minimax.board import BoardLike, as_board, check_side, side_symbol
from c4minimax.evaluate import assess
from c4minimax.moves import apply_move, legal_moves

logger = logging.getLogger(__name__)

Scored = Tuple[float, Optional[int]]


@dataclass(frozen=True)
class SearchConfig:
    depth: int
    side: int
    prune: bool = False

    def validate(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError("depth must be an int")
        if self.depth < 0:
            raise ValueError("depth must be >= 0")
        check_side(self.side)


@dataclass(frozen=True)
class SearchResult:
    column: Optional[int]  # None when no column is playable
    score: float
    nodes: int


class MinimaxAgent(Agent):
    """
    Depth-limited minimax for one side.

    The search alternates two procedures:
      - maximize: the engine's side moves, keep the highest child score
      - minimize: the opponent moves, keep the lowest child score
    and stops at a node when a 4-in-a-row exists or the ply budget is spent,
    scoring it with ``assess`` from the engine's point of view.

    Ties go to the last column reaching the best score (``>=`` when
    maximizing, ``<=`` when minimizing). Each call returns its
    ``(score, column)`` pair to the caller so the root decision only depends
    on the root loop.

    With ``prune=True`` alpha-beta cutoffs are applied. Cutoffs only fire on
    strict inequality, so every child that could tie the best score is still
    scored exactly and the chosen column matches the unpruned search.
    """

    def __init__(self, depth: int, side: int, *, prune: bool = False, name: Optional[str] = None) -> None:
        self.config = SearchConfig(depth=depth, side=side, prune=prune)
        self.config.validate()
        self.name = name or f"Minimax {side_symbol(side)}"
        self._nodes = 0

    @property
    def depth(self) -> int:
        return self.config.depth

    @property
    def side(self) -> int:
        return self.config.side

    def choose_move(self, board: BoardLike) -> Optional[int]:
        return self.search(board).column

    def search(self, board: BoardLike) -> SearchResult:
        b = as_board(board)
        self._nodes = 0

        if not legal_moves(b):
            logger.debug(f"{self.name}: no legal move on a full board")
            return SearchResult(column=None, score=assess(b, self.side).score, nodes=0)

        # The root is always expanded so a playable board always yields a
        # column, even at depth 0 or when a line is already complete.
        score, column = self._maximize(b, max(self.depth, 1), -math.inf, math.inf, root=True)

        logger.debug(
            f"{self.name}: side={self.side} depth={self.depth} column={column} score={score} nodes={self._nodes}"
        )
        return SearchResult(column=column, score=score, nodes=self._nodes)

    def root_scores(self, board: BoardLike) -> List[Tuple[int, float]]:
        """Backed-up score of every playable root column, in column order."""
        b = as_board(board)
        self._nodes = 0
        remaining = max(self.depth, 1) - 1
        out = []
        for col in legal_moves(b):
            child = apply_move(b, col, self.side)
            score, _ = self._minimize(child, remaining, -math.inf, math.inf)
            out.append((col, score))
        return out

    def _maximize(self, board: np.ndarray, depth: int, alpha: float, beta: float, *, root: bool = False) -> Scored:
        self._nodes += 1

        ev = assess(board, self.side)
        if not root and (ev.terminal or depth <= 0):
            return ev.score, None

        legal = legal_moves(board)
        if not legal:
            return ev.score, None

        best_score = -math.inf
        best_move = None
        for col in legal:
            child = apply_move(board, col, self.side)
            score, _ = self._minimize(child, depth - 1, alpha, beta)
            if score >= best_score:
                best_score = score
                best_move = col

            if self.config.prune:
                alpha = max(alpha, best_score)
                if best_score > beta:
                    break  # the minimizing parent already has something lower
        return best_score, best_move

    def _minimize(self, board: np.ndarray, depth: int, alpha: float, beta: float) -> Scored:
        self._nodes += 1

        ev = assess(board, self.side)
        if ev.terminal or depth <= 0:
            return ev.score, None

        legal = legal_moves(board)
        if not legal:
            return ev.score, None

        opponent = -self.side
        best_score = math.inf
        best_move = None
        for col in legal:
            child = apply_move(board, col, opponent)
            score, _ = self._maximize(child, depth - 1, alpha, beta)
            if score <= best_score:
                best_score = score
                best_move = col

            if self.config.prune:
                beta = min(beta, best_score)
                if best_score < alpha:
                    break  # the maximizing parent already has something higher
        return best_score, best_move
