"""Minimax move selection for Connect-4 style boards (board model + evaluator + agent)."""

from c4minimax.agents import Agent, MinimaxAgent, SearchConfig, SearchResult
from c4minimax.board import EMPTY, SIDE_O, SIDE_X, BoardConfig, as_board
from c4minimax.evaluate import WIN, Evaluation, assess, evaluate, is_terminal
from c4minimax.moves import apply_move, is_playable, legal_moves

__all__ = [
    "Agent",
    "BoardConfig",
    "EMPTY",
    "Evaluation",
    "MinimaxAgent",
    "SIDE_O",
    "SIDE_X",
    "SearchConfig",
    "SearchResult",
    "WIN",
    "apply_move",
    "as_board",
    "assess",
    "evaluate",
    "is_playable",
    "is_terminal",
    "legal_moves",
]
