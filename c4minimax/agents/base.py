"""Abstract base class for move-choosing agents."""

from __future__ import annotations

import abc
from typing import Optional

from c4minimax.board import BoardLike


class Agent(abc.ABC):
    name: str
    side: int

    @abc.abstractmethod
    def choose_move(self, board: BoardLike) -> Optional[int]:
        """Return a playable column, or ``None`` when the board is full."""
        raise NotImplementedError
