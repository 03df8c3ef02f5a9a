"""Agent implementations."""

from c4minimax.agents.base import Agent
from c4minimax.agents.minimax import MinimaxAgent, SearchConfig, SearchResult

__all__ = ["Agent", "MinimaxAgent", "SearchConfig", "SearchResult"]
