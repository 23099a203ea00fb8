"""Agent implementations for Tic-Tac-Toe."""

from rule_tictactoe.agents.base import Agent
from rule_tictactoe.agents.philosopher import Philosopher

__all__ = ["Agent", "Philosopher"]
