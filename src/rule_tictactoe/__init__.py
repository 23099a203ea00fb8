"""
rule-tictactoe: rule-based Tic-Tac-Toe philosophers

Two agents play repeated games, each picking moves from an ordered list of
weighted pattern rules. Every rule evaluation feeds back into the rule's
weight, giving a crude fitness signal that accumulates over a run.
"""

__version__ = "0.1.0"

from rule_tictactoe.exceptions import RuleTicTacToeError

__all__ = ["RuleTicTacToeError", "__version__"]
