"""Rule-based agent that plays the first matching rule."""

import logging
from typing import List, Optional

from rule_tictactoe.board import Board
from rule_tictactoe.feedback import DefaultFeedbackAdapter, FeedbackAdapter
from rule_tictactoe.rules import EvaluationKind, Rule, evaluate_rule

logger = logging.getLogger(__name__)


class Philosopher:
    """
    Agent that picks its move from an ordered list of pattern rules.

    Rules are scanned in stored order and the first MATCH is played. The
    list order is the priority; it is never sorted or reordered here.
    Every scanned rule receives exactly one feedback call per turn:

    1. MATCH: move is played, on_match, scanning stops
    2. UNMATCHED: on_unmatch, scanning continues
    3. INVALID: on_invalid, scanning continues

    Rules after the one that fired are not touched that turn.
    """

    def __init__(
        self,
        name: str,
        rules: Optional[List[Rule]] = None,
        adapter: Optional[FeedbackAdapter] = None,
    ) -> None:
        """
        Initialize the philosopher.

        Args:
            name: Display name used in logs and results
            rules: Ordered rule list (priority order)
            adapter: Feedback strategy shared by all rules
        """
        self.name = name
        self.rules: List[Rule] = rules if rules is not None else []
        self.adapter: FeedbackAdapter = (
            adapter if adapter is not None else DefaultFeedbackAdapter()
        )

    def select_move(self, board: Board, mark: int) -> Optional[int]:
        """
        Play the first matching rule and feed back every scanned rule.

        Args:
            board: Current board, mutated when a rule fires
            mark: Cell.PLAYER_ONE or Cell.PLAYER_TWO

        Returns:
            Cell that was played, or None if no rule matched
        """
        for rule in self.rules:
            evaluation = evaluate_rule(board, rule)
            if evaluation.kind is EvaluationKind.MATCH:
                logger.debug("%s: rule matches %s", self.name, rule)
                board.place(evaluation.target, mark)
                self.adapter.on_match(rule)
                return evaluation.target
            elif evaluation.kind is EvaluationKind.UNMATCHED:
                self.adapter.on_unmatch(rule)
            else:
                self.adapter.on_invalid(rule)
        return None

    def reset(self) -> None:
        """Reset agent state (no-op: rule weights persist across games)."""
        pass

    def __repr__(self) -> str:
        return f"Philosopher(name={self.name!r}, rules={len(self.rules)})"
