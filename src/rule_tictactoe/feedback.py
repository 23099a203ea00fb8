"""Feedback strategies that adjust rule weights after each evaluation."""

import logging
from typing import Protocol

from rule_tictactoe.config import FeedbackConfig
from rule_tictactoe.exceptions import ConfigurationError
from rule_tictactoe.rules import Rule

logger = logging.getLogger(__name__)


class FeedbackAdapter(Protocol):
    """Protocol for rule weight feedback strategies."""

    def on_match(self, rule: Rule) -> None:
        """Called when the rule matched and its move was played."""
        ...

    def on_unmatch(self, rule: Rule) -> None:
        """Called when the rule's pattern did not match the board."""
        ...

    def on_invalid(self, rule: Rule) -> None:
        """Called when the pattern matched but the target cell was occupied."""
        ...


class DefaultFeedbackAdapter:
    """
    Reference strategy: +1 on match, -1 on unmatch, -100 on invalid.

    Invalid rules are penalized heavily because their pattern fits the board
    but the move they prescribe is illegal.
    """

    def __init__(
        self,
        match_reward: float = 1.0,
        unmatch_penalty: float = 1.0,
        invalid_penalty: float = 100.0,
    ) -> None:
        self.match_reward = match_reward
        self.unmatch_penalty = unmatch_penalty
        self.invalid_penalty = invalid_penalty

    def on_match(self, rule: Rule) -> None:
        rule.weight += self.match_reward

    def on_unmatch(self, rule: Rule) -> None:
        rule.weight -= self.unmatch_penalty

    def on_invalid(self, rule: Rule) -> None:
        logger.debug("Detected invalid rule %s", rule)
        rule.weight -= self.invalid_penalty


class BoundedFeedbackAdapter(DefaultFeedbackAdapter):
    """Default deltas with the weight clamped to [min_weight, max_weight]."""

    def __init__(
        self,
        min_weight: float,
        max_weight: float,
        match_reward: float = 1.0,
        unmatch_penalty: float = 1.0,
        invalid_penalty: float = 100.0,
    ) -> None:
        if min_weight >= max_weight:
            raise ValueError("min_weight must be lower than max_weight")
        super().__init__(match_reward, unmatch_penalty, invalid_penalty)
        self.min_weight = min_weight
        self.max_weight = max_weight

    def _clamp(self, rule: Rule) -> None:
        rule.weight = min(self.max_weight, max(self.min_weight, rule.weight))

    def on_match(self, rule: Rule) -> None:
        super().on_match(rule)
        self._clamp(rule)

    def on_unmatch(self, rule: Rule) -> None:
        super().on_unmatch(rule)
        self._clamp(rule)

    def on_invalid(self, rule: Rule) -> None:
        super().on_invalid(rule)
        self._clamp(rule)


class DecayingFeedbackAdapter(DefaultFeedbackAdapter):
    """
    Default deltas applied after shrinking the weight by a decay factor.

    Older feedback fades out, so the weight tracks recent behaviour.
    """

    def __init__(
        self,
        decay: float,
        match_reward: float = 1.0,
        unmatch_penalty: float = 1.0,
        invalid_penalty: float = 100.0,
    ) -> None:
        if not 0.0 < decay <= 1.0:
            raise ValueError("decay must be in (0, 1]")
        super().__init__(match_reward, unmatch_penalty, invalid_penalty)
        self.decay = decay

    def on_match(self, rule: Rule) -> None:
        rule.weight *= self.decay
        super().on_match(rule)

    def on_unmatch(self, rule: Rule) -> None:
        rule.weight *= self.decay
        super().on_unmatch(rule)

    def on_invalid(self, rule: Rule) -> None:
        rule.weight *= self.decay
        super().on_invalid(rule)


def build_adapter(config: FeedbackConfig) -> FeedbackAdapter:
    """
    Create the feedback strategy named by the configuration.

    Args:
        config: Feedback configuration

    Returns:
        Feedback adapter instance

    Raises:
        ConfigurationError: If the strategy name is unknown
    """
    amounts = dict(
        match_reward=config.match_reward,
        unmatch_penalty=config.unmatch_penalty,
        invalid_penalty=config.invalid_penalty,
    )
    if config.strategy == "default":
        return DefaultFeedbackAdapter(**amounts)
    if config.strategy == "bounded":
        return BoundedFeedbackAdapter(config.min_weight, config.max_weight, **amounts)
    if config.strategy == "decaying":
        return DecayingFeedbackAdapter(config.decay, **amounts)
    raise ConfigurationError(f"Unknown feedback strategy: {config.strategy}")
