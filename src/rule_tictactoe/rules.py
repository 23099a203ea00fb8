"""Pattern rules and the rule evaluator."""

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence
import numpy as np
import numpy.typing as npt

from rule_tictactoe.board import Board, Cell, to_cell_array


PATTERN_SIZE = 9


@dataclass(eq=False)
class Rule:
    """
    A board pattern, the cell to play when it matches, and a fitness weight.

    Pattern cells use Cell values, where Cell.WILDCARD matches anything:

        0: empty, 1: player one, 2: player two, 3: any

    The weight is only compared ordinally; it is unbounded and never
    normalized.
    """

    pattern: npt.NDArray[np.int_]
    target: int
    weight: float = 0.0

    def __post_init__(self) -> None:
        self.pattern = to_cell_array(self.pattern)
        if self.pattern.shape != (PATTERN_SIZE,):
            raise ValueError(
                f"Rule pattern needs exactly {PATTERN_SIZE} cells, got {self.pattern.size}"
            )
        if np.any((self.pattern < Cell.EMPTY) | (self.pattern > Cell.WILDCARD)):
            raise ValueError("Rule pattern cells must be in range 0-3")
        if isinstance(self.target, bool) or int(self.target) != self.target:
            raise ValueError(f"Rule target must be an integer, got {self.target!r}")
        self.target = int(self.target)
        if self.target < 0 or self.target > 8:
            raise ValueError(f"Rule target {self.target} is out of range 0-8")
        self.weight = float(self.weight)

    def pattern_key(self) -> str:
        """Return the pattern as a 9-digit string, e.g. '113333333'."""
        return "".join(str(int(x)) for x in self.pattern)

    def __repr__(self) -> str:
        return f"Rule({self.pattern_key()} -> {self.target}, w={self.weight})"


class EvaluationKind(str, Enum):
    """Three-way result of testing one rule against one board."""

    MATCH = "match"
    UNMATCHED = "unmatched"
    INVALID = "invalid"


class RuleEvaluation(NamedTuple):
    """Evaluation result; target is set only for MATCH."""

    kind: EvaluationKind
    target: Optional[int] = None

    @property
    def is_match(self) -> bool:
        return self.kind is EvaluationKind.MATCH


UNMATCHED = RuleEvaluation(EvaluationKind.UNMATCHED)
INVALID = RuleEvaluation(EvaluationKind.INVALID)


def evaluate_rule(board: Board, rule: Rule) -> RuleEvaluation:
    """
    Decide whether a rule applies to a board.

    Args:
        board: Current board
        rule: Rule to test

    Returns:
        UNMATCHED if any non-wildcard pattern cell differs from the board,
        INVALID if the pattern matches but the target cell is occupied,
        otherwise MATCH carrying the target cell
    """
    fixed = rule.pattern != Cell.WILDCARD
    if np.any(rule.pattern[fixed] != board.cells[fixed]):
        return UNMATCHED
    if board.cells[rule.target] != Cell.EMPTY:
        return INVALID
    return RuleEvaluation(EvaluationKind.MATCH, rule.target)


def random_rule(rng: np.random.Generator) -> Rule:
    """
    Sample a rule uniformly: each pattern cell from 0-3, target from 0-8.

    Args:
        rng: Random generator owned by the caller

    Returns:
        New rule with weight 0.0
    """
    pattern = rng.integers(0, 4, size=PATTERN_SIZE)
    target = int(rng.integers(0, 9))
    return Rule(pattern=pattern, target=target, weight=0.0)


def generate_rules(count: int, rng: np.random.Generator) -> List[Rule]:
    """Generate count random rules, in sampling order."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [random_rule(rng) for _ in range(count)]


def make_rule(pattern: Sequence[int], target: int, weight: float = 0.0) -> Rule:
    """Convenience constructor accepting any integer sequence as pattern."""
    return Rule(pattern=pattern, target=target, weight=weight)
