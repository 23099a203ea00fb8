"""Tests for rules and the rule evaluator."""

import numpy as np
import pytest
from rule_tictactoe.board import Board, Cell, Outcome, evaluate_winner
from rule_tictactoe.rules import (
    EvaluationKind,
    Rule,
    RuleEvaluation,
    evaluate_rule,
    generate_rules,
    make_rule,
    random_rule,
)


ALL_WILDCARD = [3] * 9


class TestRule:
    """Test rule construction and validation."""

    def test_defaults(self) -> None:
        """Test that a new rule starts at weight 0.0."""
        rule = make_rule(ALL_WILDCARD, 4)
        assert rule.weight == 0.0
        assert rule.target == 4
        assert rule.pattern_key() == "333333333"

    def test_pattern_is_copied(self) -> None:
        """Test that the rule does not alias the caller's array."""
        pattern = np.zeros(9, dtype=np.int_)
        rule = Rule(pattern=pattern, target=0)
        pattern[0] = 2
        assert rule.pattern[0] == 0

    def test_rejects_wrong_pattern_length(self) -> None:
        """Test that patterns must have 9 cells."""
        with pytest.raises(ValueError, match="exactly 9"):
            make_rule([3] * 8, 0)

    def test_rejects_out_of_range_cells(self) -> None:
        """Test that pattern cells must be 0-3."""
        with pytest.raises(ValueError, match="range 0-3"):
            make_rule([4] + [3] * 8, 0)

    def test_rejects_fractional_pattern_cells(self) -> None:
        """Test that float cells are not truncated into valid values."""
        with pytest.raises(ValueError, match="integers"):
            make_rule([1.7] + [3] * 8, 0)
        with pytest.raises(ValueError, match="integers"):
            make_rule(["1"] + ["3"] * 8, 0)

    def test_accepts_integral_float_cells(self) -> None:
        """Test that whole-number floats are accepted as cells."""
        rule = make_rule([1.0] + [3.0] * 8, 0)
        assert rule.pattern_key() == "133333333"

    def test_rejects_fractional_target(self) -> None:
        """Test that the target is not truncated either."""
        with pytest.raises(ValueError, match="must be an integer"):
            make_rule([3] * 9, 2.5)

    @pytest.mark.parametrize("target", [-1, 9])
    def test_rejects_out_of_range_target(self, target: int) -> None:
        """Test that targets must be 0-8."""
        with pytest.raises(ValueError, match="out of range"):
            make_rule(ALL_WILDCARD, target)


class TestEvaluateRule:
    """Test the three-way rule evaluation."""

    def test_all_wildcard_on_empty_board_matches(self) -> None:
        """Test that an all-wildcard rule matches the empty board."""
        result = evaluate_rule(Board(), make_rule(ALL_WILDCARD, 4))
        assert result == RuleEvaluation(EvaluationKind.MATCH, 4)
        assert result.is_match

    def test_partial_pattern_match(self) -> None:
        """Test a pattern fixing two cells matching a mid-game board."""
        board = Board.from_cells([1, 1, 0, 2, 2, 0, 0, 0, 0])
        rule = make_rule([1, 1, 3, 3, 3, 3, 3, 3, 3], 2)
        assert evaluate_rule(board, rule) == RuleEvaluation(EvaluationKind.MATCH, 2)

    def test_applying_match_completes_line(self) -> None:
        """Test that playing the matched target wins the top row."""
        board = Board.from_cells([1, 1, 0, 2, 2, 0, 0, 0, 0])
        rule = make_rule([1, 1, 3, 3, 3, 3, 3, 3, 3], 2)
        result = evaluate_rule(board, rule)
        board.place(result.target, Cell.PLAYER_ONE)
        assert evaluate_winner(board) is Outcome.PLAYER_ONE

    def test_mismatch_is_unmatched(self) -> None:
        """Test that a single disagreeing cell makes the rule inapplicable."""
        board = Board.from_cells([1, 0, 0, 0, 0, 0, 0, 0, 0])
        rule = make_rule([2, 3, 3, 3, 3, 3, 3, 3, 3], 4)
        result = evaluate_rule(board, rule)
        assert result.kind is EvaluationKind.UNMATCHED
        assert result.target is None

    def test_empty_pattern_cell_requires_empty_board_cell(self) -> None:
        """Test that a pattern EMPTY cell does not match an occupied cell."""
        board = Board.from_cells([0, 0, 0, 0, 1, 0, 0, 0, 0])
        rule = make_rule([3, 3, 3, 3, 0, 3, 3, 3, 3], 0)
        assert evaluate_rule(board, rule).kind is EvaluationKind.UNMATCHED

    def test_occupied_target_is_invalid(self) -> None:
        """Test that a matching pattern with an occupied target is INVALID."""
        board = Board.from_cells([0, 0, 0, 0, 1, 0, 0, 0, 0])
        rule = make_rule(ALL_WILDCARD, 4)
        result = evaluate_rule(board, rule)
        assert result.kind is EvaluationKind.INVALID
        assert not result.is_match

    def test_unmatched_takes_precedence_over_invalid(self) -> None:
        """Test that a mismatched pattern is UNMATCHED even if the target is taken."""
        board = Board.from_cells([1, 0, 0, 0, 0, 0, 0, 0, 0])
        rule = make_rule([2, 3, 3, 3, 3, 3, 3, 3, 3], 0)
        assert evaluate_rule(board, rule).kind is EvaluationKind.UNMATCHED

    def test_matches_reference_definition_on_random_inputs(self) -> None:
        """Test evaluate_rule against a direct cell-by-cell definition."""
        rng = np.random.default_rng(7)
        for _ in range(500):
            board = Board.from_cells(rng.integers(0, 3, size=9))
            rule = random_rule(rng)

            disagrees = any(
                p != Cell.WILDCARD and p != c for p, c in zip(rule.pattern, board.cells)
            )
            if disagrees:
                expected = EvaluationKind.UNMATCHED
            elif board.cells[rule.target] != Cell.EMPTY:
                expected = EvaluationKind.INVALID
            else:
                expected = EvaluationKind.MATCH

            result = evaluate_rule(board, rule)
            assert result.kind is expected
            if expected is EvaluationKind.MATCH:
                assert result.target == rule.target

    def test_evaluation_does_not_modify_inputs(self) -> None:
        """Test that evaluation is read-only."""
        board = Board.from_cells([1, 1, 0, 2, 2, 0, 0, 0, 0])
        rule = make_rule([1, 1, 3, 3, 3, 3, 3, 3, 3], 2, weight=5.0)
        evaluate_rule(board, rule)
        assert board.state_key() == "110220000"
        assert rule.weight == 5.0


class TestRandomRules:
    """Test random rule generation."""

    def test_seeded_reproducibility(self) -> None:
        """Test that the same seed yields the same rules."""
        rules1 = generate_rules(20, np.random.default_rng(42))
        rules2 = generate_rules(20, np.random.default_rng(42))

        assert [(r.pattern_key(), r.target) for r in rules1] == [
            (r.pattern_key(), r.target) for r in rules2
        ]

    def test_generated_rules_are_valid(self) -> None:
        """Test value ranges and zero weights of generated rules."""
        rules = generate_rules(200, np.random.default_rng(0))
        assert len(rules) == 200
        for rule in rules:
            assert rule.pattern.shape == (9,)
            assert np.all((rule.pattern >= 0) & (rule.pattern <= 3))
            assert 0 <= rule.target <= 8
            assert rule.weight == 0.0

    def test_all_values_are_sampled(self) -> None:
        """Test that sampling covers every pattern value and target."""
        rules = generate_rules(500, np.random.default_rng(1))
        pattern_values = set(np.concatenate([r.pattern for r in rules]).tolist())
        targets = {r.target for r in rules}
        assert pattern_values == {0, 1, 2, 3}
        assert targets == set(range(9))

    def test_zero_count(self) -> None:
        """Test that zero rules can be generated."""
        assert generate_rules(0, np.random.default_rng(0)) == []

    def test_negative_count_raises(self) -> None:
        """Test that a negative count is rejected."""
        with pytest.raises(ValueError):
            generate_rules(-1, np.random.default_rng(0))
