"""Game simulation between two agents."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from rule_tictactoe.agents.base import Agent
from rule_tictactoe.board import Board, Cell, Outcome, evaluate_winner

logger = logging.getLogger(__name__)

DEFAULT_TURN_CAP = 10


class SimulatorState(str, Enum):
    """Game loop states."""

    AWAITING_MOVE = "awaiting_move"
    TERMINAL = "terminal"


@dataclass
class GameResult:
    """Result of one simulated game."""

    outcome: Outcome
    turns: int
    board: Board
    moves: List[Tuple[int, int, Optional[int]]] = field(default_factory=list)
    reached_turn_cap: bool = False

    @property
    def moves_made(self) -> int:
        return sum(1 for _, _, cell in self.moves if cell is not None)

    @property
    def passed_turns(self) -> int:
        return sum(1 for _, _, cell in self.moves if cell is None)


class GameSimulator:
    """
    Plays games between two agents on a board it owns.

    Each turn the turn counter is advanced first, then the active player
    (player one on odd turns, player two on even turns) attempts a move and
    the board is evaluated, whether or not a move was made. The loop runs
    while there is no winner and the turn counter is below the cap. A game
    that reaches the cap without a winner is classified as a draw.
    """

    def __init__(
        self,
        player_one: Agent,
        player_two: Agent,
        turn_cap: int = DEFAULT_TURN_CAP,
    ) -> None:
        """
        Initialize the simulator.

        Args:
            player_one: Agent playing Cell.PLAYER_ONE (moves first)
            player_two: Agent playing Cell.PLAYER_TWO
            turn_cap: Maximum number of turns per game
        """
        if turn_cap < 1:
            raise ValueError("turn_cap must be at least 1")
        self.player_one = player_one
        self.player_two = player_two
        self.turn_cap = turn_cap
        self.board = Board()
        self.state = SimulatorState.AWAITING_MOVE

    def active_player(self, turn: int) -> Tuple[Agent, int]:
        """Return the agent and mark that play on the given turn."""
        if turn % 2 == 1:
            return self.player_one, Cell.PLAYER_ONE
        return self.player_two, Cell.PLAYER_TWO

    def play_game(self) -> GameResult:
        """
        Play one game from an empty board.

        Returns:
            GameResult with the classified outcome
        """
        self.board.reset()
        self.state = SimulatorState.AWAITING_MOVE
        logger.debug(
            "Simulating game %s vs %s", self.player_one.name, self.player_two.name
        )

        moves: List[Tuple[int, int, Optional[int]]] = []
        winner = Outcome.NONE

        while self.state is SimulatorState.AWAITING_MOVE:
            self.board.turn += 1
            agent, mark = self.active_player(self.board.turn)
            logger.debug("Turn %d, current player %s", self.board.turn, agent.name)

            cell = agent.select_move(self.board, mark)
            moves.append((self.board.turn, mark, cell))
            logger.debug("Status after move: %s", self.board.state_key())

            winner = evaluate_winner(self.board)
            if winner is not Outcome.NONE or self.board.turn >= self.turn_cap:
                self.state = SimulatorState.TERMINAL

        reached_cap = winner is Outcome.NONE
        outcome = Outcome.DRAW if reached_cap else winner
        if reached_cap:
            logger.debug("Turn cap reached without a winner, draw")
        else:
            logger.debug("We have a winner: %s", outcome.name)

        return GameResult(
            outcome=outcome,
            turns=self.board.turn,
            board=self.board.copy(),
            moves=moves,
            reached_turn_cap=reached_cap,
        )


def run_games(
    player_one: Agent,
    player_two: Agent,
    num_games: int,
    turn_cap: int = DEFAULT_TURN_CAP,
) -> Dict[str, Any]:
    """
    Play a batch of games between two agents.

    The board is reset for each game; rule weights held by the agents carry
    over from one game to the next.

    Args:
        player_one: Agent playing first
        player_two: Agent playing second
        num_games: Number of games to play
        turn_cap: Maximum number of turns per game

    Returns:
        Dictionary with simulation results
    """
    simulator = GameSimulator(player_one, player_two, turn_cap=turn_cap)

    player_one_wins = 0
    player_two_wins = 0
    draws = 0
    total_turns = 0
    total_moves = 0
    passed_turns = 0

    for _ in range(num_games):
        player_one.reset()
        player_two.reset()
        result = simulator.play_game()
        total_turns += result.turns
        total_moves += result.moves_made
        passed_turns += result.passed_turns

        if result.outcome is Outcome.PLAYER_ONE:
            player_one_wins += 1
        elif result.outcome is Outcome.PLAYER_TWO:
            player_two_wins += 1
        else:
            draws += 1

    def rate(value: int) -> float:
        return value / num_games if num_games > 0 else 0.0

    results = {
        "player_one_name": player_one.name,
        "player_two_name": player_two.name,
        "num_games": num_games,
        "player_one_wins": player_one_wins,
        "player_two_wins": player_two_wins,
        "draws": draws,
        "player_one_win_rate": rate(player_one_wins),
        "player_two_win_rate": rate(player_two_wins),
        "draw_rate": rate(draws),
        "avg_turns_per_game": total_turns / num_games if num_games > 0 else 0.0,
        "avg_moves_per_game": total_moves / num_games if num_games > 0 else 0.0,
        "passed_turns": passed_turns,
    }

    logger.info(
        "Simulated %d games: %s %d wins, %s %d wins, %d draws",
        num_games,
        player_one.name,
        player_one_wins,
        player_two.name,
        player_two_wins,
        draws,
    )
    return results


def print_simulation_results(
    results: Dict[str, Any], console: Optional[Console] = None
) -> None:
    """
    Pretty print simulation results.

    Args:
        results: Results dictionary from run_games
        console: Console to print to (a new one if not given)
    """
    console = console or Console()

    table = Table(title=f"{results['player_one_name']} vs {results['player_two_name']}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Games played", str(results["num_games"]))
    table.add_row(
        f"{results['player_one_name']} wins (X)",
        f"{results['player_one_wins']} ({results['player_one_win_rate']:.1%})",
    )
    table.add_row(
        f"{results['player_two_name']} wins (O)",
        f"{results['player_two_wins']} ({results['player_two_win_rate']:.1%})",
    )
    table.add_row("Draws", f"{results['draws']} ({results['draw_rate']:.1%})")
    table.add_row("Average turns per game", f"{results['avg_turns_per_game']:.1f}")
    table.add_row("Average moves per game", f"{results['avg_moves_per_game']:.1f}")
    table.add_row("Passed turns", str(results["passed_turns"]))

    console.print(table)
