"""Protocol for Tic-Tac-Toe agents driven by the game simulator."""

from typing import Optional, Protocol

from rule_tictactoe.board import Board


class Agent(Protocol):
    """Protocol for Tic-Tac-Toe agents."""

    name: str

    def select_move(self, board: Board, mark: int) -> Optional[int]:
        """
        Attempt a move on the board for the given player.

        The agent writes its mark to the board itself. Returning None means
        the agent passed and the board is unchanged.

        Args:
            board: Current board, mutated in place when a move is made
            mark: Cell.PLAYER_ONE or Cell.PLAYER_TWO

        Returns:
            Cell that was played, or None if no move was made
        """
        ...

    def reset(self) -> None:
        """
        Reset agent state (if any) at the start of a new game.

        Optional for stateless agents.
        """
        ...
