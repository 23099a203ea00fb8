"""Tic-Tac-Toe board state and win evaluation."""

from enum import IntEnum
from typing import List, Sequence, Tuple
import numpy as np
import numpy.typing as npt


class Cell(IntEnum):
    """
    Cell values shared by boards and rule patterns.

    WILDCARD only ever appears in rule patterns; a board cell is always
    EMPTY, PLAYER_ONE or PLAYER_TWO.
    """

    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    WILDCARD = 3


class Outcome(IntEnum):
    """Result of evaluating a board."""

    NONE = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    DRAW = 3


# Fixed scan order: rows, columns, diagonals
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def to_cell_array(values: Sequence[int]) -> npt.NDArray[np.int_]:
    """
    Convert cell values to an integer array without truncating.

    Raises:
        ValueError: If any value is not an integer (e.g. 1.7 or 'x')
    """
    raw = np.asarray(values)
    if raw.dtype.kind == "f":
        if not np.all(np.isfinite(raw)) or np.any(raw != np.floor(raw)):
            raise ValueError("Cell values must be integers")
    elif raw.dtype.kind not in "iu":
        raise ValueError("Cell values must be integers")
    return raw.astype(np.int_)


class Board:
    """
    Tic-Tac-Toe board used by the game simulator.

    State representation:
        - flattened 9-element array in row-major order
        - 0 = empty, 1 = player one, 2 = player two
        - 0 1 2
          3 4 5
          6 7 8

    The turn counter is advanced by the simulator before each move attempt,
    so it counts attempted turns, including turns where no move was made.
    """

    def __init__(self) -> None:
        """Create an empty board."""
        self.cells: npt.NDArray[np.int_] = np.zeros(9, dtype=np.int_)
        self.turn: int = 0

    @classmethod
    def from_cells(cls, cells: Sequence[int], turn: int = 0) -> "Board":
        """
        Build a board from explicit cell values.

        Args:
            cells: Nine values, each EMPTY, PLAYER_ONE or PLAYER_TWO
            turn: Turn counter to start from

        Returns:
            New Board instance
        """
        values = to_cell_array(cells)
        if values.shape != (9,):
            raise ValueError(f"Board needs exactly 9 cells, got {values.size}")
        if np.any((values < Cell.EMPTY) | (values > Cell.PLAYER_TWO)):
            raise ValueError("Board cells must be 0 (empty), 1 or 2")
        board = cls()
        board.cells = values.copy()
        board.turn = turn
        return board

    def reset(self) -> None:
        """Clear every cell and rewind the turn counter."""
        self.cells = np.zeros(9, dtype=np.int_)
        self.turn = 0

    def place(self, index: int, mark: int) -> None:
        """
        Write a player's mark to a cell.

        Args:
            index: Board position (0-8)
            mark: Cell.PLAYER_ONE or Cell.PLAYER_TWO

        Raises:
            ValueError: If the position is out of range or already occupied,
                or the mark is not a player value
        """
        if index < 0 or index > 8:
            raise ValueError(f"Position {index} is out of bounds")
        if mark not in (Cell.PLAYER_ONE, Cell.PLAYER_TWO):
            raise ValueError(f"Invalid player mark: {mark}")
        if self.cells[index] != Cell.EMPTY:
            raise ValueError(f"Position {index} is already occupied")
        self.cells[index] = mark

    def legal_actions(self) -> List[int]:
        """Return the list of empty positions."""
        return [i for i in range(9) if self.cells[i] == Cell.EMPTY]

    def is_full(self) -> bool:
        """Check whether every cell is occupied."""
        return not np.any(self.cells == Cell.EMPTY)

    def copy(self) -> "Board":
        """Return an independent copy of this board."""
        return Board.from_cells(self.cells, turn=self.turn)

    def state_key(self) -> str:
        """Return the board as a 9-digit string, e.g. '120000000'."""
        return "".join(str(int(x)) for x in self.cells)

    def render(self) -> str:
        """
        Render the current board state as a string.

        Returns:
            String representation of the board
        """
        symbols = {Cell.EMPTY: ".", Cell.PLAYER_ONE: "X", Cell.PLAYER_TWO: "O"}
        board_2d = self.cells.reshape(3, 3)

        lines = []
        lines.append("  0 1 2")
        for i, row in enumerate(board_2d):
            line = f"{i} " + " ".join(symbols[Cell(int(cell))] for cell in row)
            lines.append(line)

        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(cells={self.state_key()}, turn={self.turn})"


def evaluate_winner(board: Board) -> Outcome:
    """
    Scan the eight winning lines for a completed line.

    Lines are checked in WINNING_LINES order and the first uniformly
    non-empty line decides the result. A full board with no completed line
    is reported as Outcome.NONE; classifying it as a draw is left to the
    caller.

    Args:
        board: Board to inspect (not modified)

    Returns:
        Outcome.PLAYER_ONE, Outcome.PLAYER_TWO or Outcome.NONE
    """
    cells = board.cells
    for a, b, c in WINNING_LINES:
        value = cells[a]
        if value != Cell.EMPTY and value == cells[b] and value == cells[c]:
            return Outcome(int(value))
    return Outcome.NONE
