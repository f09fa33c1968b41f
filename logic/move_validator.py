"""
Move validator for TicTacToe.
Generates legal moves and validates moves typed by a user.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, INITIAL_STATE, cell_symbol
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on cells 0-8
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def is_legal_move(self, move: int, board: Board) -> bool:
        """True if the move is in range and the target cell is empty."""
        return 0 <= move < GameConfig.NUM_CELLS and board[move] is None

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all empty cells in ascending order.

        The order matters: the engine searches moves in this order and
        keeps the first of several equally good moves.

        Args:
            board: The game board.

        Returns:
            List of cell indexes, empty for a full board.
        """
        return [index for index, cell in enumerate(board) if cell is None]

    def validate_move(self, board: Board, move: int) -> ValidationResult:
        """
        Validate a move made by a user.

        Args:
            board: Current board.
            move: Cell index the user wants to play.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if self.win_checker.is_game_over(board):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= move < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        if board[move] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {move} is already occupied by {cell_symbol(board[move])}"
            )

        return ValidationResult(is_valid=True)


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    validator = MoveValidator()
    state = INITIAL_STATE.make_move(4)

    for move in (0, 4, 9):
        result = validator.validate_move(state.board, move)
        print(f"Move {move}: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(state.board)}")

    print("\nMoveValidator test done!")
