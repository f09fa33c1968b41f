"""
Win checker for TicTacToe.
Checks if a player has a line, if the board is full, and who won.
"""

from enum import Enum
from typing import Optional, Tuple

from .game_state import Board, Player, board_from_string


class GameResult(Enum):
    """Outcome of a game, with the message shown to the user."""
    O_WINS = "The winner is O."
    X_WINS = "The winner is X."
    DRAW = "The game is drawn."
    IN_PROGRESS = "The game is not finished."

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or unfinished game."""
        if self == GameResult.O_WINS:
            return Player.O
        if self == GameResult.X_WINS:
            return Player.X
        return None

    @property
    def is_over(self) -> bool:
        return self != GameResult.IN_PROGRESS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as cell indexes
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_line(self, player: Player, board: Board) -> bool:
        """
        Check if a player owns a complete line anywhere on the board.

        Args:
            player: The player to check.
            board: The game board.

        Returns:
            True if any row, column or diagonal is all `player`.
        """
        return any(
            board[a] == board[b] == board[c] == player
            for a, b, c in self.WINNING_LINES
        )

    def is_full(self, board: Board) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for cell in board)

    def is_game_over(self, board: Board) -> bool:
        """True if the board is full or either player has a line."""
        return (
            self.is_full(board)
            or self.has_line(Player.O, board)
            or self.has_line(Player.X, board)
        )

    def check_result(self, board: Board) -> GameResult:
        """
        Get the result of the game on this board.

        O's line is checked before X's; legal play never produces both.
        """
        if self.has_line(Player.O, board):
            return GameResult.O_WINS
        if self.has_line(Player.X, board):
            return GameResult.X_WINS
        if self.is_full(board):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line as a tuple of indexes, or None.
        """
        for a, b, c in self.WINNING_LINES:
            if board[a] is not None and board[a] == board[b] == board[c]:
                return (a, b, c)
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    cases = [
        ("X-XOOO---", GameResult.O_WINS),    # horizontal
        ("X-O--OX-O", GameResult.O_WINS),    # vertical
        ("X-O-X-OOX", GameResult.X_WINS),    # diagonal
        ("OX--X----", GameResult.IN_PROGRESS),
        ("OXOXOXXOX", GameResult.DRAW),
    ]

    for text, expected in cases:
        result = checker.check_result(board_from_string(text))
        print(f"{text}: {result.name}")
        assert result == expected

    print("\nWinChecker test done!")
