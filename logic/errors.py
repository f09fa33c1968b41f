"""
Errors raised by the TicTacToe game session.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidMoveError(TicTacToeError):
    """The move is out of range or the cell is not empty."""

    def __init__(self, move, message: Optional[str] = None):
        self.move = move
        super().__init__(message or f"Invalid move: {move}")


class GameOverError(InvalidMoveError):
    """A move was attempted after the game ended."""

    def __init__(self, move):
        super().__init__(move, "Game is already over. Please start a new game.")


class InvalidPlayerError(TicTacToeError):
    """The requested player is neither O nor X."""

    def __init__(self, player):
        self.player = player
        super().__init__(f"Invalid user. Allowed values are O and X: {player!r}")


class NoMoveAvailableError(TicTacToeError):
    """The engine was asked for a move on a finished board."""
