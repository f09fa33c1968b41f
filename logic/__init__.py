"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import (
    TicTacToeError,
    InvalidMoveError,
    GameOverError,
    InvalidPlayerError,
    NoMoveAvailableError,
)
from .game_state import GameState, Player, INITIAL_STATE, board_from_string, board_to_string
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, GameResult
from .evaluator import Evaluator
from .ai_player import AIPlayer
from .session import GameSession, PlayedMove, play_self_game
