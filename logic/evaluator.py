"""
Evaluator for finished TicTacToe positions.
"""

from .config import GameConfig
from .game_state import GameState
from .win_checker import WinChecker


class Evaluator:
    """
    Scores a finished position from the point of view of the player to move.

    +WIN_SCORE if that player has a line, -WIN_SCORE if the opponent has
    one, 0 otherwise. Only meaningful on a board where the game is over.
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def evaluate(self, game_state: GameState) -> int:
        board = game_state.board
        player = game_state.current_player

        # Player to move is checked first. After legal play only the
        # previous mover can own a line.
        if self.win_checker.has_line(player, board):
            return GameConfig.WIN_SCORE
        if self.win_checker.has_line(player.opposite(), board):
            return -GameConfig.WIN_SCORE
        return 0
