"""
Game session for TicTacToe.
Owns the current game between a user and the AI, and applies moves to it.
"""

from typing import List, Optional, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import GameOverError, InvalidMoveError, NoMoveAvailableError
from .game_state import Board, GameState, Player, INITIAL_STATE
from .move_validator import MoveValidator
from .win_checker import GameResult, WinChecker
from .ai_player import AIPlayer


@dataclass(frozen=True)
class PlayedMove:
    """A move that was made in the game."""
    player: Player          # Who made the move
    square: int             # Cell index (0-8)
    by_engine: bool = False


@dataclass
class GameSession:
    """
    One game between a user and the AI.

    Game flow:
    1. start() resets the board; if the user plays X the AI opens as O
    2. play_user_move() applies the user's move and the AI's answer
    3. Repeat until someone wins or it's a draw

    Invalid moves raise and leave the session unchanged.
    """

    user: Player = Player.O
    ai: AIPlayer = field(default_factory=AIPlayer)
    game_state: GameState = INITIAL_STATE
    history: List[PlayedMove] = field(default_factory=list)

    def __post_init__(self):
        self.user = Player.from_symbol(self.user)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def engine_player(self) -> Player:
        return self.user.opposite()

    @property
    def board(self) -> Board:
        return self.game_state.board

    @property
    def result(self) -> GameResult:
        return self.win_checker.check_result(self.board)

    @property
    def is_over(self) -> bool:
        return self.win_checker.is_game_over(self.board)

    @property
    def last_move(self) -> Optional[PlayedMove]:
        return self.history[-1] if self.history else None

    def start(self) -> List[PlayedMove]:
        """
        Start a new game.

        Returns:
            The moves made by the AI while starting (one opening move
            when the user plays X, otherwise none).
        """
        self.game_state = INITIAL_STATE
        self.history = []

        if self.game_state.current_player == self.engine_player:
            return [self.play_engine_move()]
        return []

    def play_user_move(self, move: int) -> List[PlayedMove]:
        """
        Make the user's move, then let the AI answer.

        Args:
            move: Cell index (0-8).

        Returns:
            The moves made: the user's, followed by the AI's unless the
            user's move ended the game.

        Raises:
            GameOverError: if the game is already over.
            InvalidMoveError: if the move is out of range or taken.
        """
        if self.is_over:
            raise GameOverError(move)

        result = self.validator.validate_move(self.board, move)
        if not result.is_valid:
            raise InvalidMoveError(move, result.error_message)

        if self.game_state.current_player != self.user:
            raise InvalidMoveError(move, f"It's not {self.user.value}'s turn!")

        made = [self._apply(move, by_engine=False)]
        if not self.is_over:
            made.append(self.play_engine_move())
        return made

    def play_engine_move(self) -> PlayedMove:
        """
        Let the AI move for whoever is to move.

        Raises:
            NoMoveAvailableError: if the game is already over.
        """
        move = self.ai.get_best_move(self.game_state)
        if move == GameConfig.NO_MOVE:
            raise NoMoveAvailableError(
                f"No move available on board {self.game_state}"
            )
        return self._apply(move, by_engine=True)

    def _apply(self, move: int, by_engine: bool) -> PlayedMove:
        played = PlayedMove(self.game_state.current_player, move, by_engine)
        self.game_state = self.game_state.make_move(move)
        self.history.append(played)
        return played


def play_self_game(ai: Optional[AIPlayer] = None) -> Tuple[GameState, List[int]]:
    """
    Let the AI play both sides from the initial position.

    Returns:
        (final_state, moves) where moves lists every cell played in order.
    """
    ai = ai or AIPlayer()
    win_checker = WinChecker()

    state = INITIAL_STATE
    moves = []
    while not win_checker.is_game_over(state.board):
        move = ai.get_best_move(state)
        state = state.make_move(move)
        moves.append(move)
    return state, moves
