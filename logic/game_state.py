"""
Game state for TicTacToe.
Holds the board and the player to move, and knows how to apply a move.
"""

from enum import Enum
from typing import Optional, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import InvalidPlayerError


class Player(Enum):
    """The two players in the game. O always moves first."""
    O = "O"
    X = "X"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.X if self == Player.O else Player.O

    @classmethod
    def from_symbol(cls, symbol: Union[str, "Player"]) -> "Player":
        """
        Parse a player symbol typed by a user.

        Accepts "O", "X" (any case), "0" as an alias for noughts,
        or a Player instance.

        Raises:
            InvalidPlayerError: if the symbol names no player.
        """
        if isinstance(symbol, Player):
            return symbol
        if isinstance(symbol, str):
            text = symbol.strip().upper()
            if text == "0":
                text = "O"
            for player in cls:
                if player.value == text:
                    return player
        raise InvalidPlayerError(symbol)


# A cell is None when empty, otherwise the player occupying it
Cell = Optional[Player]
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * GameConfig.NUM_CELLS


def cell_symbol(cell: Cell) -> str:
    """Get the printable symbol of a cell."""
    return GameConfig.EMPTY_SYMBOL if cell is None else cell.value


def board_from_string(text: str) -> Board:
    """
    Build a board from compact notation.

    Whitespace is ignored, so "O-X OX- ---" and "O-XOX----" are the same
    board. "-" or "." mark an empty cell.
    """
    symbols = [ch for ch in text if not ch.isspace()]
    if len(symbols) != GameConfig.NUM_CELLS:
        raise ValueError(
            f"Board needs {GameConfig.NUM_CELLS} cells, got {len(symbols)}: {text!r}"
        )

    board = []
    for ch in symbols:
        if ch in (GameConfig.EMPTY_SYMBOL, "."):
            board.append(None)
        else:
            try:
                board.append(Player.from_symbol(ch))
            except InvalidPlayerError:
                raise ValueError(f"Unknown cell symbol {ch!r} in {text!r}") from None
    return tuple(board)


def board_to_string(board: Board) -> str:
    """Render a board in compact notation, e.g. "O-XOX----"."""
    return "".join(cell_symbol(cell) for cell in board)


def board_rows(board: Board) -> Tuple[Tuple[Cell, ...], ...]:
    """Split a board into its three rows."""
    size = GameConfig.BOARD_SIZE
    return tuple(tuple(board[i:i + size]) for i in range(0, len(board), size))


@dataclass(frozen=True)
class GameState:
    """
    A position in the game: the board plus the player whose turn it is.

    GameState is immutable. make_move() returns a new state, so search
    nodes never share a board.
    """

    board: Board = field(default=EMPTY_BOARD)
    current_player: Player = Player.O

    def __post_init__(self):
        if len(self.board) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"Board needs {GameConfig.NUM_CELLS} cells, got {len(self.board)}"
            )
        for index, cell in enumerate(self.board):
            if cell is not None and not isinstance(cell, Player):
                raise ValueError(f"Cell {index} must be None or a Player, got {cell!r}")
        if not isinstance(self.current_player, Player):
            raise ValueError(f"current_player must be a Player, got {self.current_player!r}")

        # Accept lists from callers but store a tuple
        if not isinstance(self.board, tuple):
            object.__setattr__(self, "board", tuple(self.board))

    @classmethod
    def from_string(cls, text: str, current_player: Player = Player.O) -> "GameState":
        """Build a state from compact board notation."""
        return cls(board_from_string(text), current_player)

    def make_move(self, move: int) -> "GameState":
        """
        Place the current player's symbol on a cell and pass the turn.

        The move must already have been checked with is_legal_move();
        occupancy is not checked again here.

        Args:
            move: Cell index (0-8).

        Returns:
            The new GameState.
        """
        # Negative indexes would wrap around silently
        if not 0 <= move < GameConfig.NUM_CELLS:
            raise IndexError(f"Cell index out of range: {move}")

        board = list(self.board)
        board[move] = self.current_player
        return GameState(tuple(board), self.current_player.opposite())

    def count_pieces(self) -> int:
        """Number of occupied cells."""
        return sum(1 for cell in self.board if cell is not None)

    def __str__(self) -> str:
        return f"{board_to_string(self.board)} ({self.current_player.value} to move)"


INITIAL_STATE = GameState()


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    state = INITIAL_STATE
    for move in (4, 0, 2, 6, 3):
        print(f"{state.current_player.value} moves to {move}")
        state = state.make_move(move)
        print(f"  {state}")

    assert state == GameState.from_string("X-OOO-X--", Player.X)
    print("\nGameState test done!")
