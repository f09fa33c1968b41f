"""
AI player for TicTacToe.
Uses negamax with alpha-beta pruning to choose the best move.
"""

from typing import Tuple

from .config import GameConfig
from .game_state import GameState, Player
from .evaluator import Evaluator
from .move_validator import MoveValidator
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe with a full-depth alpha-beta search.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Scores are always from the point of view of the player to move
    (negamax), so a child's score is negated on the way up.
    """

    def __init__(self):
        self.win_checker = WinChecker()
        self.move_validator = MoveValidator()
        self.evaluator = Evaluator()

        # Keep track of how many positions we've searched (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, game_state: GameState) -> int:
        """
        Get the best move for the player to move.

        Of several moves with the same score, the lowest index wins.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the best move, or GameConfig.NO_MOVE if the
            game is already over.
        """
        self.positions_evaluated = 0

        if self.win_checker.is_game_over(game_state.board):
            return GameConfig.NO_MOVE

        window = GameConfig.SEARCH_WINDOW
        best_move, _ = self._search(game_state, -window, window)
        return best_move

    def alpha_beta(self, game_state: GameState, alpha: int, beta: int) -> int:
        """
        Score a position for the player to move.

        Args:
            game_state: Position to score.
            alpha: Score the player to move can already guarantee.
            beta: Score above which the opponent avoids this position.

        Returns:
            The exact score if it lies inside (alpha, beta), otherwise
            the bound it fell past.
        """
        self.positions_evaluated += 1

        if self.win_checker.is_game_over(game_state.board):
            return self.evaluator.evaluate(game_state)

        _, score = self._search(game_state, alpha, beta)
        return score

    def _search(self, game_state: GameState, alpha: int, beta: int) -> Tuple[int, int]:
        """
        Try every legal move in order and keep the best one.

        Returns:
            (best_move, best_score). best_move stays NO_MOVE if no move
            raised the score above alpha.
        """
        best_move = GameConfig.NO_MOVE
        best_alpha = alpha

        for move in self.move_validator.get_valid_moves(game_state.board):
            child = game_state.make_move(move)
            score = -self.alpha_beta(child, -beta, -best_alpha)

            if score >= beta:
                # Too good: the opponent will not allow this position
                return move, beta
            if score > best_alpha:
                best_alpha = score
                best_move = move

        return best_move, best_alpha

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)

        if move == GameConfig.NO_MOVE:
            return "No moves available!"

        return f"Place {game_state.current_player.value} on square {move}"


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer()

    # Test 1: AI should block a winning move
    game = GameState.from_string("OO--X----", Player.X)
    print(f"\n{game}\nX must block O at 2")
    move = ai.get_best_move(game)
    print(f"AI's move: {move} ({ai.positions_evaluated} positions)")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = GameState.from_string("O-XOX----", Player.O)
    print(f"\n{game2}\nO can win with 6")
    move = ai.get_best_move(game2)
    print(f"AI's move: {move} ({ai.positions_evaluated} positions)")
    assert move == 6, f"Expected 6, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
