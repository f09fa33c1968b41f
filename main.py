"""
Main script for TicTacToe.

Play TicTacToe against the computer, either in the Tkinter UI (default)
or in the console with --no-ui. The squares are numbered:

    0 1 2
    3 4 5
    6 7 8
"""

import argparse
from typing import List, Optional

from colorama import init, Fore, Style

from logic.config import GameConfig
from logic.errors import TicTacToeError
from logic.game_state import GameState, Player, cell_symbol, board_rows
from logic.session import GameSession, PlayedMove, play_self_game
from logic.win_checker import GameResult, WinChecker

init(autoreset=True)


SYMBOL_COLORS = {
    Player.O: Fore.GREEN,
    Player.X: Fore.RED,
}


def format_board(game_state: GameState) -> str:
    """Render the board as three rows of three colored symbols."""
    lines = []
    for row in board_rows(game_state.board):
        cells = []
        for cell in row:
            color = SYMBOL_COLORS.get(cell, Style.DIM)
            cells.append(f"{color}{cell_symbol(cell)}{Style.RESET_ALL}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


class TicTacToeConsole:
    """
    Console front end for a game against the AI.

    Commands at the prompt:
    - 0-8: make a move
    - h: ask the AI for a hint
    - n: start a new game
    - q: quit
    """

    def __init__(self, user: Player = Player.O):
        self.session = GameSession(user)
        self.is_running = False

        print("\n" + "="*40)
        print("   TicTacToe")
        print(f"   You play: {self.session.user.value}")
        print(f"   Computer plays: {self.session.engine_player.value}")
        print("="*40)
        print("\nSquares are numbered:\n0 1 2\n3 4 5\n6 7 8")

    def start(self):
        """Start a new game."""
        print(f"\n{Style.BRIGHT}New game")
        self._report_moves(self.session.start())
        self._print_board()

    def run(self):
        """Play until the user quits."""
        self.is_running = True
        self.start()

        while self.is_running:
            command = self._prompt()
            if command is None or command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "n":
                self.start()
            elif command == "h":
                print(self.session.ai.get_move_suggestion(self.session.game_state))
            else:
                self.move(command)

    def move(self, text: str):
        """
        Make the user's move given as text, then the AI's answer.

        Invalid input is reported and leaves the game unchanged.
        """
        try:
            square = int(text)
        except ValueError:
            print(f"{Fore.RED}Please type a square 0-{GameConfig.NUM_CELLS - 1}, h, n or q.")
            return

        try:
            made = self.session.play_user_move(square)
        except TicTacToeError as e:
            print(f"{Fore.RED}{e}")
            return

        self._report_moves(made)
        self._print_board()

        if self.session.is_over:
            self._show_game_result()

    def _prompt(self) -> Optional[str]:
        try:
            return input(f"\n{self.session.user.value} to move> ").strip().lower()
        except EOFError:
            return None

    def _report_moves(self, moves: List[PlayedMove]):
        for played in moves:
            who = "Engine" if played.by_engine else "User"
            print(f"{who} move: {played.square}")

        ai = self.session.ai
        if GameConfig.SHOW_SEARCH_STATS and any(m.by_engine for m in moves):
            print(f"{Style.DIM}(searched {ai.positions_evaluated} positions)")

    def _print_board(self):
        print(format_board(self.session.game_state))

    def _show_game_result(self):
        """Show the final game result."""
        result = self.session.result
        print(f"\n{Style.BRIGHT}Game over. {result.value}")

        if result == GameResult.DRAW:
            print("It's a draw! Good game!")
        elif result.winner == self.session.user:
            print(f"{Fore.GREEN}Congratulations! You won!")
        else:
            print(f"{Fore.RED}Computer wins! Better luck next time!")
        print("Type n for a new game or q to quit.")


def run_self_play():
    """Let the AI play itself and print the game."""
    print("\nAI vs AI")
    state, moves = play_self_game()
    print(f"Moves: {' '.join(str(m) for m in moves)}")
    print(format_board(state))
    print(f"\nGame over. {WinChecker().check_result(state.board).value}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against a perfect AI")
    parser.add_argument(
        "--play-as",
        default="O",
        help="Symbol you play: O moves first, X moves second (default: O)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of the Tkinter window"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Watch the AI play against itself"
    )

    args = parser.parse_args()

    if args.self_play:
        run_self_play()
        return

    try:
        user = Player.from_symbol(args.play_as)
    except TicTacToeError as e:
        parser.error(str(e))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(user=user)
        ui.run()
        return

    console = TicTacToeConsole(user)
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
