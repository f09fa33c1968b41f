"""
TicTacToe UI
A graphical interface for playing TicTacToe against the AI using Tkinter.

Shows:
- The 3x3 board (click an empty square to move)
- Game status and whose turn it is
- The AI's last move and how many positions it searched
- Which symbol the human plays
"""

import tkinter as tk
from tkinter import ttk
from typing import List

from logic.errors import TicTacToeError
from logic.game_state import Player
from logic.session import GameSession, PlayedMove
from logic.win_checker import GameResult


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WIN_COLOR = '#b45309'
    SYMBOL_COLORS = {
        Player.O: '#10b981',
        Player.X: '#f87171',
    }

    def __init__(self, user: Player = Player.O):
        """Initialize the UI."""
        self.session = GameSession(user)
        self.board_cells: List[tk.Button] = []

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=self.BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.BG_COLOR)
        style.configure('TLabel', background=self.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        ttk.Label(main_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        for square in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=self.CELL_COLOR,
                fg='white',
                activebackground='#0f3460',
                relief='ridge',
                borderwidth=2,
                command=lambda s=square: self._on_cell_click(s)
            )
            cell.grid(row=square // 3, column=square % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(main_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.engine_move_label = ttk.Label(main_frame, text="", style='Move.TLabel')
        self.engine_move_label.pack(pady=5)

        # Symbol selection
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(main_frame, text="⚙️ You Play", style='Title.TLabel').pack()

        symbol_frame = ttk.Frame(main_frame)
        symbol_frame.pack(pady=10)

        self.symbol_buttons = {}
        for player in Player:
            btn = tk.Button(
                symbol_frame,
                text=f"{player.value} ({'first' if player == Player.O else 'second'})",
                font=('Segoe UI', 10, 'bold'),
                width=10,
                command=lambda p=player: self._set_user(p)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.symbol_buttons[player] = btn
        self._update_symbol_buttons()

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_user(self, player: Player):
        """Switch the human's symbol and start over."""
        if player == self.session.user:
            return
        self.session = GameSession(player)
        self._update_symbol_buttons()
        print(f"User plays: {player.value}")
        self._new_game()

    def _update_symbol_buttons(self):
        for player, btn in self.symbol_buttons.items():
            if player == self.session.user:
                btn.configure(bg=self.SYMBOL_COLORS[player], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _new_game(self):
        """Reset the board and start a new game."""
        print("New game")
        made = self.session.start()
        self._show_engine_move(made)
        self._update_board_display()
        self._update_game_info()

    def _on_cell_click(self, square: int):
        """Handle a click on a board square."""
        try:
            made = self.session.play_user_move(square)
        except TicTacToeError as e:
            print(e)
            self.status_label.configure(text=str(e))
            return

        print(f"User move: {square}")
        self._show_engine_move(made)
        self._update_board_display()
        self._update_game_info()

    def _show_engine_move(self, made: List[PlayedMove]):
        engine_moves = [m for m in made if m.by_engine]
        if not engine_moves:
            self.engine_move_label.configure(text="Waiting for you...")
            return

        square = engine_moves[-1].square
        searched = self.session.ai.positions_evaluated
        print(f"Engine move: {square}")
        self.engine_move_label.configure(
            text=f"🤖 Computer took square {square} ({searched} positions)"
        )

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.session.board
        winning_line = self.session.win_checker.get_winning_line(board) or ()

        for square, cell in enumerate(board):
            button = self.board_cells[square]
            bg = self.WIN_COLOR if square in winning_line else self.CELL_COLOR

            if cell is None:
                button.configure(text="", bg=bg)
            else:
                button.configure(text=cell.value, bg=bg, fg=self.SYMBOL_COLORS[cell])

    def _update_game_info(self):
        """Update game status labels."""
        result = self.session.result

        if result.is_over:
            if result == GameResult.DRAW:
                self.status_label.configure(text="🤝 It's a DRAW!")
            elif result.winner == self.session.user:
                self.status_label.configure(text="🏆 You WIN!")
            else:
                self.status_label.configure(text="🏆 Computer WINS!")
            self.turn_label.configure(text="Game Over")
        else:
            current = self.session.game_state.current_player
            who = "You" if current == self.session.user else "Computer"
            self.turn_label.configure(text=f"Turn: {who} ({current.value})")
            self.status_label.configure(text="Game in progress")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start a game and run the UI main loop."""
        self._new_game()
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--play-as",
        default="O",
        help="Symbol you play: O moves first, X moves second"
    )

    args = parser.parse_args()

    try:
        player = Player.from_symbol(args.play_as)
    except TicTacToeError as e:
        parser.error(str(e))

    print("\n" + "="*40)
    print("   TicTacToe UI")
    print("="*40)
    print(f"   You play: {player.value}")
    print("="*40 + "\n")

    ui = TicTacToeUI(user=player)
    ui.run()


if __name__ == "__main__":
    main()
