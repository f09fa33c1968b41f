"""
Game configuration for TicTacToe.
Constants shared by the board model, the evaluator and the search engine.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, indexed 0-8 row by row
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # Symbol printed for an empty cell
    EMPTY_SYMBOL = "-"

    # ==================== SEARCH SETTINGS ====================
    # Score for a completed line (negated for the opponent's line)
    WIN_SCORE = 100

    # Root window for alpha-beta, wider than any score
    SEARCH_WINDOW = 999

    # Returned by the engine when there is nothing to play
    NO_MOVE = -1

    # ==================== DEBUG SETTINGS ====================
    SHOW_SEARCH_STATS = True
