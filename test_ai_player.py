"""
Tests for the alpha-beta AI player.
"""

import random
from functools import lru_cache

import pytest

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.evaluator import Evaluator
from logic.game_state import GameState, Player, INITIAL_STATE
from logic.move_validator import MoveValidator
from logic.session import play_self_game
from logic.win_checker import GameResult, WinChecker


checker = WinChecker()
validator = MoveValidator()
evaluator = Evaluator()

WINDOW = GameConfig.SEARCH_WINDOW

# O to move; O completes the column 0-3-6 by playing 6
ONE_LEFT_STATE = GameState.from_string("O-XOX----", Player.O)


@lru_cache(maxsize=None)
def negamax(state: GameState) -> int:
    """Plain negamax without pruning, as a reference."""
    if checker.is_game_over(state.board):
        return evaluator.evaluate(state)
    return max(-negamax(state.make_move(m)) for m in validator.get_valid_moves(state.board))


def reachable_states():
    """Every position reachable from the initial state by legal play."""
    seen = {INITIAL_STATE}
    stack = [INITIAL_STATE]
    while stack:
        state = stack.pop()
        if checker.is_game_over(state.board):
            continue
        for move in validator.get_valid_moves(state.board):
            child = state.make_move(move)
            if child not in seen:
                seen.add(child)
                stack.append(child)
    return seen


@pytest.fixture
def ai():
    return AIPlayer()


def test_takes_the_win(ai):
    assert ai.get_best_move(ONE_LEFT_STATE) == 6
    assert ai.alpha_beta(ONE_LEFT_STATE, -WINDOW, WINDOW) == 100


def test_blocks_the_win(ai):
    # X to move; O threatens 0-1-2
    state = GameState.from_string("OO--X----", Player.X)
    assert ai.get_best_move(state) == 2


def test_prefers_lowest_of_equal_moves(ai):
    # O wins with 2 (row) or 6 (column); 2 comes first
    state = GameState.from_string("OO-OXX--X", Player.O)
    assert ai.get_best_move(state) == 2


def test_opening_move_is_lowest_index(ai):
    # Every opening draws, so the first square wins the tie
    assert ai.get_best_move(INITIAL_STATE) == 0
    assert ai.alpha_beta(INITIAL_STATE, -WINDOW, WINDOW) == 0


def test_no_move_on_finished_board(ai):
    assert ai.get_best_move(GameState.from_string("OXOXOXXOX", Player.O)) == GameConfig.NO_MOVE
    assert ai.get_best_move(GameState.from_string("OOOXX----", Player.X)) == GameConfig.NO_MOVE
    assert ai.get_move_suggestion(GameState.from_string("OOOXX----", Player.X)) == "No moves available!"


def test_move_suggestion(ai):
    assert ai.get_move_suggestion(ONE_LEFT_STATE) == "Place O on square 6"


def test_positions_evaluated_resets_per_search(ai):
    ai.get_best_move(INITIAL_STATE)
    first = ai.positions_evaluated
    assert first > 0

    ai.get_best_move(INITIAL_STATE)
    assert ai.positions_evaluated == first


def test_best_move_scores_best(ai):
    for state in random.Random(3).sample(sorted(reachable_states(), key=str), 200):
        if checker.is_game_over(state.board):
            continue
        move = ai.get_best_move(state)
        assert validator.is_legal_move(move, state.board)
        assert -negamax(state.make_move(move)) == negamax(state)


def test_alpha_beta_matches_negamax(ai):
    states = random.Random(7).sample(sorted(reachable_states(), key=str), 150)
    states.append(INITIAL_STATE)

    for state in states:
        value = negamax(state)
        for alpha, beta in [(-WINDOW, WINDOW), (-100, 100), (value - 1, value + 1)]:
            assert ai.alpha_beta(state, alpha, beta) == value, (str(state), alpha, beta)


def test_self_play_is_a_draw():
    state, moves = play_self_game()
    assert checker.check_result(state.board) == GameResult.DRAW
    assert len(moves) == 9


@pytest.mark.parametrize("engine", list(Player))
def test_never_loses_against_any_opponent(engine):
    ai = AIPlayer()
    replies = {}

    def play_out(state):
        if checker.is_game_over(state.board):
            assert checker.check_result(state.board).winner != engine.opposite(), str(state)
            return
        if state.current_player == engine:
            if state not in replies:
                replies[state] = ai.get_best_move(state)
            play_out(state.make_move(replies[state]))
        else:
            for move in validator.get_valid_moves(state.board):
                play_out(state.make_move(move))

    play_out(INITIAL_STATE)
