"""
Tests for input_adapter.py - keyboard / touch translation.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Snake, GameState,
    UP, DOWN, LEFT, RIGHT,
    NOT_STARTED, RUNNING, PAUSED, GAME_OVER,
)
from game_engine import SnakeGame
from input_adapter import (
    START, PAUSE_TOGGLE, RESET, SET_DIRECTION,
    command_for_key,
    dispatch,
    handle_key,
    handle_touch,
    show_touch_controls,
)


@pytest.fixture
def game():
    return SnakeGame(rng=random.Random(7))


def finished_game():
    game = SnakeGame(rng=random.Random(7))
    game.load_state(GameState(snake=Snake([(0, 5), (1, 5), (2, 5)]), food=(9, 9), direction=LEFT))
    game.tick()
    return game


class TestCommandForKey:
    """Tests for the key -> command mapping."""

    @pytest.mark.parametrize("status,expected", [
        (NOT_STARTED, START),
        (RUNNING, PAUSE_TOGGLE),
        (PAUSED, PAUSE_TOGGLE),
        (GAME_OVER, RESET),
    ])
    def test_space_is_contextual(self, status, expected):
        assert command_for_key(status, " ") == (expected, None)
        assert command_for_key(status, "Space") == (expected, None)

    @pytest.mark.parametrize("key,direction", [
        ("ArrowUp", UP),
        ("ArrowDown", DOWN),
        ("ArrowLeft", LEFT),
        ("ArrowRight", RIGHT),
    ])
    def test_arrows_steer_while_running(self, key, direction):
        assert command_for_key(RUNNING, key) == (SET_DIRECTION, direction)

    @pytest.mark.parametrize("status", [NOT_STARTED, PAUSED, GAME_OVER])
    def test_arrows_ignored_otherwise(self, status):
        assert command_for_key(status, "ArrowLeft") is None

    def test_unknown_key(self):
        assert command_for_key(RUNNING, "q") is None


class TestHandleKey:
    """Tests for applying key presses to an engine."""

    def test_space_walks_through_the_lifecycle(self, game):
        assert handle_key(game, " ") == START
        assert game.status == RUNNING

        assert handle_key(game, " ") == PAUSE_TOGGLE
        assert game.status == PAUSED

        assert handle_key(game, " ") == PAUSE_TOGGLE
        assert game.status == RUNNING

    def test_space_after_game_over_restarts(self):
        game = finished_game()
        assert handle_key(game, " ") == RESET
        assert game.status == RUNNING
        assert game.state.score == 0

    def test_arrow_changes_direction(self, game):
        handle_key(game, " ")
        assert handle_key(game, "ArrowLeft") == SET_DIRECTION
        assert game.state.direction == LEFT

    def test_arrow_reversal_is_rejected(self, game):
        handle_key(game, " ")
        handle_key(game, "ArrowDown")
        assert game.state.direction == UP

    def test_arrow_before_start_does_nothing(self, game):
        assert handle_key(game, "ArrowLeft") is None
        assert game.status == NOT_STARTED


class TestTouchAndDispatch:
    """Tests for on-screen controls and named commands."""

    def test_touch_steers(self, game):
        game.start()
        handle_touch(game, RIGHT)
        assert game.state.direction == RIGHT

    def test_touch_reversal_is_rejected(self, game):
        game.start()
        handle_touch(game, DOWN)
        assert game.state.direction == UP

    def test_touch_while_paused_is_ignored(self, game):
        game.start()
        game.toggle_pause()
        handle_touch(game, LEFT)
        assert game.state.direction == UP

    def test_touch_with_garbage_is_ignored(self, game):
        game.start()
        handle_touch(game, "DIAGONAL")
        assert game.state.direction == UP

    def test_dispatch_named_commands(self, game):
        dispatch(game, START)
        dispatch(game, SET_DIRECTION, LEFT)
        assert game.state.direction == LEFT
        dispatch(game, PAUSE_TOGGLE)
        assert game.status == PAUSED
        dispatch(game, RESET)
        assert game.status == RUNNING
        assert game.state.direction == UP

    def test_dispatch_unknown_command(self, game):
        dispatch(game, "explode")
        assert game.status == NOT_STARTED

    def test_touch_controls_visibility(self, game):
        assert show_touch_controls(game) is False
        game.start()
        assert show_touch_controls(game) is True
        game.toggle_pause()
        assert show_touch_controls(game) is True
        assert show_touch_controls(finished_game()) is False
