"""
Translates raw keyboard / touch input into engine commands.

Keys use browser KeyboardEvent.key names. Space is the single control key:
it starts a new game, toggles pause while playing, and restarts after a
game over.
"""

import logging
from typing import Optional, Tuple

from domain.constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    NOT_STARTED, RUNNING, PAUSED, GAME_OVER,
)
from game_engine import SnakeGame

logger = logging.getLogger(__name__)

# Commands understood by dispatch()
START = "start"
PAUSE_TOGGLE = "pause-toggle"
RESET = "reset"
SET_DIRECTION = "set-direction"
COMMANDS = {START, PAUSE_TOGGLE, RESET, SET_DIRECTION}

ARROW_KEYS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}
CONTROL_KEYS = {" ", "Space"}

CONTROL_COMMAND_BY_STATUS = {
    NOT_STARTED: START,
    RUNNING: PAUSE_TOGGLE,
    PAUSED: PAUSE_TOGGLE,
    GAME_OVER: RESET,
}


def command_for_key(status: str, key: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Map a key press to (command, direction) for the given lifecycle status.
    Returns None for keys that mean nothing in that status.
    """
    if key in CONTROL_KEYS:
        return CONTROL_COMMAND_BY_STATUS[status], None
    if key in ARROW_KEYS and status == RUNNING:
        return SET_DIRECTION, ARROW_KEYS[key]
    return None


def dispatch(engine: SnakeGame, command: str, direction: Optional[str] = None):
    """Apply a named command to the engine. Unknown commands are ignored."""
    if command not in COMMANDS:
        logger.debug(f"Ignoring unknown command {command!r}")
        return
    if command == START:
        engine.start()
    elif command == PAUSE_TOGGLE:
        engine.toggle_pause()
    elif command == RESET:
        engine.reset()
    else:
        engine.set_direction(direction)


def handle_key(engine: SnakeGame, key: str) -> Optional[str]:
    """Apply a key press; returns the command that was dispatched, if any."""
    mapped = command_for_key(engine.status, key)
    if mapped is None:
        return None
    command, direction = mapped
    dispatch(engine, command, direction)
    return command


def handle_touch(engine: SnakeGame, direction: str):
    """On-screen arrow buttons only ever steer."""
    if direction not in VALID_MOVES:
        return
    dispatch(engine, SET_DIRECTION, direction)


def show_touch_controls(engine: SnakeGame) -> bool:
    return engine.status in (RUNNING, PAUSED)
