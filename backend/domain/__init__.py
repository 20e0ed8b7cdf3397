"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
presentation concerns (rendering, input devices, timers).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES, DIRECTION_DELTAS,
    GRID_SIZE, CELL_SIZE, GAME_SPEED, INITIAL_LENGTH,
    NOT_STARTED, RUNNING, PAUSED, GAME_OVER,
    WALL_COLLISION, SELF_COLLISION, FOOD_EATEN, MOVED,
)
from .snake import Snake, Position
from .game_state import GameState, initial_positions

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES', 'DIRECTION_DELTAS',
    'GRID_SIZE', 'CELL_SIZE', 'GAME_SPEED', 'INITIAL_LENGTH',
    'NOT_STARTED', 'RUNNING', 'PAUSED', 'GAME_OVER',
    'WALL_COLLISION', 'SELF_COLLISION', 'FOOD_EATEN', 'MOVED',
    'Snake', 'Position',
    'GameState', 'initial_positions',
]
