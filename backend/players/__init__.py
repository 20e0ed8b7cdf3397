"""
Player implementations for the snake engine.

Players are direction sources used to drive headless sessions.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
