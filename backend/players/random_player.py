"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, OPPOSITES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Picks a random direction that avoids walls and the snake's own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake = game_state.snake
        current = game_state.direction

        # Filter out moves that:
        # 1. Reverse onto the neck (the engine ignores them anyway)
        # 2. Hit walls
        # 3. Hit the body, tail included
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITES[current]:
                continue
            cell = snake.next_head(move)
            if not game_state.in_bounds(cell):
                continue
            if snake.occupies(cell):
                continue
            valid_moves.append(move)

        # No safe move left, keep going
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
