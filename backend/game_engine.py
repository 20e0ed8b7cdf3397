"""
Single-player snake game engine.

The engine owns exactly one GameState and mutates it only through the
operations below. It owns no timer: whoever drives the game calls tick()
on a fixed interval (GAME_SPEED milliseconds) and forwards input as
start / toggle_pause / reset / set_direction calls.

Gameplay operations never raise. A request that is not valid in the
current lifecycle state is ignored.
"""

import logging
import random
from typing import List, Optional

from domain.constants import (
    UP, VALID_MOVES, OPPOSITES, GRID_SIZE, MIN_GRID_SIZE,
    NOT_STARTED, RUNNING, PAUSED, GAME_OVER,
    WALL_COLLISION, SELF_COLLISION, FOOD_EATEN, MOVED,
)
from domain.game_state import GameState, initial_positions
from domain.snake import Snake, Position

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - the lifecycle (not started, running, paused, game over)
      - snake movement and growth
      - wall and self collisions
      - food placement
    """

    def __init__(self, grid_size: int = GRID_SIZE, rng: Optional[random.Random] = None):
        if grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else random.Random()
        self.started = False
        self.state = self._fresh_state()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def status(self) -> str:
        if not self.started:
            return NOT_STARTED
        if self.state.game_over:
            return GAME_OVER
        if self.state.is_paused:
            return PAUSED
        return RUNNING

    def can_tick(self) -> bool:
        return self.status == RUNNING

    def can_steer(self, direction: str) -> bool:
        if self.status != RUNNING or direction not in VALID_MOVES:
            return False
        return direction != OPPOSITES[self.state.direction]

    def can_toggle_pause(self) -> bool:
        return self.status in (RUNNING, PAUSED)

    def start(self):
        """Begin the first game. Only valid before anything was started."""
        if self.status != NOT_STARTED:
            logger.debug(f"Ignoring start request in state {self.status}")
            return
        self.state = self._fresh_state()
        self.started = True
        logger.info(f"Game started, food at {self.state.food}")

    def reset(self):
        """Replace the state wholesale with a fresh running game."""
        self.state = self._fresh_state()
        self.started = True
        logger.info(f"Game reset, food at {self.state.food}")

    def toggle_pause(self):
        if not self.can_toggle_pause():
            logger.debug(f"Ignoring pause toggle in state {self.status}")
            return
        self.state.is_paused = not self.state.is_paused
        logger.info("Game paused" if self.state.is_paused else "Game resumed")

    def set_direction(self, direction: str):
        """Change the direction used by the next tick; reversals are ignored."""
        if not self.can_steer(direction):
            logger.debug(
                f"Ignoring direction {direction!r} (current {self.state.direction}, "
                f"state {self.status})"
            )
            return
        self.state.direction = direction

    def load_state(self, state: GameState):
        """
        Install a caller-built state, e.g. to set up a specific position.

        Raises ValueError when the state could never be produced by play.
        """
        self._validate(state)
        self.grid_size = state.grid_size
        self.state = state
        self.started = True

    def snapshot(self) -> GameState:
        """Independent copy of the current state for readers."""
        return self.state.copy()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> Optional[str]:
        """
        Advance the game by one step.

        Returns the outcome ('wall', 'self', 'food' or 'move'), or None when
        the game is not running and nothing happened.
        """
        if not self.can_tick():
            return None

        state = self.state
        snake = state.snake
        state.tick_number += 1
        new_head = snake.next_head(state.direction)

        if not state.in_bounds(new_head):
            return self._end(WALL_COLLISION)

        # Checked against the full pre-move body: the tail cell counts even
        # though it would be vacated on this same tick.
        if snake.occupies(new_head):
            return self._end(SELF_COLLISION)

        snake.positions.appendleft(new_head)

        if new_head == state.food:
            state.score += 1
            state.food = self._random_free_cell(snake)
            if state.food is None:
                state.game_over = True
                logger.info(f"Board filled after {state.tick_number} ticks, score {state.score}")
            logger.debug(f"Tick {state.tick_number}: ate food at {new_head}, score {state.score}")
            return FOOD_EATEN

        snake.positions.pop()
        logger.debug(f"Tick {state.tick_number}: head -> {new_head}")
        return MOVED

    def _end(self, reason: str) -> str:
        self.state.game_over = True
        self.state.snake.kill(reason, self.state.tick_number)
        logger.info(
            f"Game Over: {reason} collision at tick {self.state.tick_number}, "
            f"final score {self.state.score}"
        )
        return reason

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _fresh_state(self) -> GameState:
        snake = Snake(initial_positions(self.grid_size))
        food = self._random_free_cell(snake)
        return GameState(snake=snake, food=food, direction=UP, grid_size=self.grid_size)

    def _free_cells(self, snake: Snake) -> List[Position]:
        occupied = set(snake.positions)
        return [
            (x, y)
            for y in range(self.grid_size)
            for x in range(self.grid_size)
            if (x, y) not in occupied
        ]

    def _random_free_cell(self, snake: Snake) -> Optional[Position]:
        """
        Return a uniformly random cell not occupied by the snake, or None
        when the snake covers the whole board.

        Rejection sampling while at most half the board is taken; past that
        the explicit free-cell list is sampled so the loop always terminates.
        """
        total = self.grid_size * self.grid_size
        if len(snake) * 2 <= total:
            while True:
                x = self.rng.randint(0, self.grid_size - 1)
                y = self.rng.randint(0, self.grid_size - 1)
                if not snake.occupies((x, y)):
                    return (x, y)

        free = self._free_cells(snake)
        if not free:
            return None
        return self.rng.choice(free)

    @staticmethod
    def _validate(state: GameState):
        positions = list(state.snake.positions)
        if not positions:
            raise ValueError("Snake must have at least one segment.")
        if state.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {state.grid_size}.")
        for cell in positions:
            if not state.in_bounds(cell):
                raise ValueError(f"Snake segment out of bounds at {cell}.")
        if len(set(positions)) != len(positions):
            raise ValueError("Snake segments overlap.")
        if state.direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction {state.direction!r}.")
        if state.score < 0:
            raise ValueError(f"Score cannot be negative, got {state.score}.")
        if state.food is None:
            if not state.game_over:
                raise ValueError("A running game needs food on the board.")
        else:
            if not state.in_bounds(state.food):
                raise ValueError(f"Food out of bounds at {state.food}.")
            if state.food in positions:
                raise ValueError(f"Food at {state.food} is inside the snake.")
