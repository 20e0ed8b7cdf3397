"""
GameState entity - the single mutable value the engine owns.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import GRID_SIZE, INITIAL_LENGTH, UP
from .snake import Snake, Position


def initial_positions(grid_size: int = GRID_SIZE) -> List[Position]:
    """
    The fixed starting snake: three segments stacked vertically in the
    middle of the board, head on top, so that the first move UP is safe.
    """
    mid = grid_size // 2
    return [(mid, mid + i) for i in range(INITIAL_LENGTH)]


class GameState:
    """
    The complete state of a game at a point in time.

    Attributes:
        snake: the Snake entity, head first
        food: (x, y) of the food, or None once the board is full
        direction: direction the snake moves on the next tick
        game_over: set once a tick produced a fatal collision
        score: number of food items eaten
        is_paused: whether ticks are currently suspended
        tick_number: how many ticks have been applied
        grid_size: board is grid_size x grid_size cells
    """

    def __init__(
        self,
        snake: Snake,
        food: Optional[Position],
        direction: str = UP,
        game_over: bool = False,
        score: int = 0,
        is_paused: bool = False,
        tick_number: int = 0,
        grid_size: int = GRID_SIZE
    ):
        self.snake = snake
        self.food = tuple(food) if food is not None else None
        self.direction = direction
        self.game_over = game_over
        self.score = score
        self.is_paused = is_paused
        self.tick_number = tick_number
        self.grid_size = grid_size

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def copy(self) -> "GameState":
        snake = Snake(self.snake.positions)
        snake.alive = self.snake.alive
        snake.death_reason = self.snake.death_reason
        snake.death_tick = self.snake.death_tick
        return GameState(
            snake=snake,
            food=self.food,
            direction=self.direction,
            game_over=self.game_over,
            score=self.score,
            is_paused=self.is_paused,
            tick_number=self.tick_number,
            grid_size=self.grid_size
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot for presentation layers."""
        return {
            "snake": [list(p) for p in self.snake.positions],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction,
            "gameOver": self.game_over,
            "score": self.score,
            "isPaused": self.is_paused,
            "tick": self.tick_number,
            "gridSize": self.grid_size,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body
        Row 0 is printed first, matching the screen orientation.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake.positions):
            if not self.in_bounds((x, y)):
                continue
            board[y][x] = 'H' if idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, head={self.snake.head}, "
            f"food={self.food}, direction={self.direction}, score={self.score}, "
            f"paused={self.is_paused}, game_over={self.game_over}>"
        )
