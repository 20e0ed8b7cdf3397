"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .constants import DIRECTION_DELTAS

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self'
        death_tick: the tick number on which the snake died
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(tuple(p) for p in positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, cell: Position) -> bool:
        return cell in self.positions

    def next_head(self, direction: str) -> Position:
        """Cell the head moves into when advancing one step in `direction`."""
        dx, dy = DIRECTION_DELTAS[direction]
        hx, hy = self.head
        return (hx + dx, hy + dy)

    def kill(self, reason: str, tick_number: int):
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick_number

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, alive={self.alive}>"
