"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: (0, 0) is the top left cell, y grows downwards
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board and timing
GRID_SIZE = 20
MIN_GRID_SIZE = 4
CELL_SIZE = 20
GAME_SPEED = 150  # milliseconds between ticks
INITIAL_LENGTH = 3

# Lifecycle states
NOT_STARTED = "not_started"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"

# Tick outcomes
WALL_COLLISION = "wall"
SELF_COLLISION = "self"
FOOD_EATEN = "food"
MOVED = "move"
