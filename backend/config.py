"""
Runtime settings, read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import GAME_SPEED, GRID_SIZE

load_dotenv()


@dataclass
class Settings:
    game_speed_ms: int = GAME_SPEED
    grid_size: int = GRID_SIZE
    seed: Optional[int] = None
    log_level: str = "INFO"


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    return Settings(
        game_speed_ms=_get_int("SNAKE_GAME_SPEED_MS", GAME_SPEED),
        grid_size=_get_int("SNAKE_GRID_SIZE", GRID_SIZE),
        seed=_get_int("SNAKE_SEED", None),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
