"""
Environment-driven settings.

Values come from the process environment, optionally seeded from a
.env file via python-dotenv. Anything missing falls back to the
defaults below.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .domain.constants import (
    DEFAULT_HIGH_SCORE_LIMIT,
    DEFAULT_INITIAL_LENGTH,
    DEFAULT_MAX_SPEED,
    DEFAULT_MIN_SPEED,
    DEFAULT_SPEED,
)
from .domain.game_state import GameConfig
from .errors import ConfigurationError

DEFAULT_GRID_WIDTH = 20
DEFAULT_GRID_HEIGHT = 20
DEFAULT_LOG_LEVEL = "INFO"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    game: GameConfig
    high_score_db: str
    high_score_limit: int
    log_level: str


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def get_high_score_db_path() -> str:
    """
    Location of the sqlite high score table.

    SNAKE_HIGH_SCORE_DB wins; otherwise a file in the current directory.
    """
    configured = os.getenv("SNAKE_HIGH_SCORE_DB")
    if configured:
        return configured
    return str(Path.cwd() / "snakecore_scores.db")


def load_game_config() -> GameConfig:
    wrap_mode = _get_bool("SNAKE_WRAP_MODE", False)
    config = GameConfig(
        grid_width=_get_int("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH),
        grid_height=_get_int("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
        initial_snake_length=_get_int("SNAKE_INITIAL_LENGTH", DEFAULT_INITIAL_LENGTH),
        wall_mode=_get_bool("SNAKE_WALL_MODE", not wrap_mode),
        initial_speed=_get_int("SNAKE_SPEED", DEFAULT_SPEED),
        wrap_mode=wrap_mode,
        min_speed=_get_int("SNAKE_MIN_SPEED", DEFAULT_MIN_SPEED),
        max_speed=_get_int("SNAKE_MAX_SPEED", DEFAULT_MAX_SPEED),
    )
    config.validate()
    return config


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment.

    Args:
        env_file: explicit .env path; by default python-dotenv searches
            upward from the current directory. Variables already set in the
            environment are not overridden.

    Raises:
        ConfigurationError: if a variable is malformed or the resulting
            game configuration is invalid
    """
    load_dotenv(env_file)
    limit = _get_int("SNAKE_HIGH_SCORE_LIMIT", DEFAULT_HIGH_SCORE_LIMIT)
    if limit <= 0:
        raise ConfigurationError(f"SNAKE_HIGH_SCORE_LIMIT must be positive, got {limit}")
    return Settings(
        game=load_game_config(),
        high_score_db=get_high_score_db_path(),
        high_score_limit=limit,
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
