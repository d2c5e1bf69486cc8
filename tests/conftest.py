import os
import random

import pytest

from snakecore import GameConfig


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate os.environ so SNAKE_* variables from the host or a .env file never leak."""
    env = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith("SNAKE_") and key != "LOG_LEVEL"
    }
    monkeypatch.setattr(os, "environ", env)
    return env


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config():
    return GameConfig(grid_width=10, grid_height=10, initial_snake_length=3, wall_mode=True,
                      initial_speed=5, wrap_mode=False)
