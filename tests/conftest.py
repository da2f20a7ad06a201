"""Pytest configuration and shared fixtures."""

import os

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'
os.environ['SDL_AUDIODRIVER'] = 'dummy'

import pytest

from gap_runner.config import GameConfig
from gap_runner.session import GameSession


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def still_config():
    """Configuration with gravity disabled so the player stays put."""
    return GameConfig(gravity=0)


@pytest.fixture
def session():
    """Fresh session with a fixed spawn seed."""
    return GameSession(seed=0)


@pytest.fixture
def still_session(still_config):
    """Session whose player does not fall."""
    return GameSession(still_config, seed=0)
