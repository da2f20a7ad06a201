"""gap-runner — single-screen gap-dodging arcade game.

The player falls under constant gravity and jumps on input to thread a stream
of obstacle pairs scrolling in from the right. The core (GameSession) is a
pure in-memory update loop; a pygame host and a Gymnasium environment drive
it from the outside.
"""

from .config import GameConfig, CONFIGS
from .entities import Player, Obstacle
from .physics import overlaps
from .spawner import ObstacleSpawner
from .session import GameSession, GameEvent, SessionState, SessionSnapshot
from .controls import InputHandler, Intent

__all__ = [
    "GameConfig",
    "CONFIGS",
    "Player",
    "Obstacle",
    "overlaps",
    "ObstacleSpawner",
    "GameSession",
    "GameEvent",
    "SessionState",
    "SessionSnapshot",
    "InputHandler",
    "Intent",
]
