"""Game entities: the player and the gap obstacles.

Entities are plain mutable records. They carry position and size only; motion,
scoring and collision rules live in physics.py and session.py.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import GameConfig


# (x, y, width, height) in screen coordinates
Rect = Tuple[int, int, int, int]


@dataclass
class Player:
    """Player sprite. Has no velocity; gravity and jumps move y directly."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_config(cls, config: GameConfig) -> "Player":
        """Create a player at the configured start position."""
        return cls(
            x=config.player_start_x,
            y=config.player_start_y,
            width=config.player_width,
            height=config.player_height,
        )


@dataclass
class Obstacle:
    """One half of an obstacle pair.

    scored flips to True once the obstacle's right edge passes the player's
    left edge, and never flips back.
    """
    x: int
    y: int
    width: int
    height: int
    scored: bool = False

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)
