"""Configuration for the gap runner game.

GameConfig holds every tunable constant of a session: canvas geometry, player
and obstacle sizes, per-tick motion deltas, and the two tick intervals that a
host uses to drive the frame update and the obstacle spawner.

All motion values are per-tick pixel deltas, not per-second rates:
- gravity is added to the player's y on every frame tick
- jump_impulse is added to y once per jump (negative = up)
- obstacle_speed is added to every obstacle's x on every frame tick
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class GameConfig:
    """Immutable game constants.

    Screen coordinates use a top-left origin: y grows downward, so gravity is
    positive and the jump impulse is negative.
    """

    # Canvas
    canvas_width: int = 400
    canvas_height: int = 600

    # Player (start position derived from the canvas when left as None)
    player_width: int = 40
    player_height: int = 30
    player_start_x: Optional[int] = None  # round(canvas_width / 6)
    player_start_y: Optional[int] = None  # canvas_height // 2

    # Obstacles
    obstacle_width: int = 70
    obstacle_height: int = 480
    obstacle_gap: int = 150
    obstacle_speed: int = -5  # px per frame tick, negative = leftward

    # Player motion
    gravity: int = 2  # px per frame tick
    jump_impulse: int = -35  # px added to y on jump

    # Tick sources
    frame_interval_ms: float = 1000.0 / 60.0
    spawn_interval_ms: float = 2000.0

    def __post_init__(self):
        # Frozen: derived defaults go through object.__setattr__
        if self.player_start_x is None:
            object.__setattr__(self, "player_start_x", round(self.canvas_width / 6))
        if self.player_start_y is None:
            object.__setattr__(self, "player_start_y", self.canvas_height // 2)

        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid game config: {errors}")

    def validate(self) -> List[str]:
        """Return a list of human-readable problems (empty if valid)."""
        errors = []
        for name in (
            "canvas_width", "canvas_height",
            "player_width", "player_height",
            "obstacle_width", "obstacle_height", "obstacle_gap",
        ):
            if getattr(self, name) <= 0:
                errors.append(f"{name} must be positive, got {getattr(self, name)}")
        if self.obstacle_speed >= 0:
            errors.append(f"obstacle_speed must be negative, got {self.obstacle_speed}")
        if self.jump_impulse >= 0:
            errors.append(f"jump_impulse must be negative, got {self.jump_impulse}")
        if self.gravity < 0:
            errors.append(f"gravity must be non-negative, got {self.gravity}")
        if self.frame_interval_ms <= 0:
            errors.append(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")
        if self.spawn_interval_ms <= 0:
            errors.append(f"spawn_interval_ms must be positive, got {self.spawn_interval_ms}")
        return errors

    # === DERIVED VALUES ===

    @property
    def fps(self) -> float:
        """Frame ticks per second."""
        return 1000.0 / self.frame_interval_ms

    @property
    def spawn_interval_frames(self) -> int:
        """Spawn interval expressed in whole frame ticks (at least 1).

        Used by hosts that drive both tick sources from a single frame counter.
        """
        return max(1, round(self.spawn_interval_ms / self.frame_interval_ms))

    @property
    def max_spawn_offset(self) -> float:
        """Exclusive upper bound of the random vertical spawn offset."""
        return self.canvas_height / 3

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary of constants."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})


# Predefined configurations for play/testing
CONFIGS = {
    # Default balanced feel
    "default": GameConfig(),

    # Wider gap, slower obstacles - forgiving
    "roomy": GameConfig(obstacle_gap=200, obstacle_speed=-4),

    # Narrow gap, faster obstacles - precision
    "tight": GameConfig(obstacle_gap=120, obstacle_speed=-6),

    # Strong pull down, big jumps
    "heavy": GameConfig(gravity=4, jump_impulse=-55),
}
