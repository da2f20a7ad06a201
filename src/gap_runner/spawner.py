"""Obstacle pair generation.

Each pair is a top and a bottom obstacle at the same x, separated vertically by
the configured gap. The pair enters just off the right edge of the canvas and
is shifted up by a random offset so the gap lands at a different height each
time.
"""

import logging
import math
import random
from typing import Optional, Tuple

from .config import GameConfig
from .entities import Obstacle

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """Builds obstacle pairs with a randomized gap position.

    The spawner owns its own random.Random so pair placement is reproducible
    for a given seed without touching the global random state.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the placement generator."""
        self.rng.seed(seed)

    def sample_offset(self) -> int:
        """Draw a uniform integer offset in [0, canvas_height / 3)."""
        upper = math.ceil(self.config.max_spawn_offset)
        return self.rng.randrange(0, max(upper, 1))

    def spawn_pair(self) -> Tuple[Obstacle, Obstacle]:
        """Create a new (top, bottom) obstacle pair at the right edge."""
        cfg = self.config
        offset = self.sample_offset()

        top_y = -(cfg.obstacle_height // 4) - offset
        bottom_y = top_y + cfg.obstacle_height + cfg.obstacle_gap

        top = Obstacle(cfg.canvas_width, top_y, cfg.obstacle_width, cfg.obstacle_height)
        bottom = Obstacle(cfg.canvas_width, bottom_y, cfg.obstacle_width, cfg.obstacle_height)

        logger.debug("Spawned obstacle pair at x=%d, gap=[%d, %d)", top.x, top.bottom, bottom.y)
        return top, bottom
