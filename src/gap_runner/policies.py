"""Scripted policies for automated play.

Each policy takes an observation from GapRunnerEnv and returns a Discrete(2)
action (1 = jump).
"""

import numpy as np
from typing import Dict, Optional

from .config import GameConfig


class BasePolicy:
    """Base class for scripted policies."""

    name: str = "base"

    def __call__(self, obs: Dict[str, np.ndarray]) -> int:
        return self.act(obs)

    def act(self, obs: Dict[str, np.ndarray]) -> int:
        raise NotImplementedError

    def reset(self):
        """Called at the start of each episode."""
        pass


class IdlePolicy(BasePolicy):
    """Never jumps. The player drops through the floor."""

    name = "idle"

    def act(self, obs):
        return 0


class RandomPolicy(BasePolicy):
    """Jumps at random with a fixed per-step probability."""

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None, jump_prob: float = 0.08):
        self.rng = rng or np.random.default_rng()
        self.jump_prob = jump_prob

    def act(self, obs):
        return int(self.rng.random() < self.jump_prob)


class GapSeekerPolicy(BasePolicy):
    """Keeps the player inside the upcoming gap.

    Jumps whenever the player's bottom edge sinks to within `margin` pixels
    of the gap's lower edge, provided the jump will not carry the top edge
    above the gap's upper edge.
    """

    name = "gap_seeker"

    def __init__(self, config: Optional[GameConfig] = None, margin: int = 20):
        self.config = config or GameConfig()
        self.margin = margin

    def act(self, obs):
        state = obs["state"]
        player_y = float(state[1])
        gap_top = float(state[3])
        gap_bottom = float(state[4])

        player_bottom = player_y + self.config.player_height
        after_jump = player_y + self.config.jump_impulse

        if player_bottom >= gap_bottom - self.margin and after_jump > gap_top:
            return 1
        return 0


POLICIES = {
    "idle": IdlePolicy,
    "random": RandomPolicy,
    "gap_seeker": GapSeekerPolicy,
}
