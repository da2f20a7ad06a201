"""Gymnasium wrappers for the gap runner.

RL libraries generally expect a flat Box observation; GapRunnerEnv returns a
Dict with 'rgb' and 'state'. StateOnlyWrapper strips the frame.
"""

from typing import Optional

import gymnasium
from gymnasium import spaces

from .config import GameConfig
from .gym_env import GapRunnerEnv


class StateOnlyWrapper(gymnasium.ObservationWrapper):
    """Extract the flat state vector from the Dict observation."""

    def __init__(self, env: gymnasium.Env):
        super().__init__(env)
        assert isinstance(env.observation_space, spaces.Dict), (
            f"StateOnlyWrapper expects Dict obs space, got {type(env.observation_space)}"
        )
        assert "state" in env.observation_space.spaces, (
            "StateOnlyWrapper expects 'state' key in obs Dict"
        )
        self.observation_space = env.observation_space["state"]

    def observation(self, obs):
        return obs["state"]


def make_gap_runner_env(
    config: Optional[GameConfig] = None,
    state_only: bool = True,
    max_episode_steps: int = 3000,
    render_mode: Optional[str] = None,
) -> gymnasium.Env:
    """Build a GapRunnerEnv with the standard wrapper stack.

    Args:
        config: Game configuration. Uses defaults if None.
        state_only: Strip RGB frames and expose the state vector as a Box.
        max_episode_steps: Truncation horizon.
        render_mode: Passed through to GapRunnerEnv.
    """
    env = GapRunnerEnv(
        config=config,
        render_mode=render_mode,
        max_episode_steps=max_episode_steps,
    )
    if state_only:
        env = StateOnlyWrapper(env)
    return env
