"""Gymnasium environment wrapper for the gap runner.

Provides standard Gym API for RL training and scripted play.
Observations include both RGB frames and a structured state vector.
"""

from typing import Optional, Dict, Tuple

import numpy as np
import gymnasium
from gymnasium import spaces

import pygame

from .config import GameConfig
from .engine import draw_snapshot
from .session import GameSession


STATE_DIM = 8


class GapRunnerEnv(gymnasium.Env):
    """Gymnasium wrapper for the gap runner.

    Both tick sources are driven from the step counter: every step is one
    frame tick, and every config.spawn_interval_frames steps the spawner runs.

    Observation space (Dict):
        'rgb': uint8 array of shape (H, W, 3) - rendered frame
        'state': float32 array of shape (8,) - state vector containing:
            [0]   player x
            [1]   player y
            [2]   horizontal distance from player's left edge to next gap
            [3]   next gap top edge (y)
            [4]   next gap bottom edge (y)
            [5]   score
            [6]   episode progress (steps / max_steps)
            [7]   game over (0/1)

    Action space: Discrete(2) - 0 = do nothing, 1 = jump

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        score: score gained this step (0.5 per obstacle passed)
        death: 1.0 when the game ends
        step:  1.0 every step
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        obs_resolution: Tuple[int, int] = (128, 96),  # (height, width)
        max_episode_steps: int = 3000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.obs_height, self.obs_width = obs_resolution
        self.max_episode_steps = max_episode_steps

        self.reward_weights = reward_weights or {
            "score": 1.0,
            "death": -1.0,
            "step": 0.01,
        }

        self.action_space = spaces.Discrete(2)

        self.observation_space = spaces.Dict({
            "rgb": spaces.Box(
                low=0, high=255,
                shape=(self.obs_height, self.obs_width, 3),
                dtype=np.uint8,
            ),
            "state": spaces.Box(
                low=-np.inf, high=np.inf,
                shape=(STATE_DIM,),
                dtype=np.float32,
            ),
        })

        # Initialize pygame (caller sets SDL_VIDEODRIVER for headless)
        if not pygame.get_init():
            pygame.init()

        # Offscreen render surface (native resolution)
        self._surface = pygame.Surface(
            (self.config.canvas_width, self.config.canvas_height)
        )

        self._display = None
        if render_mode == "human":
            self._display = pygame.display.set_mode(
                (self.config.canvas_width, self.config.canvas_height)
            )
            pygame.display.set_caption("GapRunnerEnv")

        # Game state (populated on reset)
        self._session: Optional[GameSession] = None
        self._episode_steps = 0
        self._prev_score = 0.0

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        spawn_seed = int(self.np_random.integers(0, 2**31))
        self._session = GameSession(self.config, seed=spawn_seed)
        self._episode_steps = 0
        self._prev_score = 0.0

        obs = self._get_obs()
        info = self._get_info()
        info["spawn_seed"] = spawn_seed
        return obs, info

    def step(self, action):
        assert self._session is not None, "Must call reset() before step()"

        if isinstance(action, np.ndarray):
            action = action.item()
        if int(action) == 1:
            self._session.on_jump()

        self._session.tick()
        self._episode_steps += 1
        if self._episode_steps % self.config.spawn_interval_frames == 0:
            self._session.try_spawn()

        reward_signals = self._compute_rewards()
        reward = sum(
            self.reward_weights.get(k, 0.0) * v
            for k, v in reward_signals.items()
        )

        terminated = not self._session.active
        truncated = self._episode_steps >= self.max_episode_steps

        obs = self._get_obs()
        info = self._get_info()
        info["reward_signals"] = reward_signals

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ------------------------------------------------------------------
    # Reward computation
    # ------------------------------------------------------------------

    def _compute_rewards(self):
        score = self._session.score
        signals = {
            "score": score - self._prev_score,
            "death": 0.0 if self._session.active else 1.0,
            "step": 1.0,
        }
        self._prev_score = score
        return signals

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------

    def _get_obs(self):
        # Frames are only rendered when the caller asked for them
        if self.render_mode in ("rgb_array", "human"):
            rgb = self._render_frame()
        else:
            rgb = np.zeros(
                (self.obs_height, self.obs_width, 3), dtype=np.uint8
            )
        return {"rgb": rgb, "state": self._get_state_vector()}

    def _get_state_vector(self):
        state = np.zeros(STATE_DIM, dtype=np.float32)
        session = self._session
        if session is None:
            return state

        player = session.player
        state[0] = player.x
        state[1] = player.y

        gap = session.next_gap()
        if gap is None:
            state[2] = self.config.canvas_width - player.x
            state[3] = 0.0
            state[4] = self.config.canvas_height
        else:
            gap_x, gap_top, gap_bottom = gap
            state[2] = gap_x - player.x
            state[3] = gap_top
            state[4] = gap_bottom

        state[5] = session.score
        state[6] = float(self._episode_steps) / max(self.max_episode_steps, 1)
        state[7] = float(not session.active)
        return state

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_frame(self):
        """Render current state to numpy array (H, W, 3) uint8."""
        draw_snapshot(self._surface, self._session.snapshot(), hud=False)

        scaled = pygame.transform.scale(
            self._surface, (self.obs_width, self.obs_height)
        )
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(scaled)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def render(self):
        if self.render_mode == "rgb_array":
            return self._render_frame()
        elif self.render_mode == "human" and self._display:
            draw_snapshot(self._display, self._session.snapshot())
            pygame.display.flip()

    def _get_info(self):
        info = {"episode_steps": self._episode_steps}
        if self._session:
            info.update(self._session.get_state())
        return info

    def close(self):
        if self._display:
            pygame.display.quit()
            self._display = None
