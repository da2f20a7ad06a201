"""Game session: the per-frame update loop and the active/ended state machine.

GameSession owns all mutable game state (player, obstacles, score, state) and
exposes the entry points a host drives:

- tick():       one frame update (gravity, obstacle motion, scoring, collision)
- try_spawn():  one spawn interval (push a new obstacle pair)
- on_jump():    jump intent from input
- on_restart(): restart intent from input

The session never schedules anything itself. A host decides how the frame and
spawn ticks are produced (pygame timers, a fixed-step loop, an RL env step).
Presentation collaborators observe the session through snapshot() and through
GameEvent notifications delivered to subscribed listeners.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import GameConfig
from .entities import Player, Obstacle, Rect
from .physics import overlaps, apply_gravity, apply_jump
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    ACTIVE = "active"
    ENDED = "ended"


class GameEvent(str, enum.Enum):
    """Notifications for presentation/audio collaborators."""
    JUMP = "jump"
    COLLISION = "collision"
    GAME_OVER = "game_over"
    RESTART = "restart"


Listener = Callable[[GameEvent], None]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session for rendering."""
    player: Rect
    obstacles: Tuple[Rect, ...]
    score: float
    active: bool


class GameSession:
    """State container and update rules for one game.

    The session starts ACTIVE. It moves to ENDED on collision or when the
    player falls below the canvas, and back to ACTIVE only through
    on_restart().
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        spawner: Optional[ObstacleSpawner] = None,
    ):
        """Create a session and start it immediately.

        Args:
            config: Game constants. Uses defaults if None.
            seed: Seed for obstacle placement (ignored if spawner is given).
            spawner: Custom obstacle spawner.
        """
        self.config = config or GameConfig()
        self.spawner = spawner or ObstacleSpawner(self.config, seed=seed)

        self.player = Player.from_config(self.config)
        self._listeners: List[Listener] = []

        self._start()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def _start(self) -> None:
        cfg = self.config
        self.obstacles: List[Obstacle] = []
        self.player.x = cfg.player_start_x
        self.player.y = cfg.player_start_y
        self.score = 0.0
        self.end_cause: Optional[str] = None  # "collision" or "fall"
        self.state = SessionState.ACTIVE

    def _end(self, cause: str) -> None:
        self.state = SessionState.ENDED
        self.end_cause = cause
        logger.info("Game over (%s) with score %.1f", cause, self.score)
        if cause == "collision":
            self._emit(GameEvent.COLLISION)
        self._emit(GameEvent.GAME_OVER)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Register a callback for GameEvent notifications."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        # A failing collaborator (e.g. sound playback) must not affect game state.
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s event", listener, event.value)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the game by one frame. No-op while ended."""
        if not self.active:
            return

        cfg = self.config
        player = self.player

        apply_gravity(player, cfg.gravity)

        # Reverse order so removal does not skip the next obstacle
        for i in range(len(self.obstacles) - 1, -1, -1):
            obstacle = self.obstacles[i]
            obstacle.x += cfg.obstacle_speed

            if not obstacle.scored and obstacle.right < player.x:
                obstacle.scored = True
                self.score += 0.5

            if overlaps(player, obstacle):
                self._end("collision")
                return

            if obstacle.right < 0:
                del self.obstacles[i]

        if player.y > cfg.canvas_height:
            self._end("fall")

    def try_spawn(self) -> Optional[Tuple[Obstacle, Obstacle]]:
        """Push a new obstacle pair if the session is active.

        Returns:
            The (top, bottom) pair that was added, or None while ended.
        """
        if not self.active:
            return None
        pair = self.spawner.spawn_pair()
        self.obstacles.extend(pair)
        return pair

    def on_jump(self) -> bool:
        """Apply a jump. Returns whether it had any effect."""
        if not self.active:
            return False
        apply_jump(self.player, self.config.jump_impulse)
        self._emit(GameEvent.JUMP)
        return True

    def on_restart(self) -> bool:
        """Restart an ended game. Returns whether it had any effect."""
        if self.active:
            return False
        self._start()
        logger.info("Game restarted")
        self._emit(GameEvent.RESTART)
        return True

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        """Immutable copy of everything a renderer needs."""
        return SessionSnapshot(
            player=self.player.rect,
            obstacles=tuple(o.rect for o in self.obstacles),
            score=self.score,
            active=self.active,
        )

    def next_gap(self) -> Optional[Tuple[int, int, int]]:
        """Locate the nearest gap the player has not yet passed.

        Returns:
            (x, gap_top, gap_bottom) of the upcoming pair, or None if no
            obstacle lies ahead. gap_top is the top obstacle's bottom edge,
            gap_bottom the bottom obstacle's top edge.
        """
        ahead = [o for o in self.obstacles if o.right >= self.player.x]
        if not ahead:
            return None
        x = min(o.x for o in ahead)
        column = [o for o in ahead if o.x == x]
        top = min(column, key=lambda o: o.y)
        bottom = max(column, key=lambda o: o.y)
        if top is bottom:
            # Lone obstacle: treat the open side as the gap
            if top.y <= 0:
                return x, top.bottom, self.config.canvas_height
            return x, 0, top.y
        return x, top.bottom, bottom.y

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for observation/logging."""
        return {
            "active": self.active,
            "state": self.state.value,
            "end_cause": self.end_cause,
            "score": self.score,
            "player_position": (self.player.x, self.player.y),
            "num_obstacles": len(self.obstacles),
        }
