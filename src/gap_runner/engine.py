"""Pygame host: window, timers, input, rendering and sound.

Drives a GameSession with two pygame timers (frame and spawn), feeds key-down
events to the InputHandler, and draws the session snapshot every frame.
"""

import logging
import os
from typing import Dict, Optional, Tuple

import pygame

from .config import GameConfig
from .controls import InputHandler
from .session import GameSession, GameEvent, SessionSnapshot

logger = logging.getLogger(__name__)


# Colors (RGB)
COLOR_BG = (40, 44, 52)
COLOR_PLAYER = (97, 175, 239)
COLOR_OBSTACLE = (152, 195, 121)
COLOR_SCORE = (229, 192, 123)
COLOR_GAME_OVER = (224, 108, 117)

# Custom pygame events for the two tick sources
FRAME_EVENT = pygame.USEREVENT + 1
SPAWN_EVENT = pygame.USEREVENT + 2

# Sound files looked up in SoundBank.sound_dir, keyed by event
SOUND_FILES: Dict[GameEvent, str] = {
    GameEvent.JUMP: "jump.wav",
    GameEvent.COLLISION: "collision.wav",
}


class SoundBank:
    """Plays short sound effects for game events.

    Missing files or an unavailable mixer leave the bank silent; playback
    errors are logged and never propagate into the game.
    """

    def __init__(self, sound_dir: Optional[str] = None):
        self.sound_dir = sound_dir
        self._sounds: Dict[GameEvent, "pygame.mixer.Sound"] = {}
        if sound_dir:
            self._load()

    def _load(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio unavailable, running silent: %s", e)
            return

        for event, filename in SOUND_FILES.items():
            path = os.path.join(self.sound_dir, filename)
            if not os.path.exists(path):
                logger.warning("Sound file not found: %s", path)
                continue
            try:
                self._sounds[event] = pygame.mixer.Sound(path)
            except pygame.error as e:
                logger.warning("Could not load sound %s: %s", path, e)

    @property
    def enabled(self) -> bool:
        return bool(self._sounds)

    def play(self, event: GameEvent) -> None:
        sound = self._sounds.get(event)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning("Could not play %s sound: %s", event.value, e)

    def __call__(self, event: GameEvent) -> None:
        self.play(event)


class GapRunnerEngine:
    """Main game host coordinating session, input, timers and rendering."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        sound_dir: Optional[str] = None,
    ):
        """Initialize game host.

        Args:
            config: Game configuration. Uses defaults if None.
            seed: Seed for obstacle placement.
            sound_dir: Directory containing jump.wav / collision.wav.
        """
        self.config = config or GameConfig()

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.canvas_width, self.config.canvas_height)
        )
        pygame.display.set_caption("Gap Runner")
        self.clock = pygame.time.Clock()

        self.session = GameSession(self.config, seed=seed)
        self.input = InputHandler(self.session)
        self.sounds = SoundBank(sound_dir)

        self.session.subscribe(self.sounds)
        self.session.subscribe(self._on_game_event)

        self.running = False
        self.timers_armed = False

    # ------------------------------------------------------------------
    # Tick sources
    # ------------------------------------------------------------------

    def arm_timers(self) -> None:
        """Start the frame and spawn timers."""
        pygame.time.set_timer(FRAME_EVENT, max(1, round(self.config.frame_interval_ms)))
        pygame.time.set_timer(SPAWN_EVENT, max(1, round(self.config.spawn_interval_ms)))
        self.timers_armed = True

    def disarm_timers(self) -> None:
        """Stop both timers and drop any tick already queued."""
        pygame.time.set_timer(FRAME_EVENT, 0)
        pygame.time.set_timer(SPAWN_EVENT, 0)
        pygame.event.clear((FRAME_EVENT, SPAWN_EVENT))
        self.timers_armed = False

    def _on_game_event(self, event: GameEvent) -> None:
        if event is GameEvent.GAME_OVER:
            self.disarm_timers()
        elif event is GameEvent.RESTART:
            self.arm_timers()

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    def handle_event(self, event: "pygame.event.Event") -> None:
        """Process a single pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == FRAME_EVENT:
            self.session.tick()
        elif event.type == SPAWN_EVENT:
            self.session.try_spawn()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            else:
                self.input.handle_key_down(event.key)

    def handle_events(self) -> None:
        """Process all pending pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Render current game state."""
        draw_snapshot(self.screen, self.session.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Main game loop."""
        self.running = True
        self.arm_timers()

        while self.running:
            self.handle_events()
            self.render()
            self.clock.tick(self.config.fps)

        self.disarm_timers()
        pygame.quit()


def draw_snapshot(surface: "pygame.Surface", snapshot: SessionSnapshot, hud: bool = True) -> None:
    """Draw a session snapshot onto a surface.

    Args:
        surface: Target surface sized to the canvas.
        snapshot: Session state to draw.
        hud: Whether to draw score text and the game-over banner.
    """
    surface.fill(COLOR_BG)

    for rect in snapshot.obstacles:
        pygame.draw.rect(surface, COLOR_OBSTACLE, rect)

    pygame.draw.rect(surface, COLOR_PLAYER, snapshot.player)

    if not hud:
        return

    width, height = surface.get_size()
    font = pygame.font.Font(None, 36)
    score_surface = font.render(f"Score: {int(snapshot.score)}", True, COLOR_SCORE)
    surface.blit(score_surface, (10, 10))

    if not snapshot.active:
        _draw_centered_text(surface, "GAME OVER!", COLOR_GAME_OVER, (width // 2, height // 2))
        _draw_centered_text(
            surface, "Press R to restart", (255, 255, 255), (width // 2, height // 2 + 40), size=28
        )


def _draw_centered_text(
    surface: "pygame.Surface",
    text: str,
    color: Tuple[int, int, int],
    center: Tuple[int, int],
    size: int = 48,
) -> None:
    font = pygame.font.Font(None, size)
    text_surface = font.render(text, True, color)
    surface.blit(text_surface, text_surface.get_rect(center=center))
