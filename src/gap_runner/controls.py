"""Keyboard input mapping.

Translates key-down codes into game intents and applies them to a session.
Only key-down events are handled here: holding a key does not repeat a jump.
"""

import enum
from typing import Dict, Optional

import pygame

from .session import GameSession


class Intent(enum.Enum):
    JUMP = "jump"
    RESTART = "restart"


DEFAULT_KEY_BINDINGS: Dict[int, Intent] = {
    pygame.K_SPACE: Intent.JUMP,
    pygame.K_UP: Intent.JUMP,
    pygame.K_w: Intent.JUMP,
    pygame.K_r: Intent.RESTART,
    pygame.K_RETURN: Intent.RESTART,
}


class InputHandler:
    """Maps key codes to intents and dispatches them to a GameSession."""

    def __init__(self, session: GameSession, bindings: Optional[Dict[int, Intent]] = None):
        self.session = session
        self.bindings = dict(DEFAULT_KEY_BINDINGS if bindings is None else bindings)

    def intent_for(self, key: int) -> Optional[Intent]:
        """Intent bound to a key code, or None for unbound keys."""
        return self.bindings.get(key)

    def dispatch(self, intent: Intent) -> bool:
        """Apply an intent to the session. Returns whether it had any effect."""
        if intent is Intent.JUMP:
            return self.session.on_jump()
        if intent is Intent.RESTART:
            return self.session.on_restart()
        return False

    def handle_key_down(self, key: int) -> bool:
        """Handle one key-down event. Unbound keys are ignored."""
        intent = self.intent_for(key)
        if intent is None:
            return False
        return self.dispatch(intent)
