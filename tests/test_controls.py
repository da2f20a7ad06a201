"""Tests for keyboard input mapping."""

import pygame
import pytest

from gap_runner.controls import InputHandler, Intent, DEFAULT_KEY_BINDINGS
from gap_runner.session import GameSession


@pytest.fixture
def handler(session):
    return InputHandler(session)


def _end(session):
    session.player.y = 900
    session.tick()
    assert not session.active


class TestBindings:
    def test_default_jump_keys(self, handler):
        for key in (pygame.K_SPACE, pygame.K_UP, pygame.K_w):
            assert handler.intent_for(key) is Intent.JUMP

    def test_default_restart_keys(self, handler):
        for key in (pygame.K_r, pygame.K_RETURN):
            assert handler.intent_for(key) is Intent.RESTART

    def test_unbound_key(self, handler):
        assert handler.intent_for(pygame.K_a) is None

    def test_custom_bindings(self, session):
        handler = InputHandler(session, bindings={pygame.K_j: Intent.JUMP})
        assert handler.intent_for(pygame.K_j) is Intent.JUMP
        assert handler.intent_for(pygame.K_SPACE) is None

    def test_bindings_copied(self, session):
        handler = InputHandler(session)
        handler.bindings[pygame.K_j] = Intent.JUMP
        assert pygame.K_j not in DEFAULT_KEY_BINDINGS


class TestKeyDown:
    def test_jump_while_active(self, handler, session):
        assert handler.handle_key_down(pygame.K_SPACE)
        assert session.player.y == 265

    def test_jump_while_ended(self, handler, session):
        _end(session)
        y = session.player.y
        assert not handler.handle_key_down(pygame.K_SPACE)
        assert session.player.y == y

    def test_restart_while_ended(self, handler, session):
        _end(session)
        assert handler.handle_key_down(pygame.K_r)
        assert session.active
        assert session.score == 0

    def test_restart_while_active(self, handler, session):
        session.try_spawn()
        assert not handler.handle_key_down(pygame.K_r)
        assert len(session.obstacles) == 2

    def test_unrecognized_key_ignored(self, handler, session):
        before = session.snapshot()
        assert not handler.handle_key_down(pygame.K_z)
        assert session.snapshot() == before

    def test_each_key_down_jumps_once(self, handler, session):
        handler.handle_key_down(pygame.K_SPACE)
        handler.handle_key_down(pygame.K_SPACE)
        assert session.player.y == 230
