"""Tests for motion and collision rules."""

import pytest

from gap_runner.entities import Player, Obstacle
from gap_runner.physics import overlaps, apply_gravity, apply_jump


class TestOverlaps:
    @pytest.fixture
    def player(self):
        return Player(67, 300, 40, 30)

    def test_overlapping(self, player):
        assert overlaps(player, Obstacle(60, -50, 70, 480))

    def test_separated(self, player):
        assert not overlaps(player, Obstacle(200, -50, 70, 480))

    def test_touching_right_edge(self, player):
        # obstacle.left == player.right
        assert not overlaps(player, Obstacle(107, -50, 70, 480))

    def test_touching_left_edge(self, player):
        # obstacle.right == player.left
        assert not overlaps(player, Obstacle(-3, -50, 70, 480))

    def test_touching_top_edge(self, player):
        # obstacle.bottom == player.top
        assert not overlaps(player, Obstacle(60, -180, 70, 480))

    def test_touching_bottom_edge(self, player):
        # obstacle.top == player.bottom
        assert not overlaps(player, Obstacle(60, 330, 70, 480))

    def test_one_pixel_overlap(self, player):
        assert overlaps(player, Obstacle(106, -50, 70, 480))
        assert overlaps(player, Obstacle(60, 329, 70, 480))

    def test_symmetric(self, player):
        obstacle = Obstacle(60, -50, 70, 480)
        assert overlaps(player, obstacle) == overlaps(obstacle, player)


class TestGravity:
    def test_moves_down(self):
        player = Player(67, 300, 40, 30)
        apply_gravity(player, 2)
        assert player.y == 302

    def test_clamped_at_top(self):
        player = Player(67, -10, 40, 30)
        apply_gravity(player, 2)
        assert player.y == 0


class TestJump:
    def test_impulse_applied_immediately(self):
        player = Player(67, 300, 40, 30)
        apply_jump(player, -35)
        assert player.y == 265

    def test_not_clamped(self):
        player = Player(67, 10, 40, 30)
        apply_jump(player, -35)
        assert player.y == -25
