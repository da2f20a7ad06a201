"""Tests for game entities."""

from gap_runner.config import GameConfig
from gap_runner.entities import Player, Obstacle


class TestPlayer:
    def test_from_config(self):
        config = GameConfig()
        player = Player.from_config(config)
        assert player.rect == (67, 300, 40, 30)

    def test_edges(self):
        player = Player(67, 300, 40, 30)
        assert player.right == 107
        assert player.bottom == 330

    def test_mutable_position(self):
        player = Player(0, 0, 10, 10)
        player.y = 25
        assert player.bottom == 35


class TestObstacle:
    def test_defaults_unscored(self):
        obstacle = Obstacle(400, -50, 70, 480)
        assert not obstacle.scored

    def test_edges(self):
        obstacle = Obstacle(400, -50, 70, 480)
        assert obstacle.right == 470
        assert obstacle.bottom == 430
        assert obstacle.rect == (400, -50, 70, 480)
