"""Tests for obstacle pair generation."""

import pytest

from gap_runner.config import GameConfig
from gap_runner.spawner import ObstacleSpawner


class TestObstacleSpawner:
    def test_pair_at_right_edge(self):
        spawner = ObstacleSpawner(seed=1)
        top, bottom = spawner.spawn_pair()
        assert top.x == bottom.x == 400

    def test_pair_sizes(self):
        spawner = ObstacleSpawner(seed=1)
        top, bottom = spawner.spawn_pair()
        assert (top.width, top.height) == (70, 480)
        assert (bottom.width, bottom.height) == (70, 480)

    def test_pair_unscored(self):
        top, bottom = ObstacleSpawner(seed=1).spawn_pair()
        assert not top.scored
        assert not bottom.scored

    def test_gap_invariant(self):
        config = GameConfig()
        spawner = ObstacleSpawner(config, seed=3)
        for _ in range(200):
            top, bottom = spawner.spawn_pair()
            assert bottom.y - top.y == config.obstacle_height + config.obstacle_gap
            assert bottom.y - top.bottom == config.obstacle_gap

    def test_top_position_from_offset(self):
        config = GameConfig()
        spawner = ObstacleSpawner(config, seed=5)
        for _ in range(200):
            top, _ = spawner.spawn_pair()
            offset = -(config.obstacle_height // 4) - top.y
            assert 0 <= offset < config.canvas_height / 3

    def test_offsets_cover_range(self):
        spawner = ObstacleSpawner(seed=7)
        offsets = [spawner.sample_offset() for _ in range(5000)]
        assert min(offsets) == 0
        assert max(offsets) == 199

    def test_non_divisible_height(self):
        # 640 / 3 = 213.33..., so 213 is the largest allowed offset
        spawner = ObstacleSpawner(GameConfig(canvas_height=640), seed=7)
        offsets = [spawner.sample_offset() for _ in range(5000)]
        assert max(offsets) == 213

    def test_seed_reproducible(self):
        a = ObstacleSpawner(seed=42)
        b = ObstacleSpawner(seed=42)
        for _ in range(10):
            assert a.spawn_pair()[0].y == b.spawn_pair()[0].y

    def test_reseed(self):
        spawner = ObstacleSpawner(seed=42)
        first = [spawner.sample_offset() for _ in range(5)]
        spawner.seed(42)
        assert [spawner.sample_offset() for _ in range(5)] == first

    def test_fresh_instances_each_call(self):
        spawner = ObstacleSpawner(seed=1)
        pair_a = spawner.spawn_pair()
        pair_b = spawner.spawn_pair()
        assert pair_a[0] is not pair_b[0]
