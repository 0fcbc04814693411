"""
Tests for wave layout and progression.
"""

import pytest

from wave_defender.config import GameConfig

from wave_defender.engine.systems import WaveSystem
from wave_defender.engine.world import (
    World,
    enemy_kind_for_row,
    spawn_wave,
    wave_columns,
)
from wave_defender.entities import Direction, Projectile


class TestWaveLayout:
    """Grid size, kinds and placement."""

    @pytest.mark.parametrize(
        "wave, columns",
        [(1, 6), (2, 7), (3, 8), (5, 10), (6, 10), (20, 10)],
    )
    def test_columns_grow_then_cap(self, config, wave, columns):
        assert wave_columns(wave, config) == columns

    def test_row_kinds(self):
        assert [enemy_kind_for_row(r) for r in range(4)] == [0, 1, 1, 2]

    def test_first_wave_is_six_by_four(self, config):
        world = World(base_speed=1.0)

        spawn_wave(world, config)

        assert world.wave == 1
        assert len(world.enemies) == 24
        assert {e.velocity for e in world.enemies} == {1.0}

    def test_row_point_values(self, config):
        world = World(wave=3)

        spawn_wave(world, config)

        columns = wave_columns(4, config)
        rows = [
            world.enemies[r * columns : (r + 1) * columns] for r in range(4)
        ]
        assert [{e.points for e in row} for row in rows] == [
            {30},
            {20},
            {20},
            {10},
        ]

    def test_grid_is_centered(self, config):
        world = World()

        spawn_wave(world, config)

        xs = sorted({e.x for e in world.enemies})
        ys = sorted({e.y for e in world.enemies})
        assert xs[0] == 210
        assert xs[1] - xs[0] == 50
        assert ys == [60, 102, 144, 186]

    def test_grid_wider_than_field_truncates_toward_zero(self):
        narrow = GameConfig(width=201)
        world = World()

        spawn_wave(world, narrow)

        # (201 - 300) / 2 = -49.5 truncates to -49
        assert min(e.x for e in world.enemies) == -39

    def test_spawning_clears_projectiles_and_old_enemies(self, config):
        world = World()
        spawn_wave(world, config)
        world.projectiles.append(
            Projectile(x=0, y=0, direction=Direction.DOWN)
        )

        spawn_wave(world, config)

        assert world.wave == 2
        assert world.projectiles == []
        assert len(world.enemies) == 28


class TestWaveSystem:
    """Clearing a wave speeds up and spawns the next one."""

    def test_no_spawn_while_enemies_alive(self, config, make_ctx):
        world = World()
        spawn_wave(world, config)

        WaveSystem().step(make_ctx(world))

        assert world.wave == 1

    def test_clearing_wave_two_spawns_faster_wave_three(
        self, config, make_ctx
    ):
        world = World(wave=1, base_speed=1.15)
        spawn_wave(world, config)
        for enemy in world.enemies:
            enemy.alive = False

        WaveSystem().step(make_ctx(world))

        assert world.wave == 3
        assert world.base_speed == pytest.approx(1.30)
        assert len(world.enemies) == 8 * 4
        assert all(
            e.velocity == pytest.approx(1.30) for e in world.enemies
        )
