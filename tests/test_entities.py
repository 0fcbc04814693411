"""
Tests for the player, enemy and projectile entities.
"""

import pytest

from wave_defender.entities import Direction, Enemy, Player, Projectile


class TestPlayer:
    """Movement, cooldown and lives."""

    def test_starts_centered_with_three_lives(self):
        player = Player(field_width=700, field_height=650)

        assert player.x == 325
        assert player.y == 590
        assert player.lives == 3
        assert player.cooldown == 0
        assert player.alive

    def test_moves_left_and_right_by_speed(self):
        player = Player(field_width=700, field_height=650)

        player.moving_left = True
        player.update()
        assert player.x == 320

        player.moving_left = False
        player.moving_right = True
        player.update()
        player.update()
        assert player.x == 330

    def test_both_intents_cancel_out(self):
        player = Player(field_width=700, field_height=650)
        player.moving_left = player.moving_right = True

        player.update()

        assert player.x == 325

    def test_clamped_to_field(self):
        player = Player(field_width=700, field_height=650)

        player.x = 2
        player.moving_left = True
        player.update()
        assert player.x == 0

        player.moving_left = False
        player.moving_right = True
        player.x = 648
        player.update()
        assert player.x == 650

    def test_pushed_outside_the_field_snaps_back(self):
        player = Player(field_width=700, field_height=650)

        player.x = -30
        player.update()
        assert player.x == 0

        player.x = 900
        player.update()
        assert player.x == 650

    def test_shoot_sets_cooldown_and_spawns_centered_projectile(self):
        player = Player(field_width=700, field_height=650)

        projectile = player.shoot()

        assert projectile is not None
        assert projectile.direction is Direction.UP
        assert projectile.is_player_owned
        assert projectile.x == player.center_x - 3
        assert projectile.y == player.y - 15
        assert player.cooldown == 15
        assert not player.can_shoot

    def test_no_shot_while_cooling_down(self):
        player = Player()
        player.shoot()

        assert player.shoot() is None
        assert player.cooldown == 15

    def test_cooldown_never_negative(self):
        player = Player()
        player.shoot()

        for _ in range(20):
            player.update()

        assert player.cooldown == 0
        assert player.shoot() is not None

    def test_losing_last_life_kills(self):
        player = Player()

        player.lose_life()
        player.lose_life()
        assert player.alive
        assert player.lives == 1

        player.lose_life()
        assert player.lives == 0
        assert not player.alive

    def test_reset_restores_start_state(self):
        player = Player(field_width=700, field_height=650)
        player.x = 10
        player.moving_left = True
        player.shoot()
        for _ in range(3):
            player.lose_life()

        player.reset()

        assert player.x == 325
        assert player.lives == 3
        assert player.cooldown == 0
        assert not player.moving_left
        assert player.alive


class TestEnemy:
    """Point values and formation moves."""

    @pytest.mark.parametrize("kind, points", [(0, 30), (1, 20), (2, 10)])
    def test_points_from_kind(self, kind, points):
        assert Enemy(x=0, y=0, kind=kind).points == points

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            Enemy(x=0, y=0, kind=3)

    def test_update_only_moves_horizontally(self):
        enemy = Enemy(x=100, y=50, kind=1, velocity=-1.5)

        enemy.update()

        assert enemy.x == 98.5
        assert enemy.y == 50

    def test_drop_and_reverse(self):
        enemy = Enemy(x=100, y=50, kind=1, velocity=1.15)

        enemy.drop_and_reverse(20)

        assert enemy.y == 70
        assert enemy.velocity == -1.15

    def test_shoot_spawns_downward_projectile_below(self):
        enemy = Enemy(x=100, y=50, kind=2)

        projectile = enemy.shoot(field_height=650)

        assert projectile.direction is Direction.DOWN
        assert projectile.is_enemy_owned
        assert projectile.x == enemy.center_x - 3
        assert projectile.y == enemy.y + enemy.height + 5

    def test_shot_carries_the_field_height(self):
        enemy = Enemy(x=100, y=50, kind=2)

        assert enemy.shoot().field_height == 650
        assert enemy.shoot(field_height=400).max_y == 400 + 150


class TestProjectile:
    """Straight flight and off-field removal."""

    def test_moves_by_speed_times_direction(self):
        up = Projectile(x=10, y=300, direction=Direction.UP)
        down = Projectile(x=10, y=300, direction=Direction.DOWN)

        up.update()
        down.update()

        assert up.y == 293
        assert down.y == 307

    def test_dies_past_top_margin_and_not_before(self):
        projectile = Projectile(x=10, y=-13, direction=Direction.UP)

        projectile.update()
        assert projectile.y == -20
        assert projectile.alive

        projectile.update()
        assert not projectile.alive

    def test_dies_past_bottom_margin_and_not_before(self):
        projectile = Projectile(
            x=10, y=793, direction=Direction.DOWN, field_height=650
        )

        projectile.update()
        assert projectile.y == 800
        assert projectile.alive

        projectile.update()
        assert not projectile.alive

    def test_bounds_truncate_position(self):
        projectile = Projectile(x=10.9, y=20.5, direction=Direction.UP)

        assert tuple(projectile.bounds) == (10, 20, 6, 14)
