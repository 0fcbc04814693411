"""
Per-tick systems for the PLAYING phase.

Each system is a small dataclass with a ``name``, a ``phase``, an ``order``
and a ``step(ctx)`` method; a mini-arcade ``SystemPipeline`` runs them by
ascending order. Later systems rely on what earlier ones mutated in the same
tick.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.scenes.systems.base_system import BaseSystem
from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from wave_defender.engine.collision import collides
from wave_defender.engine.world import TickContext, spawn_wave
from wave_defender.entities import Enemy
from wave_defender.utils import logger


@dataclass
class PlayerControlSystem:
    """
    Apply move/fire intents to the player.
    """

    name: str = "player_control"
    phase: int = SystemPhase.SIMULATION
    order: int = 10

    def step(self, ctx: TickContext):
        player = ctx.player
        player.moving_left = ctx.intent.move_left
        player.moving_right = ctx.intent.move_right

        if not ctx.intent.fire:
            return

        projectile = player.shoot()
        if projectile is not None:
            ctx.world.projectiles.append(projectile)
            ctx.shots_fired += 1
            logger.debug(
                f"Player fired at x={projectile.x:.0f}, "
                f"{ctx.shots_fired} shot(s) this tick."
            )


@dataclass
class MotionSystem:
    """Let every entity advance by one tick on its own."""

    name: str = "motion"
    phase: int = SystemPhase.SIMULATION
    order: int = 20

    def step(self, ctx: TickContext):
        ctx.player.update()
        for enemy in ctx.world.enemies:
            enemy.update()
        for projectile in ctx.world.projectiles:
            projectile.update()


@dataclass
class FormationSystem:
    """
    Move the enemies as one rigid formation:
    - If any alive enemy touches a side wall
    - every enemy drops down and reverses
    """

    name: str = "formation"
    phase: int = SystemPhase.SIMULATION
    order: int = 30

    def step(self, ctx: TickContext):
        field_width = ctx.config.width
        hit_wall = any(
            e.x <= 0 or e.x + e.width >= field_width
            for e in ctx.world.enemies
            if e.alive
        )
        if not hit_wall:
            return

        # dead ones too; they are pruned later this tick
        for enemy in ctx.world.enemies:
            enemy.drop_and_reverse(ctx.config.drop_distance)


@dataclass
class EnemyFireSystem:
    """
    Let the front enemy of each column fire at random.

    An enemy is blocked when another alive enemy sits roughly in the same
    column and lower on screen.
    """

    name: str = "enemy_fire"
    phase: int = SystemPhase.SIMULATION
    order: int = 35

    def step(self, ctx: TickContext):
        alive = ctx.world.alive_enemies()
        if not alive:
            return

        for enemy in self.shooters(alive, ctx.config.column_tolerance):
            if ctx.rng.random() < ctx.config.enemy_fire_chance:
                ctx.world.projectiles.append(
                    enemy.shoot(field_height=ctx.config.height)
                )
                logger.debug(
                    f"Enemy at ({enemy.x:.0f}, {enemy.y:.0f}) fired."
                )

    @staticmethod
    def shooters(alive: list[Enemy], tolerance: float) -> list[Enemy]:
        """Return the unblocked enemies, in collection order."""
        return [
            enemy
            for enemy in alive
            if not any(
                other is not enemy
                and abs(other.x - enemy.x) < tolerance
                and other.y > enemy.y
                for other in alive
            )
        ]


@dataclass
class CollisionSystem:
    """
    Resolve projectile and contact hits.

    Only flags entities dead; removal happens in :class:`PruneSystem`.
    """

    name: str = "collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 40

    def step(self, ctx: TickContext):
        world = ctx.world
        player = ctx.player

        for projectile in world.projectiles:
            if not projectile.alive:
                continue

            if projectile.is_player_owned:
                for enemy in world.enemies:
                    if collides(projectile, enemy):
                        enemy.alive = False
                        projectile.alive = False
                        world.score += enemy.points
                        ctx.kills += 1
                        break  # one projectile, one enemy
            elif collides(projectile, player):
                projectile.alive = False
                player.lose_life()
                ctx.hits_taken += 1

        # contact costs a life on top of any projectile hit this tick
        for enemy in world.enemies:
            if collides(enemy, player):
                player.lose_life()
                enemy.alive = False
                ctx.hits_taken += 1

        if ctx.kills:
            logger.debug(
                f"{ctx.kills} enemy(ies) destroyed, score {world.score}."
            )
        if ctx.hits_taken:
            logger.debug(
                f"Player hit {ctx.hits_taken} time(s), {player.lives} left."
            )


@dataclass
class PruneSystem:
    """Drop dead projectiles and enemies."""

    name: str = "prune"
    phase: int = SystemPhase.SIMULATION
    order: int = 50

    def step(self, ctx: TickContext):
        world = ctx.world
        world.projectiles = [p for p in world.projectiles if p.alive]
        world.enemies = [e for e in world.enemies if e.alive]


@dataclass
class WaveSystem:
    """
    Spawn the next, faster wave once the formation is wiped out.
    """

    name: str = "wave"
    phase: int = SystemPhase.SIMULATION
    order: int = 60

    def step(self, ctx: TickContext):
        if ctx.world.alive_enemies():
            return

        ctx.world.base_speed += ctx.config.speed_increment
        spawn_wave(ctx.world, ctx.config)
        logger.info(f"Wave {ctx.world.wave} incoming.")


@dataclass
class DefeatSystem:
    """
    Flag the tick as lost when the player is dead or the enemies landed.
    """

    name: str = "defeat"
    phase: int = SystemPhase.SIMULATION
    order: int = 70

    def step(self, ctx: TickContext):
        if not ctx.player.alive:
            ctx.defeated = True
            return

        line = ctx.config.invasion_line
        if any(e.alive and e.bottom >= line for e in ctx.world.enemies):
            ctx.defeated = True


def default_systems() -> list[BaseSystem[TickContext]]:
    return [
        PlayerControlSystem(),
        MotionSystem(),
        FormationSystem(),
        EnemyFireSystem(),
        CollisionSystem(),
        PruneSystem(),
        WaveSystem(),
        DefeatSystem(),
    ]


def build_pipeline(
    systems: list[BaseSystem[TickContext]] | None = None,
) -> SystemPipeline[TickContext]:
    """
    Build the PLAYING pipeline.

    :param systems: Systems to run; defaults to :func:`default_systems`.
    :type systems: list[BaseSystem[TickContext]] | None

    :return: A pipeline sorted by phase and order.
    :rtype: SystemPipeline[TickContext]
    """
    pipeline: SystemPipeline[TickContext] = SystemPipeline()
    pipeline.extend(default_systems() if systems is None else systems)
    return pipeline
