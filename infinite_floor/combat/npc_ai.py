"""
Enemy AI for the dungeon crawler.

Enemies sleep until the player comes within their activation distance, then
either fight when adjacent (mostly attacking, sometimes guarding) or take one
greedy step toward the player, trying the x-axis before the y-axis.
"""

import random

from ..core.constants import (
    ACTIVATION_BASE_DISTANCE,
    ENEMY_ATTACK_CHANCE,
    EnemyAction,
)
from ..core.utils import sign
from ..entities.actors import Enemy, Player
from ..world.grid import Grid, Position


def activation_distance(level: int) -> int:
    """
    Returns the Manhattan distance at which dormant enemies notice the player.

    Args:
        level (int):
            The current level; values below 1 are treated as 1.

    Returns:
        int:
            The activation distance.

    """
    return ACTIVATION_BASE_DISTANCE + max(level, 1) // 2


def notices_player(enemy: Enemy, player: Player, level: int) -> bool:
    return enemy.distance_to(player) <= activation_distance(level)


def choose_adjacent_action(rng: random.Random) -> EnemyAction:
    """Picks what an enemy next to the player does this turn."""
    if rng.randrange(100) < ENEMY_ATTACK_CHANCE:
        return EnemyAction.ATTACK
    return EnemyAction.DEFEND


def _can_step(
    grid: Grid,
    x: int,
    y: int,
    player: Player,
    occupied: set[Position],
) -> bool:
    return (
        grid.is_interior(x, y)
        and grid.is_walkable(x, y)
        and (x, y) not in occupied
        and (x, y) != player.position
    )


def choose_chase_step(
    enemy: Enemy,
    player: Player,
    grid: Grid,
    occupied: set[Position],
) -> Position | None:
    """
    Chooses one greedy step toward the player.

    Args:
        enemy (Enemy):
            The chasing enemy.
        player (Player):
            The player being chased.
        grid (Grid):
            The level grid.
        occupied (set[Position]):
            Tiles held by other live enemies.

    Returns:
        Position | None:
            The tile to step on, or None if both axes are blocked.

    """
    dx = sign(player.x - enemy.x)
    dy = sign(player.y - enemy.y)
    if dx != 0 and _can_step(grid, enemy.x + dx, enemy.y, player, occupied):
        return enemy.x + dx, enemy.y
    if dy != 0 and _can_step(grid, enemy.x, enemy.y + dy, player, occupied):
        return enemy.x, enemy.y + dy
    return None
