"""
Damage module for the dungeon crawler.

Handles the damage formulas shared by the player and the enemies: a base
rating plus a bonus roll, minus a guard roll when the target is defending,
never below zero.
"""

import random

from pydantic import BaseModel, Field

from ..core.utils import roll
from ..entities.actors import Enemy, Player


class DamageRoll(BaseModel):
    """The breakdown of one resolved attack."""

    raw: int = Field(
        description="Damage before the target's guard is applied.",
    )
    reduction: int = Field(
        default=0,
        description="Damage absorbed because the target was defending.",
    )

    @property
    def dealt(self) -> int:
        """The damage actually applied, never negative."""
        return max(0, self.raw - self.reduction)

    def __str__(self) -> str:
        if self.reduction:
            return f"{self.dealt} ({self.raw} - {self.reduction})"
        return str(self.dealt)


def roll_damage(
    rng: random.Random,
    rating: int,
    guard: int,
    defending: bool,
) -> DamageRoll:
    """
    Rolls the damage of one attack.

    Args:
        rng (random.Random):
            The random source.
        rating (int):
            The attacker's damage rating; the raw damage is in
            [rating, 2 * rating].
        guard (int):
            The target's own damage rating, which bounds the reduction roll.
        defending (bool):
            Whether the target is defending this turn.

    Returns:
        DamageRoll:
            The rolled damage.

    """
    raw = rating + roll(rng, 0, max(0, rating))
    reduction = roll(rng, 0, max(0, guard)) if defending else 0
    return DamageRoll(raw=raw, reduction=reduction)


def player_attack_damage(rng: random.Random, player: Player, enemy: Enemy) -> DamageRoll:
    """Rolls the player's sword against an enemy."""
    return roll_damage(rng, player.sword_damage, enemy.damage, enemy.defending)


def enemy_attack_damage(rng: random.Random, enemy: Enemy, player: Player) -> DamageRoll:
    """Rolls an enemy's attack against the player."""
    return roll_damage(rng, enemy.damage, player.sword_damage, player.defending)
