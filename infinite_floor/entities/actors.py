"""
Actor models for the dungeon crawler.

Defines the player and the enemies, along with the loot an enemy carries.
"""

from pydantic import BaseModel, Field

from ..core.constants import KILLS_PER_MAX_HP
from ..core.utils import manhattan


class Actor(BaseModel):
    """Common state of anything that stands on the grid and has hit points."""

    x: int = Field(
        default=0,
        description="Column of the actor on the grid.",
    )
    y: int = Field(
        default=0,
        description="Row of the actor on the grid.",
    )
    hp: int = Field(
        description="Current hit points.",
    )
    max_hp: int = Field(
        description="Maximum hit points.",
    )
    defending: bool = Field(
        default=False,
        description="Transient flag set while the actor is guarding this turn.",
    )

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move_to(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def distance_to(self, other: "Actor") -> int:
        """Returns the Manhattan distance to another actor."""
        return manhattan(self.x, self.y, other.x, other.y)

    def heal(self, amount: int) -> int:
        """
        Heals the actor, capped at max_hp.

        Returns:
            int: The hit points actually restored.

        """
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before

    def take_damage(self, amount: int) -> None:
        self.hp -= max(0, amount)


class Player(Actor):
    """
    The player character. Persists across levels.
    """

    hp: int = Field(default=20, description="Current hit points.")
    max_hp: int = Field(default=20, description="Maximum hit points.")
    sword_damage: int = Field(
        default=2,
        description="Base damage of the player's sword.",
    )
    torch: int = Field(
        default=30,
        description="Torch fuel. Burns one unit per completed turn.",
    )
    coins: int = Field(default=0, description="Coins collected.")
    potions: int = Field(default=0, description="Potions currently held.")
    potions_used: int = Field(default=0, description="Potions drunk so far.")
    moves: int = Field(default=0, description="Move attempts made so far.")
    kills: int = Field(default=0, description="Enemies defeated so far.")
    level: int = Field(default=1, description="Current dungeon level.")

    def is_alive(self) -> bool:
        return self.hp > 0

    def record_kill(self) -> bool:
        """
        Counts a kill and applies the periodic max HP upgrade.

        Returns:
            bool: True if this kill raised max_hp.

        """
        self.kills += 1
        if self.kills % KILLS_PER_MAX_HP == 0:
            self.max_hp += 1
            return True
        return False


class LootDrop(BaseModel):
    """The loot an enemy hands over on death, rolled when it spawns."""

    coins: int = Field(default=0, ge=0, description="Coins dropped.")
    potions: int = Field(default=0, ge=0, description="Potions dropped.")
    torch: int = Field(default=0, ge=0, description="Torch fuel dropped.")
    hp: int = Field(default=0, ge=0, description="Hit points restored.")


class Enemy(Actor):
    """
    A hostile actor. It stays dormant until the player comes close enough,
    then chases and fights until it dies.
    """

    damage: int = Field(
        default=1,
        description="Damage rating of the enemy's attack.",
    )
    active: bool = Field(
        default=False,
        description="Whether the enemy has noticed the player. Never reset.",
    )
    alive: bool = Field(
        default=True,
        description="Whether the enemy is still alive.",
    )
    loot: LootDrop = Field(
        default_factory=LootDrop,
        description="Drops shown in the HUD and granted on death.",
    )

    @property
    def coins_drop(self) -> int:
        return self.loot.coins

    @property
    def potions_drop(self) -> int:
        return self.loot.potions

    @property
    def torch_drop(self) -> int:
        return self.loot.torch

    @property
    def hp_drop(self) -> int:
        return self.loot.hp

    def activate(self) -> bool:
        """
        Marks the enemy as having noticed the player.

        Returns:
            bool: True only on the first activation.

        """
        if self.active:
            return False
        self.active = True
        return True

    def take_damage(self, amount: int) -> None:
        super().take_damage(amount)
        if self.hp <= 0:
            self.alive = False
