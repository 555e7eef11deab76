"""
Session state for a single run.

Replaces free-standing globals with one explicit object that owns the grid,
the player, the enemy list, the message log and the random source. The
generator and the turn engine receive it by reference.
"""

import logging
import random

from ..core.constants import DIRECTIONS, EndReason
from ..core.logging import log_info
from ..core.message_log import MessageLog
from ..core.settings import GameSettings
from ..entities.actors import Enemy, Player
from ..world.generator import Dungeon, DungeonGenerator
from ..world.grid import Grid, Position

logger = logging.getLogger(__name__)


class GameSession:
    """
    The whole mutable state of a run.

    Attributes:
        settings (GameSettings):
            The start-up configuration.
        rng (random.Random):
            The random source shared by the generator and the turn engine.
        player (Player):
            The player, kept across levels.
        enemies (list[Enemy]):
            The enemies of the current level, in spawn order.
        log (MessageLog):
            The in-game message log.
        game_end_reason (str):
            Empty while the run is going, otherwise why it ended.

    """

    def __init__(self, settings: GameSettings | None = None) -> None:
        self.settings = settings or GameSettings()
        self.rng = random.Random(self.settings.seed)
        self.generator = DungeonGenerator(rng=self.rng, seed=self.settings.seed)
        self.log = MessageLog()
        self.player = Player(
            hp=self.settings.player_hp,
            max_hp=self.settings.player_hp,
            sword_damage=self.settings.sword_damage,
            torch=self.settings.torch,
            level=self.settings.start_level,
        )
        self.dungeon: Dungeon | None = None
        self.enemies: list[Enemy] = []
        self.game_end_reason: str = ""

    @classmethod
    def new_game(cls, settings: GameSettings | None = None) -> "GameSession":
        """Creates a session and generates its first level."""
        session = cls(settings)
        session.enter_level(session.player.level)
        session.log.push("Game started.")
        return session

    # ---- Level management ------------------------------------------------

    def enter_level(self, level: int) -> Dungeon:
        """
        Generates and installs a new level.

        Args:
            level (int):
                The level to generate.

        Returns:
            Dungeon:
                The installed level.

        """
        dungeon = self.generator.generate(level)
        self.install(dungeon)
        return dungeon

    def install(self, dungeon: Dungeon) -> None:
        """
        Replaces the current level wholesale: the old grid and enemy list are
        dropped and the player is moved to the new start tile.
        """
        self.dungeon = dungeon
        self.enemies = dungeon.enemies
        self.player.level = dungeon.level
        self.player.move_to(*dungeon.start)
        self.log.push(f"Entering level {dungeon.level}.")
        log_info(
            "Entered level",
            {"level": dungeon.level, "enemies": len(self.enemies)},
        )

    @property
    def grid(self) -> Grid:
        if self.dungeon is None:
            raise RuntimeError("No level has been generated yet")
        return self.dungeon.grid

    @property
    def level(self) -> int:
        return self.player.level

    @property
    def stairs(self) -> Position | None:
        return self.dungeon.stairs if self.dungeon else None

    # ---- Enemy queries ---------------------------------------------------

    def alive_enemies(self) -> list[Enemy]:
        return [enemy for enemy in self.enemies if enemy.alive]

    def enemy_at(self, x: int, y: int) -> Enemy | None:
        """Returns the live enemy standing on (x, y), if any."""
        for enemy in self.enemies:
            if enemy.alive and enemy.x == x and enemy.y == y:
                return enemy
        return None

    def adjacent_enemy(self) -> Enemy | None:
        """Returns the first live enemy orthogonally next to the player."""
        for dx, dy in DIRECTIONS:
            enemy = self.enemy_at(self.player.x + dx, self.player.y + dy)
            if enemy is not None:
                return enemy
        return None

    # ---- Run state -------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return bool(self.game_end_reason)

    def end(self, reason: EndReason) -> None:
        """Ends the run; the first reason recorded wins."""
        if self.game_end_reason:
            return
        self.game_end_reason = reason.value
        logger.info("Run ended: %s", reason.value)
