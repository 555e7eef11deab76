"""
Dungeon generator module.

Builds a playable level: a bordered grid with random interior walls, scattered
items, a start tile and a stairs tile joined by a carved path, fewer dead ends,
and a level-scaled roster of dormant enemies. Every random placement is a
bounded retry loop that degrades to a forced placement or a skipped spawn, so
generation always terminates.
"""

import logging
import random
import time

from catchery import log_debug, log_warning
from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import (
    COIN_CHANCE,
    DEAD_END_PASSES,
    DIRECTIONS,
    ENEMY_PLACEMENT_ATTEMPTS,
    MAP_SIZE,
    PLACEMENT_ATTEMPTS,
    POTION_CHANCE,
    SWORD_CHANCE,
    TORCH_CHANCE,
    WALL_ODDS,
    PlacementOutcome,
    TileFlag,
)
from ..entities.actors import Enemy, LootDrop
from .grid import Grid, Position

logger = logging.getLogger(__name__)


class Placement(BaseModel):
    """
    Best-effort result of a bounded placement loop.

    A skipped placement has no position.
    """

    position: Position | None = Field(
        description="Where the thing was placed, None if it was skipped.",
    )
    outcome: PlacementOutcome = Field(
        description="Whether the placement succeeded, was forced or skipped.",
    )
    attempts: int = Field(
        description="Number of samples drawn.",
    )


class Dungeon(BaseModel):
    """A freshly generated level."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: int = Field(description="The level this dungeon was generated for.")
    grid: Grid = Field(description="The tile grid.")
    start: Position = Field(description="The player's entry tile.")
    stairs: Position = Field(description="The stairs-down tile.")
    enemies: list[Enemy] = Field(
        default_factory=list,
        description="Enemies in spawn order.",
    )
    placements: dict[str, Placement] = Field(
        default_factory=dict,
        description="How the start, the stairs and each enemy were placed.",
    )


def level_seed(level: int, base_seed: int | None = None) -> int:
    """
    Computes the seed used to generate a level.

    Args:
        level (int):
            The level being generated.
        base_seed (int | None):
            The run seed. None mixes wall-clock nanoseconds with the level, so
            two calls never share a seed.

    Returns:
        int:
            The seed for the level.

    """
    if base_seed is None:
        return time.time_ns() ^ level
    return base_seed * 1_000_003 + level


class DungeonGenerator:
    """
    Generates dungeon levels.

    The generator reseeds the random source it is given on every call, so a
    caller that shares its random source with the generator (as the session
    does) continues with the reseeded stream afterwards.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        size: int = MAP_SIZE,
    ) -> None:
        """
        Initialize the generator.

        Args:
            rng (random.Random | None):
                The random source to reseed and draw from.
            seed (int | None):
                The base seed, see level_seed().
            size (int):
                The side of the generated grid.

        """
        self.rng = rng or random.Random()
        self.seed = seed
        self.size = size

    def generate(self, level: int) -> Dungeon:
        """
        Generates a complete level.

        Args:
            level (int):
                The level number; it scales the enemy count and strength.

        Returns:
            Dungeon:
                The new level.

        """
        if level < 1:
            log_warning(
                f"Level {level} is below 1, generating level 1 instead",
                {"level": level, "context": "dungeon_generation"},
            )
            level = 1
        self.rng.seed(level_seed(level, self.seed))
        logger.debug("Generating level %d (%dx%d)", level, self.size, self.size)

        grid = self._build_walls()
        self._scatter_items(grid)
        start = self._place_start(grid)
        stairs = self._place_stairs(grid, start.position)
        self._carve_path(grid, start.position, stairs.position)
        passes = self._remove_dead_ends(grid)
        self._clear_misplaced_items(grid, start.position)
        self._finalize_stairs(grid, stairs.position)

        dungeon = Dungeon(
            level=level,
            grid=grid,
            start=start.position,
            stairs=stairs.position,
            placements={"start": start, "stairs": stairs},
        )
        self._spawn_enemies(dungeon)

        logger.debug(
            "Level %d ready: start=%s stairs=%s enemies=%d dead-end passes=%d\n%s",
            level,
            dungeon.start,
            dungeon.stairs,
            len(dungeon.enemies),
            passes,
            grid,
        )
        return dungeon

    # ---- Layout ----------------------------------------------------------

    def _sample_interior(self) -> Position:
        return (
            1 + self.rng.randrange(self.size - 2),
            1 + self.rng.randrange(self.size - 2),
        )

    def _build_walls(self) -> Grid:
        grid = Grid(self.size)
        for x, y in grid.positions():
            if grid.is_border(x, y) or self.rng.randrange(WALL_ODDS) == 0:
                grid.set(x, y, TileFlag.WALL)
        return grid

    def _scatter_items(self, grid: Grid) -> None:
        # Cells already holding something are skipped, never retried.
        for _ in range(self.size * self.size):
            x, y = self._sample_interior()
            if not grid.is_empty_floor(x, y):
                continue
            r = self.rng.randrange(100)
            if r < COIN_CHANCE:
                grid.set(x, y, TileFlag.COIN)
            elif r < TORCH_CHANCE:
                grid.set(x, y, TileFlag.TORCH)
            elif r < POTION_CHANCE:
                grid.set(x, y, TileFlag.POTION)
            elif r < SWORD_CHANCE:
                grid.set(x, y, TileFlag.SWORD_ITEM)

    def _place_start(self, grid: Grid) -> Placement:
        x, y = 0, 0
        for attempt in range(1, PLACEMENT_ATTEMPTS + 1):
            x, y = self._sample_interior()
            if not grid.is_wall(x, y):
                return Placement(position=(x, y), outcome=PlacementOutcome.PLACED, attempts=attempt)
        grid.make_floor(x, y)
        log_debug(
            "Start placement forced",
            {"position": (x, y), "attempts": PLACEMENT_ATTEMPTS},
        )
        return Placement(position=(x, y), outcome=PlacementOutcome.FORCED, attempts=PLACEMENT_ATTEMPTS)

    def _place_stairs(self, grid: Grid, start: Position) -> Placement:
        x, y = start
        for attempt in range(1, PLACEMENT_ATTEMPTS + 1):
            x, y = self._sample_interior()
            if not grid.is_wall(x, y) and (x, y) != start:
                return Placement(position=(x, y), outcome=PlacementOutcome.PLACED, attempts=attempt)
        if (x, y) == start:
            # Any other interior tile will do.
            x, y = next(p for p in grid.interior_positions() if p != start)
        grid.make_floor(x, y)
        log_debug(
            "Stairs placement forced",
            {"position": (x, y), "attempts": PLACEMENT_ATTEMPTS},
        )
        return Placement(position=(x, y), outcome=PlacementOutcome.FORCED, attempts=PLACEMENT_ATTEMPTS)

    def _carve_path(self, grid: Grid, start: Position, stairs: Position) -> None:
        """Clears an L-shaped path: all horizontal steps, then all vertical."""
        cx, cy = start
        sx, sy = stairs
        while cx != sx:
            cx += 1 if sx > cx else -1
            grid.make_floor(cx, cy)
        while cy != sy:
            cy += 1 if sy > cy else -1
            grid.make_floor(cx, cy)

    def _remove_dead_ends(self, grid: Grid) -> int:
        """
        Opens a wall next to every floor tile that has at most one exit.

        Returns:
            int: The number of passes made.

        """
        passes = 0
        changed = True
        while changed and passes < DEAD_END_PASSES:
            changed = False
            passes += 1
            for x, y in grid.interior_positions():
                if not grid.is_walkable(x, y) or grid.blocked_neighbours(x, y) < 3:
                    continue
                # Up to four random picks, repeats allowed.
                for _ in range(len(DIRECTIONS)):
                    dx, dy = DIRECTIONS[self.rng.randrange(len(DIRECTIONS))]
                    tx, ty = x + dx, y + dy
                    if grid.is_interior(tx, ty) and not grid.is_walkable(tx, ty):
                        grid.make_floor(tx, ty)
                        changed = True
                        break
        return passes

    def _clear_misplaced_items(self, grid: Grid, start: Position) -> None:
        for x, y in grid.interior_positions():
            if grid.has(x, y, TileFlag.WALL) or (x, y) == start:
                grid.clear_items(x, y)

    def _finalize_stairs(self, grid: Grid, stairs: Position) -> None:
        x, y = stairs
        grid.clear_items(x, y)
        if grid.is_wall(x, y):
            grid.make_floor(x, y)
        grid.add_flag(x, y, TileFlag.STAIRS_DOWN)

    # ---- Enemies ---------------------------------------------------------

    def _spawn_enemies(self, dungeon: Dungeon) -> None:
        count = self.rng.randint(0, dungeon.level)
        for index in range(count):
            placement = self._place_enemy(dungeon)
            dungeon.placements[f"enemy_{index}"] = placement
            if placement.position is None:
                log_debug(
                    "Enemy spawn skipped",
                    {"level": dungeon.level, "index": index, "attempts": placement.attempts},
                )
                continue
            enemy = self.roll_enemy(dungeon.level)
            enemy.move_to(*placement.position)
            dungeon.enemies.append(enemy)

    def _place_enemy(self, dungeon: Dungeon) -> Placement:
        occupied = {enemy.position for enemy in dungeon.enemies}
        for attempt in range(1, ENEMY_PLACEMENT_ATTEMPTS + 1):
            pos = self._sample_interior()
            if (
                dungeon.grid.is_empty_floor(*pos)
                and pos != dungeon.start
                and pos != dungeon.stairs
                and pos not in occupied
            ):
                return Placement(position=pos, outcome=PlacementOutcome.PLACED, attempts=attempt)
        return Placement(position=None, outcome=PlacementOutcome.SKIPPED, attempts=ENEMY_PLACEMENT_ATTEMPTS)

    def roll_enemy(self, level: int) -> Enemy:
        """
        Rolls the stats and the loot of a new enemy for the given level.

        Args:
            level (int):
                The level the enemy spawns on.

        Returns:
            Enemy:
                A dormant enemy at (0, 0).

        """
        rng = self.rng
        hp = 2 + rng.randint(0, 2 + level)
        damage = 1 + rng.randint(0, level // 2)
        loot = LootDrop(
            coins=1 + rng.randint(0, level // 2 + 1),
            potions=1 if rng.randrange(10) == 0 else 0,
            torch=rng.randint(0, level // 2 + 2),
            hp=1 + rng.randint(0, level // 2),
        )
        return Enemy(hp=hp, max_hp=hp, damage=damage, loot=loot)
