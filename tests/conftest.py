"""
Shared fixtures for the test-suite.
"""

import random

import pytest

from infinite_floor.core.constants import TileFlag
from infinite_floor.core.settings import GameSettings
from infinite_floor.entities.actors import Enemy, LootDrop
from infinite_floor.state.session import GameSession
from infinite_floor.world.generator import Dungeon
from infinite_floor.world.grid import Grid


class StubRandom(random.Random):
    """
    Predictable random source: randint() always returns its low (or high)
    bound and randrange() always returns the same value, clamped to range.
    """

    def __init__(self, *, high: bool = False, randrange_value: int = 0) -> None:
        self.high = high
        self.randrange_value = randrange_value
        super().__init__(0)

    def randint(self, a, b):
        return b if self.high else a

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            start, stop = 0, start
        return min(start + self.randrange_value, stop - 1)


def make_enemy(x: int, y: int, hp: int = 3, damage: int = 1, active: bool = False, loot: LootDrop | None = None) -> Enemy:
    return Enemy(x=x, y=y, hp=hp, max_hp=hp, damage=damage, active=active, loot=loot or LootDrop())


def make_session(
    grid: Grid | None = None,
    player_pos: tuple[int, int] = (7, 7),
    stairs: tuple[int, int] = (13, 13),
    enemies: list[Enemy] | None = None,
    level: int = 1,
    seed: int = 1234,
    **settings,
) -> GameSession:
    """Builds a session on a hand-made level instead of a generated one."""
    if grid is None:
        grid = Grid.bordered()
    if not grid.is_wall(*stairs):
        grid.add_flag(*stairs, TileFlag.STAIRS_DOWN)
    session = GameSession(GameSettings(seed=seed, **settings))
    session.install(
        Dungeon(
            level=level,
            grid=grid,
            start=player_pos,
            stairs=stairs,
            enemies=enemies or [],
        )
    )
    return session


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def enemy_factory():
    return make_enemy
