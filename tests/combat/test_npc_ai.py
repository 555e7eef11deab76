"""
Tests for the enemy AI helpers.
"""

import pytest

from infinite_floor.combat.npc_ai import (
    activation_distance,
    choose_adjacent_action,
    choose_chase_step,
    notices_player,
)
from infinite_floor.core.constants import EnemyAction, TileFlag
from infinite_floor.entities.actors import Player
from infinite_floor.world.grid import Grid

from conftest import StubRandom, make_enemy


@pytest.mark.parametrize(
    "level, expected",
    [(0, 4), (1, 4), (2, 5), (3, 5), (10, 9)],
)
def test_activation_distance(level, expected):
    assert activation_distance(level) == expected


def test_notices_player_at_activation_distance():
    player = Player(x=7, y=7)
    assert notices_player(make_enemy(11, 7), player, 1)
    assert not notices_player(make_enemy(12, 7), player, 1)
    assert notices_player(make_enemy(12, 7), player, 2)


def test_adjacent_action_attacks_seventy_percent():
    assert choose_adjacent_action(StubRandom(randrange_value=0)) == EnemyAction.ATTACK
    assert choose_adjacent_action(StubRandom(randrange_value=69)) == EnemyAction.ATTACK
    assert choose_adjacent_action(StubRandom(randrange_value=70)) == EnemyAction.DEFEND
    assert choose_adjacent_action(StubRandom(randrange_value=99)) == EnemyAction.DEFEND


def test_chase_prefers_x_axis():
    grid = Grid.bordered()
    step = choose_chase_step(make_enemy(9, 9), Player(x=7, y=7), grid, set())
    assert step == (8, 9)


def test_chase_falls_back_to_y_axis():
    grid = Grid.bordered()
    grid.set(8, 9, TileFlag.WALL)
    step = choose_chase_step(make_enemy(9, 9), Player(x=7, y=7), grid, set())
    assert step == (9, 8)


def test_chase_waits_when_both_axes_blocked():
    grid = Grid.bordered()
    grid.set(8, 9, TileFlag.WALL)
    step = choose_chase_step(make_enemy(9, 9), Player(x=7, y=7), grid, {(9, 8)})
    assert step is None


def test_chase_on_same_column_moves_vertically():
    grid = Grid.bordered()
    step = choose_chase_step(make_enemy(7, 10), Player(x=7, y=7), grid, set())
    assert step == (7, 9)


def test_chase_never_steps_onto_player():
    grid = Grid.bordered()
    # Diagonal neighbour: both greedy steps are free floor, neither is the player.
    assert choose_chase_step(make_enemy(8, 8), Player(x=7, y=7), grid, set()) == (7, 8)
    # Adjacent enemies fight instead of chasing, but the step is still refused.
    assert choose_chase_step(make_enemy(8, 7), Player(x=7, y=7), grid, set()) is None


def test_chase_can_step_onto_items():
    grid = Grid.bordered()
    grid.set(8, 9, TileFlag.COIN)
    step = choose_chase_step(make_enemy(9, 9), Player(x=7, y=7), grid, set())
    assert step == (8, 9)
